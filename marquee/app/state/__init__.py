"""FletXr reactive state for the movie browser.

Architecture:
- DataStore: movie catalog, read queries, simulated async load
- PathStore: navigation stack of routes
- AppState: shell status line and log feed
- Store: service locator for accessing all of the above from any component
"""

from .app_state import AppState
from .data_store import DataStore
from .path_store import PathStore
from .store import Store

__all__ = ["AppState", "DataStore", "PathStore", "Store"]

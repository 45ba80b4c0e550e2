"""Global State Store - Service Locator Pattern.

Provides centralized access to the catalog and navigation state from any
UI component. The two stores never reference each other; the UI reads
and writes both through this locator.
"""

from __future__ import annotations

from typing import Optional

from .app_state import AppState
from .data_store import CatalogLoader, DataStore
from .path_store import PathStore
from marquee.shared.core.configuration import SystemConfig
from marquee.shared.core.event_bus import EventBus
from marquee.shared.infrastructure.dataset import BundleLoader


class Store:
    """Global state store for the application.

    Usage:
        # During app initialization
        Store.initialize(event_bus, config)

        # In any UI component
        store = Store.get()
        store.path.push(route)
    """

    _instance: Optional['Store'] = None

    def __init__(
        self,
        event_bus: EventBus,
        config: Optional[SystemConfig] = None,
        loader: Optional[CatalogLoader] = None,
    ) -> None:
        """Initialize store with event bus.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            event_bus: The shared event bus instance
            config: Loaded configuration; pydantic defaults when omitted
            loader: Catalog loader override, mainly for tests
        """
        self.bus = event_bus
        self.config = config or SystemConfig()

        if loader is None:
            loader = BundleLoader(self.config.data.dataset_path)

        self.data = DataStore(event_bus, loader=loader, load_delay=self.config.data.load_delay)
        self.path = PathStore()
        self.app = AppState(event_bus)

    @classmethod
    def initialize(
        cls,
        event_bus: EventBus,
        config: Optional[SystemConfig] = None,
        loader: Optional[CatalogLoader] = None,
    ) -> 'Store':
        """Initialize the global store instance.

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(event_bus, config, loader)
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the store instance.

        Primarily used for testing. In production, store persists for
        application lifetime.
        """
        cls._instance = None

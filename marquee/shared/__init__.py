"""
Marquee Shared Kernel
=====================

UI-independent building blocks.

Architecture:
- core: EventBus, configuration, error types
- domain: catalog entities and navigation routes
- infrastructure: dataset loading
"""

__version__ = "0.1.0"

__all__ = []

"""
Shared Core Module
==================

Event system, configuration and error types.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Errors
from .errors import CatalogLoadError, ConfigurationError, MarqueeError

# Configuration
from .configuration import (
    ConfigManager,
    DataConfig,
    LoggingConfig,
    SystemConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Errors
    "MarqueeError",
    "CatalogLoadError",
    "ConfigurationError",
    # Configuration
    "ConfigManager",
    "DataConfig",
    "LoggingConfig",
    "SystemConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
]

"""Canonical event topics and payload factories for Marquee."""

from __future__ import annotations

import time
from typing import Any, Dict, List, Literal

from .event_bus import EventPayload

# Catalog lifecycle
TOPIC_CATALOG_LOADING = "catalog.loading"
TOPIC_CATALOG_LOADED = "catalog.loaded"
TOPIC_CATALOG_LOAD_FAILED = "catalog.load_failed"

# Shell
TOPIC_LOGS_EVENT = "logs.event"


def create_catalog_loading_event(source: str) -> EventPayload:
    """Create a catalog loading event (load started, delay pending)."""
    return {
        "source": source,
        "ts": time.time(),
    }


def create_catalog_loaded_event(count: int, titles: List[str]) -> EventPayload:
    """Create a catalog loaded event."""
    return {
        "count": count,
        "titles": titles,
        "ts": time.time(),
    }


def create_catalog_load_failed_event(error: BaseException) -> EventPayload:
    """Create a catalog load failure event.

    Only the error text travels on the bus; the traceback goes to the log.
    """
    return {
        "error": str(error),
        "error_type": type(error).__name__,
        "ts": time.time(),
    }


def create_logs_event(
    message: str,
    level: Literal["info", "warning", "error", "success"] = "info",
    topic: str | None = None,
) -> EventPayload:
    """Create a Log event."""
    payload: Dict[str, Any] = {
        "message": message,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }
    return payload

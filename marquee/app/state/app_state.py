"""Application Shell State.

Status line and log feed for the shell. Catalog lifecycle events arrive on
the EventBus and are turned into reactive values the UI listens to. The
catalog and path themselves live in DataStore and PathStore.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fletx.core import RxList, RxStr

from marquee.shared.core import events
from marquee.shared.core.event_bus import EventBus, EventPayload

logger = logging.getLogger(__name__)

MAX_LOG_ENTRIES = 200


class AppState:
    """Reactive state for the application shell.

    Subscribes to EventBus catalog events and mirrors them into a status
    line and a bounded log feed.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.bus = event_bus

        self.status_text: RxStr = RxStr("Starting...")
        # Each entry: {message, level, topic, ts}
        self.logs: RxList[Dict[str, Any]] = RxList([])

        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus events. Safe to call more than once."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_CATALOG_LOADING, self._handle_catalog_loading)
        await self.bus.subscribe(events.TOPIC_CATALOG_LOADED, self._handle_catalog_loaded)
        await self.bus.subscribe(events.TOPIC_CATALOG_LOAD_FAILED, self._handle_catalog_load_failed)
        await self.bus.subscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)

        self._started = True

    async def push_log(self, message: str, level: str = "info") -> None:
        """Publish a log entry for the shell feed."""
        await self.bus.publish(events.TOPIC_LOGS_EVENT, events.create_logs_event(message, level))

    # --- Event Handlers ---

    async def _handle_catalog_loading(self, payload: EventPayload) -> None:
        self.status_text.value = "Loading movies..."
        self._append_log(
            events.create_logs_event(
                f"Loading catalog from {payload.get('source', '?')}",
                "info",
                events.TOPIC_CATALOG_LOADING,
            )
        )

    async def _handle_catalog_loaded(self, payload: EventPayload) -> None:
        count = payload.get("count", 0)
        self.status_text.value = f"{count} movies"
        self._append_log(
            events.create_logs_event(f"Loaded {count} movies", "success", events.TOPIC_CATALOG_LOADED)
        )

    async def _handle_catalog_load_failed(self, payload: EventPayload) -> None:
        # The UI shows an empty catalog; the error text only goes to the feed
        self.status_text.value = "0 movies"
        self._append_log(
            events.create_logs_event(
                f"Catalog load failed: {payload.get('error', 'unknown error')}",
                "error",
                events.TOPIC_CATALOG_LOAD_FAILED,
            )
        )

    async def _handle_log_event(self, payload: EventPayload) -> None:
        if payload:
            self._append_log(payload)

    def _append_log(self, entry: Dict[str, Any]) -> None:
        entries = list(self.logs.value)
        entries.append(entry)
        self.logs.value = entries[-MAX_LOG_ENTRIES:]

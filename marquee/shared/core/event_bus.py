from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]


class EventBus:
    """In-process async pub/sub hub shared by the stores and the UI."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        # Created lazily so the lock binds to the loop that first uses it
        self._lock: Optional[asyncio.Lock] = None
        self._logger = logging.getLogger(__name__)
        self._pending_tasks: set[asyncio.Task] = set()

    def _ensure_lock(self) -> asyncio.Lock:
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register an async handler for a topic."""
        async with self._ensure_lock():
            if handler not in self._subscribers[topic]:
                self._subscribers[topic].append(handler)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        """Remove a handler from a topic."""
        async with self._ensure_lock():
            if handler in self._subscribers.get(topic, []):
                self._subscribers[topic].remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Schedule every handler of ``topic`` with ``payload``.

        Handlers run as separate tasks; ``publish`` returns once they are
        scheduled, not once they finish. Use :meth:`wait_until_idle` to
        wait for delivery.
        """
        async with self._ensure_lock():
            handlers = list(self._subscribers.get(topic, []))

        if not handlers:
            self._logger.debug(f"No subscribers for topic '{topic}'")
            return

        self._logger.debug(f"Publishing to topic '{topic}' with {len(handlers)} handler(s)")
        for handler in handlers:
            task = asyncio.create_task(self._safe_dispatch(topic, handler, payload))
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)

    async def wait_until_idle(self, timeout: float = 10.0) -> bool:
        """Wait for all pending handlers to complete.

        Returns:
            True if everything was delivered, False if ``timeout`` elapsed first
        """
        if not self._pending_tasks:
            return True

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._pending_tasks:
            remaining = deadline - loop.time()
            if remaining <= 0:
                self._logger.warning(
                    f"EventBus: timeout with {len(self._pending_tasks)} handler(s) still pending"
                )
                return False
            # Handlers may publish again, so keep draining until the set is empty
            await asyncio.wait(list(self._pending_tasks), timeout=remaining)
        return True

    async def _safe_dispatch(
        self,
        topic: str,
        handler: EventHandler,
        payload: EventPayload,
    ) -> None:
        """Run one handler so that its failure never reaches the publisher."""
        handler_name = getattr(handler, "__name__", str(handler))
        try:
            await handler(payload)
        except Exception as exc:
            self._logger.exception(
                f"EventBus handler error in '{handler_name}' for topic '{topic}'",
                exc_info=exc,
            )

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()

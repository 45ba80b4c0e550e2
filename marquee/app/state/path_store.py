"""Navigation path state.

The path is a reactive list of routes, root first. It only ever grows by
appending and shrinks by keeping a prefix, so every state is reachable
from the root by a sequence of pushes.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fletx.core import RxList

from marquee.shared.domain.route import Route, route_title

logger = logging.getLogger(__name__)


class PathStore:
    """Owns the navigation stack as inspectable state."""

    def __init__(self) -> None:
        self.path: RxList[Route] = RxList([])

    # --- Read accessors ---

    @property
    def depth(self) -> int:
        return len(self.path.value)

    @property
    def is_at_root(self) -> bool:
        return self.depth == 0

    @property
    def current(self) -> Optional[Route]:
        """The route on top of the stack, or None at root."""
        routes = self.path.value
        return routes[-1] if routes else None

    def routes(self) -> List[Route]:
        """Snapshot of the path, root first."""
        return list(self.path.value)

    def labels(self) -> List[str]:
        return [route_title(route) for route in self.path.value]

    # --- Mutations ---

    def push(self, route: Route) -> None:
        """Navigate one level deeper."""
        self.path.append(route)
        logger.debug(f"Pushed {route.kind} '{route_title(route)}' (depth {self.depth})")

    def reduce_array(self, index: int) -> None:
        """Keep the path up to and including position ``index``.

        An index outside the current path is ignored with a warning.
        """
        routes = self.path.value
        if not 0 <= index < len(routes):
            logger.warning(f"Ignoring truncation to index {index}: path depth is {len(routes)}")
            return
        self.path.value = routes[: index + 1]

    def pop(self) -> Optional[Route]:
        """Go back one level. Returns the removed route, None at root."""
        routes = self.path.value
        if not routes:
            return None
        removed = routes[-1]
        self.path.value = routes[:-1]
        return removed

    def clear(self) -> None:
        """Return to the root."""
        if self.is_at_root:
            return
        self.path.clear()

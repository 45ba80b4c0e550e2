"""Movie catalog state.

Owns the catalog as a reactive list and performs the one simulated
asynchronous load. Listeners registered with ``movies.listen(...)`` see
each catalog change once the mutation is complete.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, List, Optional, assert_never

from fletx.core import RxBool, RxList

from marquee.shared.core import events
from marquee.shared.core.event_bus import EventBus
from marquee.shared.domain.models import Actor, Director, Movie, MovieCatalog
from marquee.shared.infrastructure.dataset import BundleLoader

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[], MovieCatalog]

DEFAULT_LOAD_DELAY = 2.0


def _by_title(movies: Iterable[Movie]) -> List[Movie]:
    return sorted(movies, key=lambda movie: movie.title)


class DataStore:
    """Single source of truth for the movie catalog.

    Args:
        event_bus: Shared bus for catalog lifecycle events
        loader: Callable returning the catalog; defaults to the bundled dataset
        load_delay: Simulated round-trip time in seconds
    """

    def __init__(
        self,
        event_bus: EventBus,
        loader: Optional[CatalogLoader] = None,
        load_delay: float = DEFAULT_LOAD_DELAY,
    ) -> None:
        self.bus = event_bus
        self.loader: CatalogLoader = loader or BundleLoader()
        self.load_delay = load_delay

        self.movies: RxList[Movie] = RxList([])
        self.is_loading: RxBool = RxBool(False)
        self.is_loaded: RxBool = RxBool(False)

        self._load_task: Optional[asyncio.Task[None]] = None

    # --- Queries ---

    def get_movies(self, subject: Actor | Director | None = None) -> List[Movie]:
        """Movies in catalog order.

        With no argument, the whole catalog. With an ``Actor``, every movie
        crediting that actor. With a ``Director``, every movie they directed.
        """
        movies = list(self.movies.value)
        match subject:
            case None:
                return movies
            case Actor():
                return [movie for movie in movies if subject in movie.actors]
            case Director():
                return [movie for movie in movies if movie.director == subject]
            case _:
                assert_never(subject)

    def get_actors(self, director: Director) -> List[Actor]:
        """Actors across all movies by ``director``, first occurrence wins."""
        seen = dict.fromkeys(
            actor
            for movie in self.get_movies(director)
            for actor in movie.actors
        )
        return list(seen)

    def get_movie(self, title: str) -> Optional[Movie]:
        for movie in self.movies.value:
            if movie.title == title:
                return movie
        return None

    # --- Mutations ---

    def sort(self) -> None:
        """Order the catalog ascending by title."""
        self.movies.value = _by_title(self.movies.value)

    async def load_data(self) -> None:
        """Load the catalog after the simulated delay.

        Never raises on load failure: the catalog is reset to empty and the
        error is logged. A call made while a load is already running waits
        for that load instead of starting another.
        """
        if self._load_task is not None and not self._load_task.done():
            logger.info("Catalog load already in progress; waiting for it")
            await asyncio.shield(self._load_task)
            return

        self._load_task = asyncio.create_task(self._load(), name="catalog-load")
        await self._load_task

    async def _load(self) -> None:
        source = getattr(self.loader, "source", getattr(self.loader, "__name__", repr(self.loader)))
        self.is_loading.value = True
        await self.bus.publish(
            events.TOPIC_CATALOG_LOADING,
            events.create_catalog_loading_event(str(source)),
        )
        logger.info(f"Loading catalog from {source} (delay {self.load_delay}s)")

        try:
            await asyncio.sleep(self.load_delay)
            catalog = self.loader()
            # Sorted before publishing so listeners never observe an unsorted catalog
            movies = _by_title(catalog.movies)
        except Exception as exc:
            logger.exception("Catalog load failed; resetting catalog to empty")
            self.movies.value = []
            self.is_loaded.value = False
            await self.bus.publish(
                events.TOPIC_CATALOG_LOAD_FAILED,
                events.create_catalog_load_failed_event(exc),
            )
        else:
            self.movies.value = movies
            self.is_loaded.value = True
            logger.info(f"Catalog loaded: {len(movies)} movie(s)")
            await self.bus.publish(
                events.TOPIC_CATALOG_LOADED,
                events.create_catalog_loaded_event(len(movies), [movie.title for movie in movies]),
            )
        finally:
            self.is_loading.value = False

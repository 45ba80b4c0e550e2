"""DataStore queries, sorting and the simulated load."""

from __future__ import annotations

import asyncio

import pytest

from marquee.app.state import DataStore
from marquee.shared.core import events
from marquee.shared.core.errors import CatalogLoadError
from marquee.shared.domain.models import Actor, Director, MovieCatalog


def _titles(movies):
    return [movie.title for movie in movies]


class TestLoad:
    async def test_starts_empty(self, data_store):
        assert data_store.get_movies() == []
        assert data_store.is_loading.value is False
        assert data_store.is_loaded.value is False

    async def test_load_sorts_by_title(self, data_store):
        await data_store.load_data()

        titles = _titles(data_store.get_movies())
        assert titles == ["Alien", "Blade Runner", "Brazil", "Casablanca"]
        assert titles == sorted(titles)
        assert data_store.is_loaded.value is True

    async def test_loading_flag_spans_the_delay(self, bus, catalog):
        store = DataStore(bus, loader=lambda: catalog, load_delay=0.2)

        task = asyncio.create_task(store.load_data())
        await asyncio.sleep(0.02)
        assert store.is_loading.value is True
        assert store.get_movies() == []

        await task
        assert store.is_loading.value is False
        assert len(store.get_movies()) == 4

    async def test_failure_resets_to_empty(self, bus, catalog):
        fail = False

        def loader() -> MovieCatalog:
            if fail:
                raise CatalogLoadError("bundle is corrupt", source="test")
            return catalog

        store = DataStore(bus, loader=loader, load_delay=0)
        await store.load_data()
        assert len(store.get_movies()) == 4

        fail = True
        await store.load_data()

        assert store.get_movies() == []
        assert store.is_loaded.value is False
        assert store.is_loading.value is False

    async def test_failure_is_not_raised_and_is_published(self, bus):
        received = []

        async def on_failed(payload):
            received.append(payload)

        await bus.subscribe(events.TOPIC_CATALOG_LOAD_FAILED, on_failed)

        def loader() -> MovieCatalog:
            raise ValueError("boom")

        store = DataStore(bus, loader=loader, load_delay=0)
        await store.load_data()
        await bus.wait_until_idle()

        assert len(received) == 1
        assert received[0]["error"] == "boom"
        assert received[0]["error_type"] == "ValueError"

    async def test_success_is_published(self, bus, data_store):
        received = []

        async def on_loaded(payload):
            received.append(payload)

        await bus.subscribe(events.TOPIC_CATALOG_LOADED, on_loaded)
        await data_store.load_data()
        await bus.wait_until_idle()

        assert received[0]["count"] == 4
        assert received[0]["titles"][0] == "Alien"

    async def test_concurrent_calls_share_one_load(self, bus, catalog):
        calls = []

        def loader() -> MovieCatalog:
            calls.append(1)
            return catalog

        store = DataStore(bus, loader=loader, load_delay=0.05)
        await asyncio.gather(store.load_data(), store.load_data())

        assert len(calls) == 1
        assert len(store.get_movies()) == 4

    async def test_sequential_calls_reload(self, bus, catalog):
        calls = []

        def loader() -> MovieCatalog:
            calls.append(1)
            return catalog

        store = DataStore(bus, loader=loader, load_delay=0)
        await store.load_data()
        await store.load_data()

        assert len(calls) == 2

    async def test_cancellation_propagates_and_clears_flag(self, bus, catalog):
        store = DataStore(bus, loader=lambda: catalog, load_delay=5)

        task = asyncio.create_task(store.load_data())
        await asyncio.sleep(0.02)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert store.is_loading.value is False
        assert store.get_movies() == []

    async def test_listeners_see_sorted_catalog_only(self, data_store):
        snapshots = []
        observer = data_store.movies.listen(lambda: snapshots.append(_titles(data_store.movies.value)))

        await data_store.load_data()

        assert observer is not None
        assert snapshots
        for titles in snapshots:
            assert titles == sorted(titles)


class TestSort:
    def test_sort_orders_in_place(self, data_store, catalog):
        data_store.movies.value = list(catalog.movies)
        assert _titles(data_store.get_movies())[0] == "Casablanca"

        data_store.sort()

        assert _titles(data_store.get_movies()) == ["Alien", "Blade Runner", "Brazil", "Casablanca"]

    def test_sort_empty(self, data_store):
        data_store.sort()
        assert data_store.get_movies() == []


class TestQueries:
    async def test_get_movies_returns_copy(self, loaded_store):
        movies = loaded_store.get_movies()
        movies.clear()
        assert len(loaded_store.get_movies()) == 4

    async def test_by_actor(self, loaded_store, hurt, bogart):
        assert _titles(loaded_store.get_movies(hurt)) == ["Alien", "Blade Runner"]
        assert _titles(loaded_store.get_movies(bogart)) == ["Casablanca"]

    async def test_by_actor_uses_value_equality(self, loaded_store):
        same_hurt = Actor(first_name="John", last_name="Hurt", birthday="1940-01-22")
        assert _titles(loaded_store.get_movies(same_hurt)) == ["Alien", "Blade Runner"]

    async def test_by_unknown_actor(self, loaded_store):
        stranger = Actor(first_name="Nobody", last_name="Known", birthday="2000-01-01")
        assert loaded_store.get_movies(stranger) == []

    async def test_by_director(self, loaded_store, scott, gilliam):
        assert _titles(loaded_store.get_movies(scott)) == ["Alien", "Blade Runner"]
        assert _titles(loaded_store.get_movies(gilliam)) == ["Brazil"]

    async def test_by_unknown_director(self, loaded_store):
        stranger = Director(first_name="Alan", last_name="Smithee", movies=())
        assert loaded_store.get_movies(stranger) == []

    async def test_actors_are_deduplicated(self, loaded_store, scott, weaver, hurt):
        actors = loaded_store.get_actors(scott)

        assert actors == [weaver, hurt]
        assert len(actors) == len(set(actors))

    async def test_actors_for_unknown_director(self, loaded_store):
        stranger = Director(first_name="Alan", last_name="Smithee", movies=())
        assert loaded_store.get_actors(stranger) == []

    async def test_get_movie_by_title(self, loaded_store, brazil):
        assert loaded_store.get_movie("Brazil") == brazil
        assert loaded_store.get_movie("Metropolis") is None

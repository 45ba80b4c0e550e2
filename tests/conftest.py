"""Shared fixtures: a small unsorted catalog and stores that load it instantly."""

from __future__ import annotations

import pytest

from marquee.app.state import DataStore, PathStore, Store
from marquee.shared.core.event_bus import EventBus
from marquee.shared.domain.models import Actor, Director, Movie, MovieCatalog


@pytest.fixture
def weaver() -> Actor:
    return Actor(first_name="Sigourney", last_name="Weaver", birthday="1949-10-08")


@pytest.fixture
def hurt() -> Actor:
    return Actor(first_name="John", last_name="Hurt", birthday="1940-01-22")


@pytest.fixture
def pryce() -> Actor:
    return Actor(first_name="Jonathan", last_name="Pryce", birthday="1947-06-01")


@pytest.fixture
def bogart() -> Actor:
    return Actor(first_name="Humphrey", last_name="Bogart", birthday="1899-12-25")


@pytest.fixture
def scott() -> Director:
    return Director(first_name="Ridley", last_name="Scott", movies=("Alien", "Blade Runner"))


@pytest.fixture
def gilliam() -> Director:
    return Director(first_name="Terry", last_name="Gilliam", movies=("Brazil",))


@pytest.fixture
def curtiz() -> Director:
    return Director(first_name="Michael", last_name="Curtiz", movies=("Casablanca",))


@pytest.fixture
def alien(weaver, hurt, scott) -> Movie:
    return Movie(
        title="Alien",
        description="The crew of a commercial spacecraft encounter a deadly lifeform.",
        actors=(weaver, hurt),
        director=scott,
        release_date="1979-05-25",
    )


@pytest.fixture
def blade_runner(hurt, scott) -> Movie:
    # Not the real cast; gives Scott a repeat actor
    return Movie(
        title="Blade Runner",
        description="A blade runner must pursue and terminate four replicants.",
        actors=(hurt,),
        director=scott,
        release_date="1982-06-25",
    )


@pytest.fixture
def brazil(pryce, gilliam) -> Movie:
    return Movie(
        title="Brazil",
        description="A bureaucrat in a dystopian society becomes an enemy of the state.",
        actors=(pryce,),
        director=gilliam,
        release_date="1985-02-20",
    )


@pytest.fixture
def casablanca(bogart, curtiz) -> Movie:
    return Movie(
        title="Casablanca",
        description="A cynical expatriate must choose between love and virtue.",
        actors=(bogart,),
        director=curtiz,
        release_date="1942-11-26",
    )


@pytest.fixture
def catalog(casablanca, brazil, blade_runner, alien) -> MovieCatalog:
    """Deliberately not in title order."""
    return MovieCatalog(movies=(casablanca, brazil, blade_runner, alien))


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def data_store(bus, catalog) -> DataStore:
    return DataStore(bus, loader=lambda: catalog, load_delay=0)


@pytest.fixture
async def loaded_store(data_store) -> DataStore:
    await data_store.load_data()
    return data_store


@pytest.fixture
def path_store() -> PathStore:
    return PathStore()


@pytest.fixture(autouse=True)
def _reset_global_store():
    yield
    Store.reset()

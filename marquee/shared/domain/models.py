"""Catalog entities.

Every entity is an immutable pydantic model. Sequences are tuples so that
a whole ``Movie`` (actors and director included) hashes by value, which
lets the stores de-duplicate with plain sets and dicts.

Field names are snake_case in Python and camelCase in the bundled JSON.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_ENTITY_CONFIG = ConfigDict(
    frozen=True,
    extra='ignore',
    alias_generator=to_camel,
    populate_by_name=True,
)


class Actor(BaseModel):
    """A performer credited on one or more movies."""
    model_config = _ENTITY_CONFIG

    first_name: str
    last_name: str
    birthday: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Director(BaseModel):
    """A director and the titles they directed."""
    model_config = _ENTITY_CONFIG

    first_name: str
    last_name: str
    movies: Tuple[str, ...] = Field(default=(), description="Titles of directed movies")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Movie(BaseModel):
    model_config = _ENTITY_CONFIG

    title: str
    description: str
    actors: Tuple[Actor, ...] = ()
    director: Director
    release_date: str


class MovieCatalog(BaseModel):
    """The loadable aggregate: the document root of movies.json."""
    model_config = _ENTITY_CONFIG

    movies: Tuple[Movie, ...] = ()

    def __len__(self) -> int:
        return len(self.movies)

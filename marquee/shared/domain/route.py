"""Navigation routes.

``Route`` is a closed sum type over three frozen variants. Each variant
carries its entity by value, so two routes to the same movie compare and
hash equal. Code that branches on a route matches on the variant classes
and ends with ``assert_never`` so a new variant fails type checking at
every match site.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union, assert_never

from pydantic import BaseModel, ConfigDict, Field

from .models import Actor, Director, Movie

_ROUTE_CONFIG = ConfigDict(frozen=True)


class MovieRoute(BaseModel):
    model_config = _ROUTE_CONFIG

    kind: Literal["movie"] = "movie"
    movie: Movie


class DirectorRoute(BaseModel):
    model_config = _ROUTE_CONFIG

    kind: Literal["director"] = "director"
    director: Director


class ActorRoute(BaseModel):
    model_config = _ROUTE_CONFIG

    kind: Literal["actor"] = "actor"
    actor: Actor


Route = Annotated[
    Union[MovieRoute, DirectorRoute, ActorRoute],
    Field(discriminator="kind"),
]


def route_to(target: Movie | Director | Actor) -> Route:
    """Build the route variant for an entity."""
    match target:
        case Movie():
            return MovieRoute(movie=target)
        case Director():
            return DirectorRoute(director=target)
        case Actor():
            return ActorRoute(actor=target)
        case _:
            assert_never(target)


def route_title(route: Route) -> str:
    """Short label for breadcrumbs and logs."""
    match route:
        case MovieRoute(movie=movie):
            return movie.title
        case DirectorRoute(director=director):
            return director.full_name
        case ActorRoute(actor=actor):
            return actor.full_name
        case _:
            assert_never(route)

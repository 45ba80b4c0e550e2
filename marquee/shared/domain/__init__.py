"""
Shared Domain Module
====================

Catalog entities (Movie, Actor, Director) and the Route sum type.
"""

from marquee.shared.domain.models import Actor, Director, Movie, MovieCatalog
from marquee.shared.domain.route import (
    ActorRoute,
    DirectorRoute,
    MovieRoute,
    Route,
    route_title,
    route_to,
)

__all__ = [
    # Entities
    "Actor",
    "Director",
    "Movie",
    "MovieCatalog",
    # Routes
    "Route",
    "MovieRoute",
    "DirectorRoute",
    "ActorRoute",
    "route_to",
    "route_title",
]

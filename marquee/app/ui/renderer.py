"""Route → view content.

Pure functions that decide what a detail view shows for each route
variant. The Flet shell turns the results into controls; keeping the
branching here lets it be tested without a page.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple, assert_never

from marquee.app.state.data_store import DataStore
from marquee.shared.domain.models import Movie
from marquee.shared.domain.route import (
    ActorRoute,
    DirectorRoute,
    MovieRoute,
    Route,
    route_title,
    route_to,
)


class Link(NamedTuple):
    """A navigable row: label, secondary text and the route it pushes."""
    title: str
    subtitle: str
    route: Route


class Section(NamedTuple):
    heading: str
    links: List[Link]


def movie_link(movie: Movie) -> Link:
    return Link(movie.title, movie.release_date, route_to(movie))


def catalog_links(data: DataStore) -> List[Link]:
    """Rows of the root list view."""
    return [movie_link(movie) for movie in data.get_movies()]


def detail_fields(route: Route) -> List[Tuple[str, str]]:
    """Label/value pairs shown at the top of a detail view."""
    match route:
        case MovieRoute(movie=movie):
            return [
                ("Title", movie.title),
                ("Released", movie.release_date),
                ("Description", movie.description),
            ]
        case DirectorRoute(director=director):
            return [
                ("First name", director.first_name),
                ("Last name", director.last_name),
                ("Directed", str(len(director.movies))),
            ]
        case ActorRoute(actor=actor):
            return [
                ("First name", actor.first_name),
                ("Last name", actor.last_name),
                ("Birthday", actor.birthday),
            ]
        case _:
            assert_never(route)


def detail_sections(route: Route, data: DataStore) -> List[Section]:
    """Navigable sections of a detail view."""
    match route:
        case MovieRoute(movie=movie):
            director = movie.director
            return [
                Section("Director", [Link(director.full_name, "", route_to(director))]),
                Section("Cast", [
                    Link(actor.full_name, actor.birthday, route_to(actor))
                    for actor in movie.actors
                ]),
            ]
        case DirectorRoute(director=director):
            # Titles outside the catalog have nothing to navigate to
            movies = [data.get_movie(title) for title in director.movies]
            return [
                Section("Movies", [movie_link(m) for m in movies if m is not None]),
                Section("Worked with", [
                    Link(actor.full_name, actor.birthday, route_to(actor))
                    for actor in data.get_actors(director)
                ]),
            ]
        case ActorRoute(actor=actor):
            return [
                Section("Movies", [movie_link(m) for m in data.get_movies(actor)]),
            ]
        case _:
            assert_never(route)


def view_title(route: Route) -> str:
    match route:
        case MovieRoute():
            prefix = "Movie"
        case DirectorRoute():
            prefix = "Director"
        case ActorRoute():
            prefix = "Actor"
        case _:
            assert_never(route)
    return f"{prefix}: {route_title(route)}"

"""Reading the bundled and on-disk datasets."""

from __future__ import annotations

import json

import pytest

from marquee.shared.core.errors import CatalogLoadError
from marquee.shared.infrastructure.dataset import BundleLoader


def test_bundled_dataset_loads():
    catalog = BundleLoader().load()

    assert len(catalog) == 6
    titles = [movie.title for movie in catalog.movies]
    assert "Inception" in titles
    # Shipped unsorted so the store has something to sort
    assert titles != sorted(titles)


def test_bundled_directors_match_their_movies():
    catalog = BundleLoader().load()
    for movie in catalog.movies:
        assert movie.title in movie.director.movies


def test_loader_is_callable():
    loader = BundleLoader()
    assert loader() == loader.load()
    assert loader.source == "marquee.data/movies.json"


def test_path_override(tmp_path, alien):
    dataset = tmp_path / "movies.json"
    dataset.write_text(json.dumps({"movies": [alien.model_dump(by_alias=True)]}), encoding="utf-8")

    catalog = BundleLoader(dataset).load()

    assert catalog.movies == (alien,)


def test_missing_file(tmp_path):
    loader = BundleLoader(tmp_path / "nope.json")
    with pytest.raises(CatalogLoadError) as excinfo:
        loader.load()
    assert "nope.json" in str(excinfo.value)


def test_invalid_json(tmp_path):
    dataset = tmp_path / "movies.json"
    dataset.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogLoadError, match="failed validation"):
        BundleLoader(dataset).load()


def test_schema_mismatch(tmp_path):
    dataset = tmp_path / "movies.json"
    dataset.write_text(json.dumps({"movies": [{"title": "Untitled"}]}), encoding="utf-8")

    with pytest.raises(CatalogLoadError) as excinfo:
        BundleLoader(dataset).load()
    assert excinfo.value.source == str(dataset)

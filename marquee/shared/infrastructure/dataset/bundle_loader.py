"""Reads the movie dataset shipped with the package.

The default source is ``marquee/data/movies.json``; a filesystem path may
be given instead (see ``DataConfig.dataset_path``). Every failure is
raised as :class:`CatalogLoadError` so callers only handle one kind.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from marquee.shared.core.errors import CatalogLoadError
from marquee.shared.domain.models import MovieCatalog

logger = logging.getLogger(__name__)

BUNDLE_PACKAGE = "marquee.data"
BUNDLE_RESOURCE = "movies.json"


class BundleLoader:
    """Loads a :class:`MovieCatalog` from bundled resources or a path.

    Instances are callables so they can be handed to ``DataStore`` as its
    loader.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path else None

    @property
    def source(self) -> str:
        if self.path is not None:
            return str(self.path)
        return f"{BUNDLE_PACKAGE}/{BUNDLE_RESOURCE}"

    def _read_text(self) -> str:
        try:
            if self.path is not None:
                return self.path.read_text(encoding="utf-8")
            return resources.files(BUNDLE_PACKAGE).joinpath(BUNDLE_RESOURCE).read_text(encoding="utf-8")
        except (OSError, ModuleNotFoundError) as e:
            raise CatalogLoadError(f"Could not read movie dataset: {e}", source=self.source) from e

    def load(self) -> MovieCatalog:
        """Read and validate the dataset.

        Raises:
            CatalogLoadError: If the dataset is missing, not JSON, or does
                not match the catalog schema
        """
        raw = self._read_text()
        try:
            catalog = MovieCatalog.model_validate_json(raw)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Movie dataset failed validation ({e.error_count()} error(s))",
                source=self.source,
            ) from e

        logger.debug(f"Read {len(catalog)} movie(s) from {self.source}")
        return catalog

    def __call__(self) -> MovieCatalog:
        return self.load()

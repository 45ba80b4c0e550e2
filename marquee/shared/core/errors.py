"""Exception types shared across Marquee."""

from __future__ import annotations

from typing import Optional


class MarqueeError(Exception):
    """Base class for Marquee errors."""


class ConfigurationError(MarqueeError):
    """Merged configuration failed validation."""


class CatalogLoadError(MarqueeError):
    """The bundled movie dataset could not be read, parsed or validated.

    Args:
        message: Human readable description
        source: Where the dataset was read from (path or resource name)
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        if self.source:
            return f"{base} (source: {self.source})"
        return base

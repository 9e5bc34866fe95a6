"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from asset_importer.plugins.base import Converter


class CacheDirectoryProvider(Protocol):
    """Provide the shared cache directory."""

    def ensure(self) -> Path:
        """Create the directory if needed and return its absolute path."""


class ConverterLookup(Protocol):
    """Resolve converters by file extension."""

    def find_by_extension(self, extension: str) -> Converter | None:
        """Return the converter claiming ``extension``, if any."""

    def can_import(self, path: Path) -> bool:
        """Return whether some converter claims the path's extension."""

"""Cached asset copy and converter-driven import with remap descriptors."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from asset_importer.application.results import (
    CopyOutcome,
    CopyResult,
    ImportArtifact,
    ImportResult,
)

__version__ = "0.1.0"


def copy_file(
    source_path: Path | str,
    dest_path: Path | str,
    force: bool = False,
) -> CopyResult:
    """Copy a file unless its content matches the last recorded copy.

    Parameters
    ----------
    source_path : Path | str
        File to copy.
    dest_path : Path | str
        Destination path.
    force : bool, default=False
        Copy even when the recorded hash matches.

    Returns
    -------
    CopyResult
        ``outcome`` is ``COPIED`` or ``SKIPPED_IDENTICAL``.
    """
    from .api import copy_file as _impl

    return _impl(Path(source_path), Path(dest_path), force)


def import_file(
    source_path: Path | str,
    options: Mapping[str, object] | None = None,
    *,
    plugin_modules: Iterable[str] | None = None,
) -> ImportResult:
    """Import a source asset and write ``<source_path>.import``.

    Parameters
    ----------
    source_path : Path | str
        Source asset.
    options : Mapping[str, object] | None, default=None
        Option overrides; undeclared keys are ignored.
    plugin_modules : Iterable[str] | None, default=None
        Extra converter modules to load into the default registry.

    Returns
    -------
    ImportResult
        Resolved options and artifact paths.
    """
    from .api import import_file as _impl

    return _impl(Path(source_path), options, plugin_modules=plugin_modules)


__all__ = [
    "CopyOutcome",
    "CopyResult",
    "ImportArtifact",
    "ImportResult",
    "copy_file",
    "import_file",
]

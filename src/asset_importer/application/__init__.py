"""Application-layer use-cases and result objects."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from asset_importer.application.options import ImportOption, resolve_options
from asset_importer.application.ports import CacheDirectoryProvider, ConverterLookup
from asset_importer.application.results import (
    CopyOutcome,
    CopyResult,
    ImportArtifact,
    ImportResult,
)
from asset_importer.types import HashAlgorithm


def copy_file(
    *,
    source_path: Path,
    dest_path: Path,
    cache_dir: CacheDirectoryProvider,
    force: bool = False,
    algorithm: HashAlgorithm = "md5",
) -> CopyResult:
    """Run the cached copy use-case via lazy import."""
    from asset_importer.application.use_cases import copy_file as _impl

    return _impl(
        source_path=source_path,
        dest_path=dest_path,
        cache_dir=cache_dir,
        force=force,
        algorithm=algorithm,
    )


def import_file(
    *,
    source_path: Path,
    registry: ConverterLookup,
    cache_dir: CacheDirectoryProvider,
    option_overrides: Mapping[str, object] | None = None,
    algorithm: HashAlgorithm = "md5",
) -> ImportResult:
    """Run the import use-case via lazy import."""
    from asset_importer.application.use_cases import import_file as _impl

    return _impl(
        source_path=source_path,
        registry=registry,
        cache_dir=cache_dir,
        option_overrides=option_overrides,
        algorithm=algorithm,
    )


__all__ = [
    "CopyOutcome",
    "CopyResult",
    "ImportArtifact",
    "ImportOption",
    "ImportResult",
    "copy_file",
    "import_file",
    "resolve_options",
]

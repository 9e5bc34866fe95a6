"""Public file-based API (delegates to application use-cases)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable
from typing import Mapping
from typing import Optional

from asset_importer.application.results import CopyResult, ImportResult
from asset_importer.application.use_cases import copy_file as _copy_file
from asset_importer.application.use_cases import import_file as _import_file
from asset_importer.errors import ImporterError
from asset_importer.infrastructure.cache_directory import CacheDirectory
from asset_importer.plugins.registry import ConverterRegistry, create_default_registry
from asset_importer.schemas import ImporterSettings, load_settings

logger = logging.getLogger(__name__)


def copy_file(
    source_path: Path,
    dest_path: Path,
    force: bool = False,
    *,
    settings: Optional[ImporterSettings] = None,
) -> CopyResult:
    """Copy ``source_path`` to ``dest_path`` unless the content is unchanged."""
    settings = settings or load_settings()
    try:
        result = _copy_file(
            source_path=Path(source_path),
            dest_path=Path(dest_path),
            cache_dir=CacheDirectory.from_settings(settings),
            force=force,
            algorithm=settings.hash_algorithm,
        )
    except ImporterError as exc:
        logger.warning("copy failed: %s", exc)
        raise
    if result.copied:
        logger.info("copied %s -> %s", result.source_path, result.dest_path)
    else:
        logger.debug("skipped %s, content unchanged", result.source_path)
    return result


def import_file(
    source_path: Path,
    options: Optional[Mapping[str, object]] = None,
    *,
    plugin_modules: Optional[Iterable[str]] = None,
    registry: Optional[ConverterRegistry] = None,
    settings: Optional[ImporterSettings] = None,
) -> ImportResult:
    """Import ``source_path`` with the converter registered for its extension."""
    settings = settings or load_settings()
    registry = registry or create_default_registry(extra_modules=plugin_modules)
    try:
        result = _import_file(
            source_path=Path(source_path),
            registry=registry,
            cache_dir=CacheDirectory.from_settings(settings),
            option_overrides=options or {},
            algorithm=settings.hash_algorithm,
        )
    except ImporterError as exc:
        logger.warning("import failed: %s", exc)
        raise
    logger.info(
        "imported %s with %s (%d artifact(s))",
        result.source_path,
        result.importer,
        len(result.artifacts),
    )
    logger.debug("resolved options for %s: %s", result.source_path, dict(result.options))
    return result

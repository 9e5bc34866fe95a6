"""Application use-cases: cached copy and converter import."""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from asset_importer.application.options import declared_options, resolve_options
from asset_importer.application.ports import CacheDirectoryProvider, ConverterLookup
from asset_importer.application.results import (
    CopyOutcome,
    CopyResult,
    ImportArtifact,
    ImportResult,
)
from asset_importer.errors import (
    ConversionFailedError,
    CopyFailedError,
    ImporterError,
    SidecarWriteFailedError,
    SourceNotFoundError,
    UnrecognizedFormatError,
)
from asset_importer.infrastructure.descriptor import (
    RemapDescriptor,
    descriptor_path_for,
    write_descriptor,
)
from asset_importer.infrastructure.hashing import digest_file, fingerprint
from asset_importer.infrastructure.sidecar import (
    read_sidecar,
    sidecar_path,
    write_sidecar,
)
from asset_importer.plugins.base import PRESET_3D
from asset_importer.schemas import CopyRequest, ImportRequest
from asset_importer.types import HashAlgorithm


def copy_file(
    *,
    source_path: Path,
    dest_path: Path,
    cache_dir: CacheDirectoryProvider,
    force: bool = False,
    algorithm: HashAlgorithm = "md5",
) -> CopyResult:
    """Use-case: copy a file unless its content matches the last recorded copy.

    Raises
    ------
    SourceNotFoundError
        If the source file does not exist.
    DirectoryUnavailableError, DirectoryCreateFailedError
        If the cache directory cannot be prepared.
    CopyFailedError
        If the source cannot be read or the copy fails.
    SidecarWriteFailedError
        If the copy succeeded but the hash record could not be written.
    """
    try:
        config = CopyRequest(source_path=source_path, dest_path=dest_path, force=force)
    except ValidationError as exc:
        raise ImporterError(f"Invalid copy parameters: {exc}") from exc

    source, dest = config.source_path, config.dest_path
    if not source.is_file():
        raise SourceNotFoundError(source)

    cache = cache_dir.ensure()
    record = sidecar_path(cache, fingerprint(source, algorithm), algorithm)

    try:
        content_hash = digest_file(source, algorithm)
    except OSError as exc:
        raise CopyFailedError(source, dest, str(exc)) from exc

    if not config.force and record.exists() and dest.exists():
        if read_sidecar(record) == content_hash:
            return CopyResult(
                outcome=CopyOutcome.SKIPPED_IDENTICAL,
                source_path=source,
                dest_path=dest,
                content_hash=content_hash,
                sidecar_path=record,
            )

    try:
        shutil.copyfile(source, dest)
    except OSError as exc:
        raise CopyFailedError(source, dest, str(exc)) from exc

    try:
        write_sidecar(record, content_hash)
    except OSError as exc:
        raise SidecarWriteFailedError(record, dest, str(exc)) from exc

    return CopyResult(
        outcome=CopyOutcome.COPIED,
        source_path=source,
        dest_path=dest,
        content_hash=content_hash,
        sidecar_path=record,
    )


def import_file(
    *,
    source_path: Path,
    registry: ConverterLookup,
    cache_dir: CacheDirectoryProvider,
    option_overrides: Mapping[str, object] | None = None,
    algorithm: HashAlgorithm = "md5",
    preset: str = PRESET_3D,
) -> ImportResult:
    """Use-case: convert a source file and write its remap descriptor.

    Any failure aborts before the descriptor is touched, so artifacts and
    descriptors from a previous successful import stay as they were.

    Raises
    ------
    UnrecognizedFormatError
        If no converter claims the extension.
    SourceNotFoundError
        If the source file does not exist.
    DirectoryUnavailableError, DirectoryCreateFailedError
        If the cache directory cannot be prepared.
    ConversionFailedError
        If the converter fails.
    DescriptorWriteFailedError
        If ``<source>.import`` cannot be written.
    """
    try:
        config = ImportRequest(
            source_path=source_path,
            option_overrides=option_overrides or {},
        )
    except ValidationError as exc:
        raise ImporterError(f"Invalid import parameters: {exc}") from exc

    source = config.source_path
    if not registry.can_import(source):
        raise UnrecognizedFormatError(source)
    converter = registry.find_by_extension(source.suffix)
    if converter is None:
        raise UnrecognizedFormatError(source)

    if not source.is_file():
        raise SourceNotFoundError(source)

    cache = cache_dir.ensure()

    try:
        declared = declared_options(converter.get_options(preset))
    except Exception as exc:
        raise ConversionFailedError(source, converter.name, str(exc)) from exc
    resolved = resolve_options(declared, config.option_overrides)

    base = cache / fingerprint(source, algorithm)
    try:
        variants = converter.convert(source, base, dict(resolved))
    except Exception as exc:
        raise ConversionFailedError(source, converter.name, str(exc)) from exc

    artifacts: list[ImportArtifact] = []
    save_extension = getattr(converter, "save_extension", "")
    if save_extension:
        if variants:
            artifacts = [
                ImportArtifact(Path(f"{base}.{variant}.{save_extension}"), variant)
                for variant in variants
            ]
        else:
            artifacts = [ImportArtifact(Path(f"{base}.{save_extension}"))]

    descriptor = RemapDescriptor(
        importer=converter.name,
        resource_type=getattr(converter, "resource_type", None) or None,
        path=str(artifacts[0].path) if artifacts and not variants else None,
        variant_paths={
            artifact.variant: str(artifact.path)
            for artifact in artifacts
            if artifact.variant is not None
        },
        params=resolved,
    )
    descriptor_path = descriptor_path_for(source)
    write_descriptor(descriptor_path, descriptor)

    return ImportResult(
        source_path=source,
        descriptor_path=descriptor_path,
        importer=converter.name,
        options=resolved,
        artifact_base_path=base,
        artifacts=tuple(artifacts),
    )

"""Exception hierarchy for copy and import operations."""

from __future__ import annotations

from pathlib import Path


class ImporterError(Exception):
    """Base class for every failure raised by the importer core.

    Parameters
    ----------
    message : str
        Human-readable description, always naming the path involved.
    path : Path | None, default=None
        Offending path, when one applies.
    """

    exit_code = 1

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(ImporterError):
    """Raised when importer settings are invalid."""


class PluginError(ImporterError):
    """Raised when a converter cannot be registered or loaded."""


class SourceNotFoundError(ImporterError):
    """Raised when the source file does not exist."""

    exit_code = 2

    def __init__(self, path: Path) -> None:
        super().__init__(f"'{path}' does not exist.", path=path)


class DirectoryUnavailableError(ImporterError):
    """Raised when the per-user data root cannot be opened."""

    exit_code = 3

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Failed to open the data directory '{path}': {reason}", path=path
        )


class DirectoryCreateFailedError(ImporterError):
    """Raised when the cache directory cannot be created."""

    exit_code = 3

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Could not create the cache directory '{path}': {reason}", path=path
        )


class CopyFailedError(ImporterError):
    """Raised when the filesystem copy fails. The sidecar is left untouched."""

    exit_code = 4

    def __init__(self, source: Path, dest: Path, reason: str) -> None:
        super().__init__(
            f"Could not copy from '{source}' to '{dest}': {reason}", path=source
        )
        self.dest = dest


class SidecarWriteFailedError(ImporterError):
    """Raised when the hash sidecar cannot be written after a successful copy.

    The destination file is already up to date; only the cache bookkeeping is
    degraded, so the next call will copy again.
    """

    exit_code = 5

    def __init__(self, sidecar_path: Path, dest: Path, reason: str) -> None:
        super().__init__(
            f"Copied to '{dest}' but could not write to '{sidecar_path}': {reason}",
            path=sidecar_path,
        )
        self.dest = dest
        self.copied = True


class UnrecognizedFormatError(ImporterError):
    """Raised when no registered converter claims the file extension."""

    exit_code = 6

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot import '{path}', unknown file format.", path=path)


class ConversionFailedError(ImporterError):
    """Raised when a converter fails. The original error is ``__cause__``."""

    exit_code = 7

    def __init__(self, path: Path, converter_name: str, reason: str) -> None:
        super().__init__(
            f"Failed to import the file at '{path}' with '{converter_name}': {reason}",
            path=path,
        )
        self.converter_name = converter_name


class DescriptorWriteFailedError(ImporterError):
    """Raised when the remap descriptor cannot be written."""

    exit_code = 8

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not open the file at '{path}': {reason}", path=path)


class DescriptorParseError(ImporterError):
    """Raised when a remap descriptor cannot be parsed."""

    def __init__(self, path: Path | None, line_number: int, reason: str) -> None:
        where = f"'{path}'" if path is not None else "descriptor"
        super().__init__(f"Invalid {where} at line {line_number}: {reason}", path=path)
        self.line_number = line_number


__all__ = [
    "ImporterError",
    "ConfigError",
    "PluginError",
    "SourceNotFoundError",
    "DirectoryUnavailableError",
    "DirectoryCreateFailedError",
    "CopyFailedError",
    "SidecarWriteFailedError",
    "UnrecognizedFormatError",
    "ConversionFailedError",
    "DescriptorWriteFailedError",
    "DescriptorParseError",
]

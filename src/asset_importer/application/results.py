"""Application-layer result objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from asset_importer.types import OptionValue


class CopyOutcome(str, Enum):
    """Whether a cached copy performed I/O."""

    COPIED = "copied"
    SKIPPED_IDENTICAL = "skipped_identical"


@dataclass(frozen=True)
class CopyResult:
    """Structured copy outcome."""

    outcome: CopyOutcome
    source_path: Path
    dest_path: Path
    content_hash: str
    sidecar_path: Path

    @property
    def copied(self) -> bool:
        """``True`` when the file was actually copied."""
        return self.outcome is CopyOutcome.COPIED


@dataclass(frozen=True)
class ImportArtifact:
    """A derived artifact path, optionally tagged with its variant name."""

    path: Path
    variant: str | None = None


@dataclass(frozen=True)
class ImportResult:
    """Structured import outcome."""

    source_path: Path
    descriptor_path: Path
    importer: str
    options: Mapping[str, OptionValue]
    artifact_base_path: Path
    artifacts: tuple[ImportArtifact, ...] = ()

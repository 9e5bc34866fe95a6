"""Hash sidecar files recording the last copied content digest."""

from __future__ import annotations

from pathlib import Path

from asset_importer.types import HashAlgorithm


def sidecar_path(cache_dir: Path, key: str, algorithm: HashAlgorithm) -> Path:
    """Return the sidecar location for a fingerprint key."""
    return cache_dir / f"{key}.{algorithm}"


def read_sidecar(path: Path) -> str | None:
    """Return the recorded digest, or ``None`` when there is no usable record.

    An unreadable sidecar counts as a miss; the next successful copy
    overwrites it.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            line = handle.readline()
    except (OSError, UnicodeDecodeError):
        return None
    digest = line.strip().lower()
    return digest or None


def write_sidecar(path: Path, digest: str) -> None:
    """Overwrite the sidecar with a single digest line.

    Raises
    ------
    OSError
        If the file cannot be written.
    """
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(digest.lower() + "\n")

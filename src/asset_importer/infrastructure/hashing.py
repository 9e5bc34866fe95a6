"""Content and path fingerprints."""

from __future__ import annotations

import hashlib
from pathlib import Path

from asset_importer.types import HashAlgorithm

DEFAULT_ALGORITHM: HashAlgorithm = "md5"


def digest_text(text: str, algorithm: HashAlgorithm = DEFAULT_ALGORITHM) -> str:
    """Return the lowercase hex digest of UTF-8 encoded text."""
    return hashlib.new(algorithm, text.encode("utf-8")).hexdigest()


def digest_file(
    path: Path,
    algorithm: HashAlgorithm = DEFAULT_ALGORITHM,
    *,
    chunk_size: int = 1 << 20,
) -> str:
    """Return the lowercase hex digest of file content."""
    hasher = hashlib.new(algorithm)
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)
    return hasher.hexdigest()


def fingerprint(path: Path, algorithm: HashAlgorithm = DEFAULT_ALGORITHM) -> str:
    """Return the cache entry name for a source path.

    The name combines the file name with a digest of the absolute path text,
    so two sources with equal content never share a cache entry.

    Parameters
    ----------
    path : Path
        Source file path. Relative paths are made absolute first.
    algorithm : {"md5", "sha1", "sha256"}, default="md5"
        Digest used for the path component.

    Returns
    -------
    str
        ``"<file name>-<hex digest of absolute path>"``.
    """
    absolute = path.absolute()
    return f"{absolute.name}-{digest_text(str(absolute), algorithm)}"

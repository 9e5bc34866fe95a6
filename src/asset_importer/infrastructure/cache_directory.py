"""Bootstrap of the shared cache directory."""

from __future__ import annotations

import os
from pathlib import Path

from asset_importer.errors import DirectoryCreateFailedError, DirectoryUnavailableError
from asset_importer.schemas import DEFAULT_CACHE_DIR_NAME, ImporterSettings


class CacheDirectory:
    """Handle to the hidden cache directory under the per-user data root.

    Parameters
    ----------
    data_root : Path
        Per-user data directory. Created (with parents) on first use.
    name : str, default=".import"
        Name of the cache directory inside ``data_root``.
    """

    def __init__(self, data_root: Path, name: str = DEFAULT_CACHE_DIR_NAME) -> None:
        self.data_root = data_root.expanduser().absolute()
        self.path = self.data_root / name

    @classmethod
    def from_settings(cls, settings: ImporterSettings) -> CacheDirectory:
        """Build a cache directory handle from importer settings."""
        return cls(settings.data_root, settings.cache_dir_name)

    def ensure(self) -> Path:
        """Create the cache directory if needed and return its absolute path.

        Calling this repeatedly is safe; an existing directory is success.

        Raises
        ------
        DirectoryUnavailableError
            If the data root cannot be created or opened.
        DirectoryCreateFailedError
            If the cache directory cannot be created.
        """
        self._open_data_root()
        try:
            self.path.mkdir()
        except FileExistsError:
            if not self.path.is_dir():
                raise DirectoryCreateFailedError(
                    self.path, "a file with that name already exists"
                ) from None
        except OSError as exc:
            raise DirectoryCreateFailedError(self.path, str(exc)) from exc
        return self.path

    def _open_data_root(self) -> None:
        try:
            self.data_root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryUnavailableError(self.data_root, str(exc)) from exc
        if not os.access(self.data_root, os.R_OK | os.W_OK | os.X_OK):
            raise DirectoryUnavailableError(self.data_root, "permission denied")

    def __repr__(self) -> str:
        return f"CacheDirectory({str(self.path)!r})"

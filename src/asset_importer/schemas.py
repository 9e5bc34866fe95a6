"""Pydantic schemas for runtime validation of importer settings and requests."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from asset_importer.errors import ConfigError

APP_DIR_NAME = "asset_importer"
DEFAULT_CACHE_DIR_NAME = ".import"

ENV_DATA_ROOT = "ASSET_IMPORTER_DATA_ROOT"
ENV_CACHE_DIR = "ASSET_IMPORTER_CACHE_DIR"
ENV_HASH = "ASSET_IMPORTER_HASH"


def default_data_root() -> Path:
    """Return the platform per-user data directory for this application."""
    home = Path.home()
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA") or home / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = home / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_DATA_HOME") or home / ".local" / "share")
    return base / APP_DIR_NAME


class ImporterSettings(BaseModel):
    """Validated importer configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    data_root: Path = Field(default_factory=default_data_root)
    cache_dir_name: str = DEFAULT_CACHE_DIR_NAME
    hash_algorithm: Literal["md5", "sha1", "sha256"] = "md5"

    @field_validator("cache_dir_name")
    @classmethod
    def _validate_cache_dir_name(cls, value: str) -> str:
        value = value.strip()
        if not value or value in {".", ".."}:
            raise ValueError("cache_dir_name must be a directory name.")
        if "/" in value or "\\" in value:
            raise ValueError("cache_dir_name must be a single path component.")
        return value

    @field_validator("data_root")
    @classmethod
    def _expand_data_root(cls, value: Path) -> Path:
        return value.expanduser().absolute()


class CopyRequest(BaseModel):
    """Validated input for a cached copy."""

    model_config = ConfigDict(extra="forbid")

    source_path: Path
    dest_path: Path
    force: bool = False


class ImportRequest(BaseModel):
    """Validated input for a converter import."""

    model_config = ConfigDict(extra="forbid")

    source_path: Path
    option_overrides: dict[str, object] = Field(default_factory=dict)

    @field_validator("option_overrides", mode="before")
    @classmethod
    def _normalize_overrides(cls, value: object) -> dict[str, object]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("option_overrides must be a mapping.")
        return {str(key): item for key, item in value.items()}


def load_settings(environ: Mapping[str, str] | None = None) -> ImporterSettings:
    """Build settings from environment variables, falling back to defaults.

    Parameters
    ----------
    environ : Mapping[str, str] | None, optional
        Environment to read. Defaults to ``os.environ``.

    Returns
    -------
    ImporterSettings
        Validated settings.

    Raises
    ------
    ConfigError
        If an environment override is invalid.
    """
    env = os.environ if environ is None else environ
    payload: dict[str, object] = {}
    if env.get(ENV_DATA_ROOT):
        payload["data_root"] = Path(env[ENV_DATA_ROOT])
    if env.get(ENV_CACHE_DIR):
        payload["cache_dir_name"] = env[ENV_CACHE_DIR]
    if env.get(ENV_HASH):
        payload["hash_algorithm"] = env[ENV_HASH].strip().lower()
    try:
        return ImporterSettings(**payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid importer settings: {exc}") from exc

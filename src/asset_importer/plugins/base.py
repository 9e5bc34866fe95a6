"""Converter protocol implemented by format plugins."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from asset_importer.types import OptionMap, OptionValue

PRESET_DEFAULT = "default"
PRESET_3D = "3d"


@runtime_checkable
class Converter(Protocol):
    """Protocol implemented by format converters.

    Attributes
    ----------
    name : str
        Unique converter name, recorded as ``importer`` in descriptors.
    extensions : tuple[str, ...]
        File extensions (without dot) the converter claims.
    resource_type : str | None
        Declared type of the derived resource, if any.
    save_extension : str
        Extension of the derived artifacts. Empty means no artifact path is
        recorded.
    """

    name: str
    extensions: tuple[str, ...]
    resource_type: str | None
    save_extension: str

    def get_options(self, preset: str) -> Sequence[tuple[str, OptionValue]]:
        """Return declared options and their defaults.

        Parameters
        ----------
        preset : str
            Preset hint such as ``"3d"``. Converters without presets ignore it.

        Returns
        -------
        Sequence[tuple[str, OptionValue]]
            ``(name, default)`` pairs in declaration order.
        """

    def convert(
        self,
        source_path: Path,
        artifact_base_path: Path,
        options: OptionMap,
    ) -> list[str] | None:
        """Produce derived artifacts next to ``artifact_base_path``.

        Parameters
        ----------
        source_path : Path
            Source asset.
        artifact_base_path : Path
            Base path without extension. Artifacts are written to
            ``<base>.<save_extension>`` or ``<base>.<variant>.<save_extension>``.
        options : Mapping[str, OptionValue]
            Fully resolved options.

        Returns
        -------
        list[str] | None
            Variant names, or ``None`` for a single implicit artifact.

        Raises
        ------
        Exception
            Any failure; the pipeline wraps it in ``ConversionFailedError``.
        """

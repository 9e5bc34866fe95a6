#!/usr/bin/env python3
"""Example converter module for RIFF/WAVE samples."""

from __future__ import annotations

import shutil
from collections.abc import Mapping, Sequence
from pathlib import Path

from asset_importer.errors import PluginError


class WavSampleConverter:
    """Store WAVE files as samples, optionally flagged for mono downmix."""

    name = "wav"
    extensions = ("wav",)
    resource_type = "AudioStreamSample"
    save_extension = "sample"

    def get_options(self, preset: str) -> Sequence[tuple[str, object]]:
        """Declare the sample options.

        Parameters
        ----------
        preset : str
            Import preset. Positional audio defaults to mono for ``"3d"``.

        Returns
        -------
        Sequence[tuple[str, object]]
            Option names and defaults, in declaration order.
        """
        return [
            ("force/mono", preset == "3d"),
            ("force/max_rate", False),
            ("force/max_rate_hz", 44100),
        ]

    def convert(
        self,
        source_path: Path,
        artifact_base_path: Path,
        options: Mapping[str, object],
    ) -> list[str] | None:
        """Copy the WAVE payload to ``<artifact_base_path>.sample``."""
        with source_path.open("rb") as handle:
            header = handle.read(12)
        if header[:4] != b"RIFF" or header[8:12] != b"WAVE":
            raise PluginError(f"'{source_path}' is not a RIFF/WAVE file.")
        rate = options.get("force/max_rate_hz")
        if not isinstance(rate, int) or rate <= 0:
            raise PluginError("force/max_rate_hz must be a positive integer.")

        shutil.copyfile(source_path, f"{artifact_base_path}.{self.save_extension}")
        return None


def register_converters(registry: object) -> None:
    """Registry hook used by asset-import --plugin-module."""
    registry.register(WavSampleConverter())

#!/usr/bin/env python3
"""Example: cached copy plus audio imports into a scratch data root."""

from __future__ import annotations

import struct
import tempfile
from pathlib import Path

from asset_importer import api
from asset_importer.infrastructure.descriptor import read_descriptor
from asset_importer.schemas import ImporterSettings

PLUGIN = Path(__file__).with_name("wav_plugin.py")


def _write_wav(path: Path) -> None:
    data = b"\x00\x00" * 64
    fmt = struct.pack("<HHIIHH", 1, 1, 22050, 44100, 2, 16)
    body = b"WAVE" + b"fmt " + struct.pack("<I", len(fmt)) + fmt
    body += b"data" + struct.pack("<I", len(data)) + data
    path.write_bytes(b"RIFF" + struct.pack("<I", len(body)) + body)


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        settings = ImporterSettings(data_root=root / "userdata")

        theme = root / "theme.ogg"
        theme.write_bytes(b"OggS" + b"\x00" * 60)
        result = api.import_file(theme, {"loop": False}, settings=settings)
        print(f"{result.importer}: {result.descriptor_path}")
        print(result.descriptor_path.read_text(encoding="utf-8"))

        step = root / "step.wav"
        _write_wav(step)
        result = api.import_file(step, plugin_modules=[str(PLUGIN)], settings=settings)
        descriptor = read_descriptor(result.descriptor_path)
        print(f"{descriptor.importer}: {descriptor.artifact_paths()} {descriptor.params}")

        copy_dest = root / "theme_copy.ogg"
        for _ in range(2):
            copied = api.copy_file(theme, copy_dest, settings=settings)
            print(f"copy: {copied.outcome.value}")


if __name__ == "__main__":
    main()

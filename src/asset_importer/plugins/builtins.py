"""Built-in converters."""

from __future__ import annotations

import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from asset_importer.errors import PluginError
from asset_importer.types import OptionMap, OptionValue


class AudioStreamOptions(BaseModel):
    """Validated options for compressed audio stream converters."""

    model_config = ConfigDict(extra="ignore", strict=True)

    loop: bool = True
    loop_offset: float = Field(default=0.0, ge=0.0)


def _is_ogg(header: bytes) -> bool:
    return header.startswith(b"OggS")


def _is_mp3(header: bytes) -> bool:
    if header.startswith(b"ID3"):
        return True
    return len(header) >= 2 and header[0] == 0xFF and (header[1] & 0xE0) == 0xE0


class AudioStreamConverter:
    """Embed a compressed audio stream verbatim and record loop settings.

    Notes
    -----
    The stream is not decoded; only its container signature is checked.
    """

    def __init__(
        self,
        name: str,
        extensions: tuple[str, ...],
        resource_type: str,
        save_extension: str,
        signature: Callable[[bytes], bool],
    ) -> None:
        self.name = name
        self.extensions = extensions
        self.resource_type = resource_type
        self.save_extension = save_extension
        self._signature = signature

    def get_options(self, preset: str) -> Sequence[tuple[str, OptionValue]]:
        """Return ``loop`` and ``loop_offset`` defaults; presets do not apply."""
        del preset
        defaults = AudioStreamOptions()
        return [("loop", defaults.loop), ("loop_offset", defaults.loop_offset)]

    def convert(
        self,
        source_path: Path,
        artifact_base_path: Path,
        options: OptionMap,
    ) -> list[str] | None:
        """Copy the stream into ``<base>.<save_extension>``.

        Raises
        ------
        PluginError
            If options are invalid or the file is not a stream of this format.
        """
        try:
            AudioStreamOptions.model_validate(dict(options))
        except ValidationError as exc:
            raise PluginError(f"Invalid {self.name} options: {exc}") from exc

        with source_path.open("rb") as handle:
            header = handle.read(4)
        if not self._signature(header):
            raise PluginError(
                f"'{source_path}' is not a valid {self.name} stream.", path=source_path
            )

        target = artifact_base_path.with_name(
            f"{artifact_base_path.name}.{self.save_extension}"
        )
        shutil.copyfile(source_path, target)
        return None


def builtin_converters() -> list[AudioStreamConverter]:
    """Return fresh instances of the built-in converters."""
    return [
        AudioStreamConverter(
            name="ogg_vorbis",
            extensions=("ogg",),
            resource_type="AudioStreamOGGVorbis",
            save_extension="oggstr",
            signature=_is_ogg,
        ),
        AudioStreamConverter(
            name="mp3",
            extensions=("mp3",),
            resource_type="AudioStreamMP3",
            save_extension="mp3str",
            signature=_is_mp3,
        ),
    ]

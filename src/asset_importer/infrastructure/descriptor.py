"""Remap descriptor (``<source>.import``) rendering and parsing.

Layout::

    [remap]
    importer="<converter name>"
    type="<resource type>"
    path="<base>.<ext>"
    path.<variant>="<base>.<variant>.<ext>"
    [params]
    <option>=<value>

Strings and option values are written as JSON literals, so the ``[params]``
section parses back to the exact resolved options for JSON-representable
values (tuples come back as lists).
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from asset_importer.errors import DescriptorParseError, DescriptorWriteFailedError
from asset_importer.types import OptionValue

DESCRIPTOR_SUFFIX = ".import"
REMAP_SECTION = "remap"
PARAMS_SECTION = "params"


def descriptor_path_for(source_path: Path) -> Path:
    """Return ``<source_path>.import``."""
    return source_path.with_name(source_path.name + DESCRIPTOR_SUFFIX)


def format_value(value: OptionValue | Path) -> str:
    """Render an option value as a single-line literal."""
    return json.dumps(value, ensure_ascii=False, default=str)


@dataclass(frozen=True)
class RemapDescriptor:
    """Where a source's derived artifacts live and how they were produced."""

    importer: str
    resource_type: str | None = None
    path: str | None = None
    variant_paths: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, OptionValue] = field(default_factory=dict)

    def artifact_paths(self) -> list[Path]:
        """Return every recorded artifact path, single path first."""
        paths = [Path(self.path)] if self.path is not None else []
        paths.extend(Path(value) for value in self.variant_paths.values())
        return paths

    def render(self) -> str:
        """Render the descriptor text."""
        lines = [f"[{REMAP_SECTION}]", f"importer={format_value(self.importer)}"]
        if self.resource_type:
            lines.append(f"type={format_value(self.resource_type)}")
        if self.variant_paths:
            for variant, variant_path in self.variant_paths.items():
                lines.append(f"path.{variant}={format_value(variant_path)}")
        elif self.path is not None:
            lines.append(f"path={format_value(self.path)}")
        lines.append(f"[{PARAMS_SECTION}]")
        for name, value in self.params.items():
            lines.append(f"{name}={format_value(value)}")
        return "\n".join(lines) + "\n"

    @classmethod
    def parse(cls, text: str, source: Path | None = None) -> RemapDescriptor:
        """Parse descriptor text.

        Unknown sections and unknown ``[remap]`` keys are ignored.

        Raises
        ------
        DescriptorParseError
            If a line is malformed or ``importer`` is missing.
        """
        section: str | None = None
        remap: dict[str, object] = {}
        variant_paths: dict[str, str] = {}
        params: dict[str, OptionValue] = {}

        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith(";"):
                continue
            if line.startswith("[") and line.endswith("]"):
                section = line[1:-1].strip()
                continue
            if "=" not in line:
                raise DescriptorParseError(source, number, f"expected KEY=VALUE, got {line!r}")
            key, raw_value = line.split("=", 1)
            key = key.strip()
            try:
                value = json.loads(raw_value)
            except json.JSONDecodeError as exc:
                raise DescriptorParseError(source, number, f"bad value for {key!r}: {exc}") from exc

            if section == REMAP_SECTION:
                if key.startswith("path."):
                    variant_paths[key[len("path."):]] = str(value)
                else:
                    remap[key] = value
            elif section == PARAMS_SECTION:
                params[key] = value
            elif section is None:
                raise DescriptorParseError(source, number, "entry outside of a section")

        importer = remap.get("importer")
        if not isinstance(importer, str) or not importer:
            raise DescriptorParseError(source, 0, "missing importer in [remap]")
        resource_type = remap.get("type")
        path = remap.get("path")
        return cls(
            importer=importer,
            resource_type=str(resource_type) if resource_type is not None else None,
            path=str(path) if path is not None else None,
            variant_paths=variant_paths,
            params=params,
        )


def write_descriptor(path: Path, descriptor: RemapDescriptor) -> None:
    """Write the descriptor, replacing any previous one in a single rename.

    Raises
    ------
    DescriptorWriteFailedError
        If the file cannot be written.
    """
    text = descriptor.render()
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise DescriptorWriteFailedError(path, str(exc)) from exc


def read_descriptor(path: Path) -> RemapDescriptor:
    """Read and parse ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    DescriptorParseError
        If the content is malformed.
    """
    return RemapDescriptor.parse(path.read_text(encoding="utf-8"), source=path)

"""Import option resolution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from asset_importer.types import MutableOptionMap, OptionValue


@dataclass(frozen=True)
class ImportOption:
    """A converter-declared option and its default value."""

    name: str
    default: OptionValue


def declared_options(
    pairs: Sequence[tuple[str, OptionValue]],
) -> list[ImportOption]:
    """Normalize ``(name, default)`` pairs, keeping the first of duplicate names."""
    seen: set[str] = set()
    options: list[ImportOption] = []
    for name, default in pairs:
        if name in seen:
            continue
        seen.add(name)
        options.append(ImportOption(name=name, default=default))
    return options


def resolve_options(
    declared: Sequence[ImportOption],
    overrides: Mapping[str, object],
) -> MutableOptionMap:
    """Merge caller overrides over declared defaults.

    Every declared option appears once, in declaration order. Overrides
    replace values wholesale; keys the converter does not declare are
    dropped.
    """
    resolved: MutableOptionMap = {}
    for option in declared:
        if option.name in overrides:
            resolved[option.name] = overrides[option.name]  # type: ignore[assignment]
        else:
            resolved[option.name] = option.default
    return resolved

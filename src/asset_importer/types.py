"""Shared type aliases for converter options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, TypeAlias

HashAlgorithm: TypeAlias = Literal["md5", "sha1", "sha256"]

OptionScalar: TypeAlias = str | int | float | bool | None
OptionValue: TypeAlias = (
    OptionScalar
    | tuple["OptionValue", ...]
    | list["OptionValue"]
    | dict[str, "OptionValue"]
)
OptionMap: TypeAlias = Mapping[str, OptionValue]
MutableOptionMap: TypeAlias = dict[str, OptionValue]

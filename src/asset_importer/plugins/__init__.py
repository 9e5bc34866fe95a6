"""Converter interfaces and registry for asset imports."""

from .base import PRESET_3D, PRESET_DEFAULT, Converter
from .registry import ConverterRegistry, create_default_registry

__all__ = [
    "Converter",
    "ConverterRegistry",
    "PRESET_3D",
    "PRESET_DEFAULT",
    "create_default_registry",
]

"""Converter registry and plugin discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from asset_importer.errors import PluginError
from asset_importer.plugins.base import Converter
from asset_importer.plugins.builtins import builtin_converters


def normalize_extension(extension: str) -> str:
    """Return an extension lower-cased and without a leading dot."""
    return extension.strip().lstrip(".").lower()


class ConverterRegistry:
    """Registry mapping file extensions to converters."""

    def __init__(self) -> None:
        self._converters: dict[str, Converter] = {}
        self._by_extension: dict[str, Converter] = {}

    def register(self, converter: Converter) -> None:
        """Register a converter under its name and extensions.

        Parameters
        ----------
        converter : Converter
            Converter instance to register.

        Raises
        ------
        PluginError
            If the name is empty or taken, no extension is declared, or an
            extension is already claimed by another converter.
        """
        name = getattr(converter, "name", "").strip()
        if not name:
            raise PluginError("Converter must define a non-empty 'name'.")
        if name in self._converters:
            raise PluginError(f"Converter '{name}' is already registered.")

        extensions = [
            normalize_extension(ext) for ext in getattr(converter, "extensions", ())
        ]
        extensions = [ext for ext in extensions if ext]
        if not extensions:
            raise PluginError(f"Converter '{name}' must declare at least one extension.")
        for ext in extensions:
            owner = self._by_extension.get(ext)
            if owner is not None:
                raise PluginError(
                    f"Extension '.{ext}' of converter '{name}' is already "
                    f"claimed by '{owner.name}'."
                )

        self._converters[name] = converter
        for ext in extensions:
            self._by_extension[ext] = converter

    def names(self) -> list[str]:
        """Return registered converter names, sorted."""
        return sorted(self._converters.keys())

    def extensions(self) -> list[str]:
        """Return claimed extensions, sorted."""
        return sorted(self._by_extension.keys())

    def get(self, name: str) -> Converter:
        """Get converter by name.

        Raises
        ------
        PluginError
            If the name is not registered.
        """
        try:
            return self._converters[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown converter '{name}'. Available converters: {', '.join(self.names())}"
            ) from exc

    def find_by_extension(self, extension: str) -> Converter | None:
        """Return the converter claiming ``extension``, if any."""
        return self._by_extension.get(normalize_extension(extension))

    def can_import(self, path: Path) -> bool:
        """Return whether a registered converter claims the path's extension."""
        suffix = Path(path).suffix
        return bool(suffix) and self.find_by_extension(suffix) is not None

    def load_module(self, module_or_path: str) -> None:
        """Load converters from a module name or file path.

        .. warning::
            This executes code from the module. Only load trusted plugins.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import a module by dotted name or filesystem path.

    Raises
    ------
    PluginError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise PluginError(
                f"Unable to load converter module from {candidate}.", path=candidate
            )
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise PluginError(
            f"Unable to import converter module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: ConverterRegistry) -> None:
    """Register converters exposed by a plugin module."""
    if hasattr(module, "register_converters"):
        module.register_converters(registry)
        return

    converters_obj = getattr(module, "CONVERTERS", None)
    if converters_obj is not None:
        for converter in converters_obj:
            registry.register(converter)
        return

    converter_obj = getattr(module, "CONVERTER", None)
    if converter_obj is not None:
        registry.register(converter_obj)
        return

    raise PluginError(
        "Converter module must expose register_converters(registry), CONVERTERS, or CONVERTER."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> ConverterRegistry:
    """Create a registry holding the built-in converters plus extra modules."""
    registry = ConverterRegistry()
    for converter in builtin_converters():
        registry.register(converter)
    for module in extra_modules or []:
        registry.load_module(module)
    return registry

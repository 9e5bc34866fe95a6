"""Unit tests for converter registry resolution and module loading helpers."""

from __future__ import annotations

import types
from collections.abc import Callable
from pathlib import Path

import pytest

from asset_importer.errors import PluginError
from asset_importer.plugins.base import Converter
from asset_importer.plugins.registry import (
    ConverterRegistry,
    _import_module_or_path,
    _register_from_module,
    create_default_registry,
)


def test_register_requires_non_empty_name(
    registry: ConverterRegistry, make_converter: Callable[..., object]
) -> None:
    """Reject converters without a non-empty name."""
    with pytest.raises(PluginError, match="non-empty 'name'"):
        registry.register(make_converter(name="  "))


def test_register_requires_extension(
    registry: ConverterRegistry, make_converter: Callable[..., object]
) -> None:
    """Reject converters that claim no extension."""
    with pytest.raises(PluginError, match="at least one extension"):
        registry.register(make_converter(extensions=("", ".")))


def test_register_rejects_duplicate_name(
    registry: ConverterRegistry, make_converter: Callable[..., object]
) -> None:
    """Names are unique."""
    registry.register(make_converter(name="tex", extensions=("png",)))
    with pytest.raises(PluginError, match="already registered"):
        registry.register(make_converter(name="tex", extensions=("jpg",)))


def test_register_rejects_claimed_extension(
    registry: ConverterRegistry, make_converter: Callable[..., object]
) -> None:
    """One extension maps to exactly one converter."""
    registry.register(make_converter(name="a", extensions=("png",)))
    with pytest.raises(PluginError, match="already claimed by 'a'"):
        registry.register(make_converter(name="b", extensions=(".PNG",)))
    assert registry.names() == ["a"]


def test_find_by_extension_normalizes(
    registry: ConverterRegistry, make_converter: Callable[..., object]
) -> None:
    """Lookups ignore case and a leading dot."""
    converter = make_converter(extensions=("png", "JPG"))
    registry.register(converter)
    assert registry.find_by_extension("png") is converter
    assert registry.find_by_extension(".Jpg") is converter
    assert registry.find_by_extension("xyz") is None
    assert registry.extensions() == ["jpg", "png"]


def test_can_import(registry: ConverterRegistry, make_converter: Callable[..., object]) -> None:
    """can_import follows the path suffix only."""
    registry.register(make_converter())
    assert registry.can_import(Path("/a/b/wood.PNG"))
    assert not registry.can_import(Path("file.xyz"))
    assert not registry.can_import(Path("Makefile"))


def test_get_unknown_converter_raises(registry: ConverterRegistry) -> None:
    """Raise a clear error for unknown names."""
    with pytest.raises(PluginError, match="Unknown converter"):
        registry.get("missing")


def test_fake_converter_satisfies_protocol(make_converter: Callable[..., object]) -> None:
    """Structural conformance is enough; no base class needed."""
    assert isinstance(make_converter(), Converter)


def test_import_module_by_path_and_register(tmp_path: Path) -> None:
    """Load a converter module from a file path."""
    plugin_file = tmp_path / "wav_plugin.py"
    plugin_file.write_text(
        "class Wav:\n"
        "    name = 'wav'\n"
        "    extensions = ('wav',)\n"
        "    resource_type = 'AudioStreamSample'\n"
        "    save_extension = 'sample'\n"
        "    def get_options(self, preset):\n"
        "        return [('force/mono', False)]\n"
        "    def convert(self, source_path, artifact_base_path, options):\n"
        "        return None\n"
        "CONVERTER = Wav()\n",
        encoding="utf-8",
    )
    module = _import_module_or_path(str(plugin_file))
    registry = ConverterRegistry()
    _register_from_module(module, registry)
    assert registry.find_by_extension("wav").name == "wav"


def test_import_module_invalid_path_spec_raises(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Raise PluginError when a file path has no usable import spec."""
    plugin_file = tmp_path / "plugin_mod.py"
    plugin_file.write_text("x = 1\n", encoding="utf-8")
    monkeypatch.setattr(
        "asset_importer.plugins.registry.importlib.util.spec_from_file_location",
        lambda *_args, **_kwargs: None,
    )
    with pytest.raises(PluginError, match="Unable to load converter module"):
        _import_module_or_path(str(plugin_file))


def test_import_module_by_name_failure_raises() -> None:
    """Raise PluginError when the dotted path cannot be imported."""
    with pytest.raises(PluginError, match="Unable to import converter module"):
        _import_module_or_path("module.that.does.not.exist")


def test_register_from_module_uses_hook(make_converter: Callable[..., object]) -> None:
    """Prefer register_converters(registry) when available."""
    registry = ConverterRegistry()
    module = types.SimpleNamespace(
        register_converters=lambda r: r.register(make_converter(name="hook"))
    )
    _register_from_module(module, registry)
    assert registry.get("hook").name == "hook"


def test_register_from_module_with_list(make_converter: Callable[..., object]) -> None:
    """Register every converter in CONVERTERS."""
    registry = ConverterRegistry()
    module = types.SimpleNamespace(
        CONVERTERS=[
            make_converter(name="a", extensions=("a",)),
            make_converter(name="b", extensions=("b",)),
        ]
    )
    _register_from_module(module, registry)
    assert registry.names() == ["a", "b"]


def test_register_from_module_requires_contract() -> None:
    """Raise when the module exposes no registration contract."""
    with pytest.raises(PluginError, match="must expose"):
        _register_from_module(types.SimpleNamespace(), ConverterRegistry())


def test_create_default_registry_loads_extra_modules(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Built-ins are present and extra modules are loaded in order."""
    loaded: list[str] = []

    def fake_load_module(self: ConverterRegistry, module: str) -> None:
        loaded.append(module)

    monkeypatch.setattr(ConverterRegistry, "load_module", fake_load_module)
    registry = create_default_registry(extra_modules=["a.b", "c.d"])
    assert registry.names() == ["mp3", "ogg_vorbis"]
    assert loaded == ["a.b", "c.d"]


def test_default_registries_are_independent() -> None:
    """Each call builds a fresh registry; nothing is global."""
    first = create_default_registry()
    second = create_default_registry()
    assert first is not second
    assert first.get("mp3") is not second.get("mp3")

"""Shared pytest configuration, marker assignment and converter doubles."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from asset_importer.infrastructure.cache_directory import CacheDirectory
from asset_importer.plugins.registry import ConverterRegistry


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeConverter:
    """Converter test double that writes one small file per artifact."""

    def __init__(
        self,
        name: str = "fake_texture",
        extensions: tuple[str, ...] = ("png",),
        resource_type: str | None = "Texture",
        save_extension: str = "tex",
        options: Sequence[tuple[str, object]] = (("x", 1), ("y", "a")),
        variants: list[str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.name = name
        self.extensions = extensions
        self.resource_type = resource_type
        self.save_extension = save_extension
        self.error = error
        self._options = list(options)
        self._variants = variants
        self.presets: list[str] = []
        self.calls: list[tuple[Path, Path, dict[str, object]]] = []

    def get_options(self, preset: str) -> list[tuple[str, object]]:
        self.presets.append(preset)
        return list(self._options)

    def convert(
        self,
        source_path: Path,
        artifact_base_path: Path,
        options: dict[str, object],
    ) -> list[str] | None:
        self.calls.append((source_path, artifact_base_path, dict(options)))
        if self.error is not None:
            raise self.error
        if self.save_extension:
            for variant in self._variants or [None]:
                middle = f".{variant}" if variant else ""
                Path(f"{artifact_base_path}{middle}.{self.save_extension}").write_bytes(
                    source_path.read_bytes()
                )
        return list(self._variants) if self._variants else None


@pytest.fixture
def make_converter() -> Callable[..., FakeConverter]:
    """Return a factory for converter doubles."""
    return FakeConverter


@pytest.fixture
def cache_dir(tmp_path: Path) -> CacheDirectory:
    """Cache directory rooted in a per-test data root."""
    return CacheDirectory(tmp_path / "userdata")


@pytest.fixture
def registry() -> ConverterRegistry:
    """Empty converter registry."""
    return ConverterRegistry()

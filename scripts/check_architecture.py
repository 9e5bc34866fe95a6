#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    package = ROOT / "src/asset_importer"
    for layer in ("application", "infrastructure", "plugins"):
        for path in (package / layer).glob("*.py"):
            _assert_no_imports(
                path,
                [
                    "import typer",
                    "from typer",
                    "asset_importer.cli",
                    "asset_importer.api",
                ],
            )

    for path in (package / "infrastructure").glob("*.py"):
        _assert_no_imports(path, ["asset_importer.application", "asset_importer.plugins"])

    for path in (package / "application").glob("*.py"):
        _assert_no_imports(path, ["import logging"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()

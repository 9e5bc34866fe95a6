"""End-to-end smoke test for CLI help output."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

import asset_importer


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert asset_importer.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["asset-import", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Copy and import game assets" in result.stdout


def test_cli_copy_missing_source_fails_cleanly(tmp_path: Path) -> None:
    """Ensure CLI returns a user-facing error for a missing source."""
    env = dict(os.environ, ASSET_IMPORTER_DATA_ROOT=str(tmp_path / "userdata"))
    result = subprocess.run(
        [
            "asset-import",
            "copy",
            str(tmp_path / "definitely-missing.png"),
            str(tmp_path / "out.png"),
        ],
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )

    assert result.returncode == 2
    assert "does not exist" in result.stderr.lower()

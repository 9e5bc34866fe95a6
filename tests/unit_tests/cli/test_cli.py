"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from asset_importer.cli import cli as cli_module
from asset_importer.schemas import ENV_DATA_ROOT

runner = CliRunner()


@pytest.fixture(autouse=True)
def _data_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "userdata"
    monkeypatch.setenv(ENV_DATA_ROOT, str(root))
    return root


def test_help_shows_commands() -> None:
    """Top-level help lists the subcommands."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    for command in ("copy", "import", "show", "converters"):
        assert command in result.output


def test_copy_then_unchanged(tmp_path: Path) -> None:
    """Second copy of unchanged content reports it."""
    source = tmp_path / "a.png"
    source.write_bytes(b"x")
    dest = tmp_path / "b.png"

    first = runner.invoke(cli_module.app, ["copy", str(source), str(dest)])
    second = runner.invoke(cli_module.app, ["copy", str(source), str(dest)])
    forced = runner.invoke(cli_module.app, ["copy", str(source), str(dest), "--force"])

    assert first.exit_code == 0, first.output
    assert "Copied" in first.output
    assert "Unchanged" in second.output
    assert "Copied" in forced.output


def test_copy_missing_source_uses_error_exit_code(tmp_path: Path) -> None:
    """Typed errors map to their exit codes."""
    result = runner.invoke(
        cli_module.app, ["copy", str(tmp_path / "missing.png"), str(tmp_path / "b.png")]
    )
    assert result.exit_code == 2
    assert "SourceNotFoundError" in result.output
    assert "missing.png" in result.output


def test_import_with_options_and_show(tmp_path: Path) -> None:
    """Import an ogg stream with an override and print its descriptor."""
    source = tmp_path / "theme.ogg"
    source.write_bytes(b"OggS" + b"\x00" * 16)

    result = runner.invoke(
        cli_module.app, ["import", str(source), "--option", "loop=false"]
    )
    assert result.exit_code == 0, result.output
    assert "ogg_vorbis" in result.output

    shown = runner.invoke(cli_module.app, ["show", f"{source}.import"])
    assert shown.exit_code == 0, shown.output
    assert "type: AudioStreamOGGVorbis" in shown.output
    assert "loop = False" in shown.output
    assert "loop_offset = 0.0" in shown.output


def test_import_unknown_format(tmp_path: Path) -> None:
    """Unknown extensions exit with the unrecognized-format code."""
    source = tmp_path / "file.xyz"
    source.write_text("?", encoding="utf-8")
    result = runner.invoke(cli_module.app, ["import", str(source)])
    assert result.exit_code == 6
    assert "unknown file format" in result.output


def test_import_debug_prints_traceback(tmp_path: Path) -> None:
    """--debug adds the traceback for failures."""
    source = tmp_path / "bad.ogg"
    source.write_bytes(b"nope")
    result = runner.invoke(cli_module.app, ["--debug", "import", str(source)])
    assert result.exit_code == 7
    assert "Traceback" in result.output


def test_import_rejects_malformed_option(tmp_path: Path) -> None:
    """Options must be KEY=VALUE."""
    source = tmp_path / "a.ogg"
    source.write_bytes(b"OggS")
    result = runner.invoke(cli_module.app, ["import", str(source), "--option", "loop"])
    assert result.exit_code != 0
    assert "KEY=VALUE" in result.output


def test_converters_lists_builtins() -> None:
    """Built-in converters are listed with their extensions."""
    result = runner.invoke(cli_module.app, ["converters"])
    assert result.exit_code == 0
    assert "ogg_vorbis: .ogg" in result.output
    assert "mp3: .mp3" in result.output


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("False", False), ("null", None), ("3", 3), ("0.5", 0.5), ("abc", "abc")],
)
def test_coerce_option_value(raw: str, expected: object) -> None:
    """Scalars are coerced from their CLI spelling."""
    assert cli_module._coerce_option_value(raw) == expected


def test_parse_import_options_rejects_empty_key() -> None:
    """Empty keys are a usage error."""
    with pytest.raises(typer.BadParameter, match="cannot be empty"):
        cli_module._parse_import_options(["=1"])

#!/usr/bin/env python3
"""
asset_importer.cli.cli

Typer-based CLI for cached asset copies and converter imports.

Examples
--------
Copy an asset, skipping the copy when the content is unchanged:

    asset-import copy textures/wood.png build/wood.png

Import an audio stream with an option override:

    asset-import import music/theme.ogg --option loop=false
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from asset_importer.errors import ImporterError

app = typer.Typer(
    name="asset-import",
    help="Copy and import game assets with content-hash caching.",
    no_args_is_help=True,
)

PLUGIN_MODULE_HELP = "Converter module import path or file path (repeatable)."


def _print_importer_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code."""
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _coerce_option_value(raw: str) -> object:
    """Best-effort coercion for CLI key/value options."""
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def _parse_import_options(option_items: list[str] | None) -> dict[str, object]:
    """Parse repeatable KEY=VALUE import option overrides."""
    parsed: dict[str, object] = {}
    for item in option_items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid option entry '{item}'. Use KEY=VALUE format."
            )
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter("Option key cannot be empty.")
        parsed[key] = _coerce_option_value(raw_value)
    return parsed


@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
) -> None:
    """Initialize shared CLI state and logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


@app.command("copy")
def copy_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(..., help="File to copy."),
    dest_path: Path = typer.Argument(..., help="Destination path."),
    force: bool = typer.Option(
        False, "--force", help="Copy even when the content hash is unchanged."
    ),
) -> None:
    """Copy a file unless its content matches the last recorded copy."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from asset_importer.api import copy_file

        result = copy_file(source_path, dest_path, force)
    except ImporterError as exc:
        raise typer.Exit(code=_print_importer_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_importer_error(exc, debug))

    if result.copied:
        typer.echo(f"✓ Copied: {result.dest_path}")
    else:
        typer.echo(f"= Unchanged: {result.dest_path}")


@app.command("import")
def import_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(..., help="Source asset to import."),
    option: list[str] | None = typer.Option(
        None, "--option", help="Import option override KEY=VALUE (repeatable)."
    ),
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
) -> None:
    """Convert an asset into the cache and write its .import descriptor."""
    debug: bool = bool(ctx.obj.get("debug", False))
    overrides = _parse_import_options(option)
    try:
        from asset_importer.api import import_file

        result = import_file(source_path, overrides, plugin_modules=plugin_module)
    except ImporterError as exc:
        raise typer.Exit(code=_print_importer_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_importer_error(exc, debug))

    typer.echo(f"✓ Imported with {result.importer}: {result.descriptor_path}")
    for artifact in result.artifacts:
        label = f" [{artifact.variant}]" if artifact.variant else ""
        typer.echo(f"  {artifact.path}{label}")


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    descriptor_path: Path = typer.Argument(
        ..., exists=True, readable=True, help="Path to a .import descriptor."
    ),
) -> None:
    """Print the artifact paths and parameters recorded in a descriptor."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from asset_importer.infrastructure.descriptor import read_descriptor

        descriptor = read_descriptor(descriptor_path)
    except ImporterError as exc:
        raise typer.Exit(code=_print_importer_error(exc, debug))

    typer.echo(f"importer: {descriptor.importer}")
    if descriptor.resource_type:
        typer.echo(f"type: {descriptor.resource_type}")
    for path in descriptor.artifact_paths():
        typer.echo(f"path: {path}")
    for name, value in descriptor.params.items():
        typer.echo(f"{name} = {value!r}")


@app.command("converters")
def converters_cmd(
    plugin_module: list[str] | None = typer.Option(
        None, "--plugin-module", help=PLUGIN_MODULE_HELP
    ),
) -> None:
    """List registered converters and the extensions they claim."""
    from asset_importer.plugins.registry import create_default_registry

    try:
        registry = create_default_registry(extra_modules=plugin_module)
    except ImporterError as exc:
        raise typer.BadParameter(str(exc)) from exc

    for name in registry.names():
        converter = registry.get(name)
        extensions = ", ".join(f".{ext}" for ext in converter.extensions)
        typer.echo(f"{name}: {extensions}")


if __name__ == "__main__":
    app()

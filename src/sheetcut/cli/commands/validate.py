"""Validate command for checking cut job files.

Checks a JSON job file for syntax and schema errors, and warns about pieces
that cannot fit on the configured sheet in either orientation.
"""

from pathlib import Path
from typing import Annotated

import typer

from sheetcut.application.config import (
    ConfigError,
    check_oversized_pieces,
    load_config,
)


def _display_load_error(error: ConfigError) -> None:
    """Display a job file loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a cut job file.

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors (cannot be used)
        2 - Job file is valid but some pieces can never fit the sheet

    Example:
        sheetcut validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    warnings = check_oversized_pieces(config)
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
        typer.echo()
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)

    copies = sum(piece.quantity for piece in config.pieces)
    typer.echo(
        f"Validation passed. {len(config.pieces)} piece type(s), {copies} piece(s) "
        f"to cut from a {config.sheet.width:g} x {config.sheet.height:g} sheet."
    )

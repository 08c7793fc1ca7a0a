"""Plan command for computing a cut plan.

Pieces and sheet size come from a JSON job file, from command-line options,
or from both (options override the file).
"""

import logging
import re
from pathlib import Path
from typing import Annotated

import typer

from sheetcut.application import ComputeCutPlanCommand, CutPlanOutput, PieceInput
from sheetcut.application.config import (
    ConfigError,
    OutputFormat,
    config_to_command,
    config_to_piece_inputs,
    config_to_sheet_input,
    load_config,
)
from sheetcut.application.dtos import SheetInput
from sheetcut.domain import StrategySearch
from sheetcut.infrastructure import CutPlanFormatter, JsonExporter
from sheetcut.infrastructure.formatters import DEFAULT_WASTE_WARNING_THRESHOLD

logger = logging.getLogger(__name__)

_PIECE_SPEC = re.compile(
    r"^\s*(?P<width>\d+(?:\.\d+)?)\s*[xX]\s*(?P<height>\d+(?:\.\d+)?)"
    r"(?:\s*[xX]\s*(?P<quantity>\d+))?\s*(?::(?P<label>.*))?$"
)


def parse_piece_spec(spec: str) -> PieceInput:
    """Parse a WIDTHxHEIGHT[xQTY][:label] piece option.

    Examples:
        >>> parse_piece_spec("80x50x2:Door")
        PieceInput(width=80.0, height=50.0, quantity=2, label='Door')
        >>> parse_piece_spec("60x60")
        PieceInput(width=60.0, height=60.0, quantity=1, label='')

    Raises:
        typer.BadParameter: If the spec is malformed.
    """
    match = _PIECE_SPEC.match(spec)
    if match is None:
        raise typer.BadParameter(
            f"Invalid piece '{spec}'. Expected WIDTHxHEIGHT[xQTY][:label], e.g. 80x50x2:Door"
        )
    quantity = match.group("quantity")
    return PieceInput(
        width=float(match.group("width")),
        height=float(match.group("height")),
        quantity=int(quantity) if quantity is not None else 1,
        label=(match.group("label") or "").strip(),
    )


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _render(output: CutPlanOutput, output_format: OutputFormat, threshold: float) -> str:
    if output_format is OutputFormat.JSON:
        return JsonExporter().export(output)
    return CutPlanFormatter(waste_warning_threshold=threshold).format(output)


def plan_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", "-w", help="Sheet width (default 275)"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", "-h", help="Sheet height (default 185)"),
    ] = None,
    pieces: Annotated[
        list[str] | None,
        typer.Option(
            "--piece",
            "-p",
            help="Piece as WIDTHxHEIGHT[xQTY][:label]; repeat for more pieces",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file"),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", min=1, help="Worker processes for the strategy search"),
    ] = None,
    skip_invalid: Annotated[
        bool,
        typer.Option("--skip-invalid", help="Ignore pieces with non-positive size or quantity"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log search progress"),
    ] = False,
) -> None:
    """Compute a cut plan for one sheet.

    Exit codes:
        0 - Every piece fits on the sheet
        1 - Invalid input or job file
        2 - Plan computed but some pieces did not fit

    Examples:
        sheetcut plan -w 275 -h 185 -p 80x50x2:Door -p 60x60x3
        sheetcut plan --config kitchen.json --format json -o plan.json
    """
    _configure_logging(verbose)

    threshold = DEFAULT_WASTE_WARNING_THRESHOLD
    fmt = OutputFormat.TEXT

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        sheet_input = config_to_sheet_input(config)
        piece_inputs = config_to_piece_inputs(config)
        command = config_to_command(config, max_workers=workers)
        threshold = config.output.waste_warning_threshold
        fmt = config.output.format
    else:
        sheet_input = SheetInput()
        piece_inputs = []
        command = ComputeCutPlanCommand(search=StrategySearch(max_workers=workers))

    # CLI options override the job file
    if sheet_width is not None:
        sheet_input.width = sheet_width
    if sheet_height is not None:
        sheet_input.height = sheet_height
    if pieces:
        try:
            piece_inputs = [parse_piece_spec(spec) for spec in pieces]
        except typer.BadParameter as e:
            typer.echo(f"Error: {e.message}", err=True)
            raise typer.Exit(code=1)
    if output_format is not None:
        fmt = output_format

    if not piece_inputs:
        typer.echo("Error: No pieces given. Use --piece or --config.", err=True)
        raise typer.Exit(code=1)

    output = command.execute(sheet_input, piece_inputs, skip_invalid=skip_invalid)
    report = _render(output, fmt, threshold)

    if not output.is_valid:
        typer.echo(report, err=True)
        raise typer.Exit(code=1)

    if output_file is not None:
        output_file.write_text(report + "\n", encoding="utf-8")
        typer.echo(f"Cut plan written to: {output_file}")
    else:
        typer.echo(report)

    if not output.fits:
        raise typer.Exit(code=2)

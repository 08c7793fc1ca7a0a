"""Conversion of validated job configuration into DTOs and services."""

from __future__ import annotations

from sheetcut.application.commands import ComputeCutPlanCommand
from sheetcut.application.config.schema import CutJobConfiguration
from sheetcut.application.dtos import PieceInput, SheetInput
from sheetcut.domain import StrategySearch


def config_to_sheet_input(config: CutJobConfiguration) -> SheetInput:
    return SheetInput(width=config.sheet.width, height=config.sheet.height)


def config_to_piece_inputs(config: CutJobConfiguration) -> list[PieceInput]:
    return [
        PieceInput(
            width=piece.width,
            height=piece.height,
            quantity=piece.quantity,
            label=piece.label,
        )
        for piece in config.pieces
    ]


def config_to_search(
    config: CutJobConfiguration,
    max_workers: int | None = None,
) -> StrategySearch:
    """Build a StrategySearch from the search section.

    Args:
        config: Validated job configuration.
        max_workers: Overrides the configured worker count when given.
    """
    search = config.search
    return StrategySearch(
        sort_orders=search.sort_orders,
        split_policies=search.split_policies,
        try_transposed=search.try_transposed,
        max_workers=max_workers if max_workers is not None else search.max_workers,
    )


def config_to_command(
    config: CutJobConfiguration,
    max_workers: int | None = None,
) -> ComputeCutPlanCommand:
    """Build a ComputeCutPlanCommand honoring the search settings."""
    return ComputeCutPlanCommand(
        search=config_to_search(config, max_workers=max_workers),
        max_instances=config.search.max_instances,
    )

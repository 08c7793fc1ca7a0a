"""Application commands (use cases) for cut planning."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from sheetcut.domain import StrategySearch, UtilizationReporter

from .dtos import CutPlanOutput, PieceInput, SheetInput

logger = logging.getLogger(__name__)

# Upper bound on expanded piece copies per request
DEFAULT_MAX_INSTANCES = 1000


class ComputeCutPlanCommand:
    """Command to compute a cut plan for one sheet.

    Validates raw input, converts it to domain pieces, runs the strategy
    search and derives utilization metrics.
    """

    def __init__(
        self,
        search: StrategySearch | None = None,
        reporter: UtilizationReporter | None = None,
        max_instances: int = DEFAULT_MAX_INSTANCES,
    ) -> None:
        if max_instances < 1:
            raise ValueError("max_instances must be at least 1")
        self.search = search or StrategySearch()
        self.reporter = reporter or UtilizationReporter()
        self.max_instances = max_instances

    def execute(
        self,
        sheet_input: SheetInput,
        piece_inputs: Iterable[PieceInput],
        skip_invalid: bool = False,
    ) -> CutPlanOutput:
        """Execute the cut plan computation.

        Args:
            sheet_input: Sheet dimensions.
            piece_inputs: Piece rows in request order.
            skip_invalid: Drop rows with a non-positive dimension or
                quantity instead of reporting them as errors.

        Returns:
            CutPlanOutput with the best packing and its metrics, or with
            error messages if the input was invalid.
        """
        rows = list(piece_inputs)
        errors = sheet_input.validate()

        if skip_invalid:
            complete = [row for row in rows if row.is_complete()]
            if len(complete) != len(rows):
                logger.info("Skipping %d incomplete piece rows", len(rows) - len(complete))
            rows = complete
        else:
            for position, row in enumerate(rows, start=1):
                errors.extend(row.validate(position))

        total_instances = sum(max(row.quantity, 0) for row in rows)
        if total_instances > self.max_instances:
            errors.append(
                f"Too many pieces: {total_instances} requested, "
                f"maximum is {self.max_instances}"
            )

        if errors:
            logger.debug("Cut plan input rejected: %s", errors)
            sheet = sheet_input.to_sheet() if not sheet_input.validate() else None
            return CutPlanOutput(sheet=sheet, errors=errors)

        sheet = sheet_input.to_sheet()
        pieces = [row.to_piece(f"P{i}") for i, row in enumerate(rows, start=1)]

        result = self.search.find_best_packing(pieces, sheet.width, sheet.height)
        metrics = self.reporter.report(result, sheet.width, sheet.height, pieces)

        return CutPlanOutput(
            sheet=sheet,
            pieces=pieces,
            result=result,
            metrics=metrics,
        )


def compute_cut_plan(
    pieces: Iterable[PieceInput | Mapping[str, Any]],
    sheet_width: float,
    sheet_height: float,
    skip_invalid: bool = False,
    search: StrategySearch | None = None,
) -> CutPlanOutput:
    """Compute a cut plan in one call.

    Args:
        pieces: PieceInput rows or mappings with width, height, quantity
            and label keys.
        sheet_width: Sheet width.
        sheet_height: Sheet height.
        skip_invalid: Drop incomplete rows instead of reporting errors.
        search: Strategy search to use (defaults to the full grid).

    Returns:
        CutPlanOutput for the request.

    Raises:
        ValueError: If a mapping row has a non-numeric value or a fractional
            quantity.

    Example:
        >>> plan = compute_cut_plan(
        ...     [{"width": 80, "height": 50, "quantity": 2}], 275, 185
        ... )
        >>> plan.fits
        True
    """
    rows = [
        piece if isinstance(piece, PieceInput) else PieceInput.from_mapping(piece)
        for piece in pieces
    ]
    command = ComputeCutPlanCommand(search=search)
    return command.execute(
        SheetInput(width=sheet_width, height=sheet_height),
        rows,
        skip_invalid=skip_invalid,
    )

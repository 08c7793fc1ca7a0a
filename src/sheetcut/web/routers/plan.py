"""Cut plan endpoints."""

from fastapi import APIRouter

from sheetcut.application.config import (
    config_to_command,
    config_to_piece_inputs,
    config_to_sheet_input,
    load_config_from_dict,
)
from sheetcut.application.commands import DEFAULT_MAX_INSTANCES
from sheetcut.application.dtos import CutPlanOutput, PieceInput, SheetInput
from sheetcut.infrastructure import plan_to_dict
from sheetcut.web.dependencies import CutPlanCommandDep
from sheetcut.web.exceptions import CutPlanInputError
from sheetcut.web.schemas.requests import CutPlanFromConfigRequest, CutPlanRequest
from sheetcut.web.schemas.responses import CutPlanResponseSchema

router = APIRouter(prefix="/cut-plan", tags=["cut-plan"])


def _output_to_schema(output: CutPlanOutput) -> CutPlanResponseSchema:
    """Convert CutPlanOutput to response schema."""
    if not output.is_valid:
        raise CutPlanInputError(output.errors)
    return CutPlanResponseSchema.model_validate(plan_to_dict(output))


@router.post("", response_model=CutPlanResponseSchema)
def create_cut_plan(
    request: CutPlanRequest,
    command: CutPlanCommandDep,
) -> CutPlanResponseSchema:
    """Compute the best single-sheet cut plan for a list of pieces.

    Args:
        request: Sheet dimensions and piece rows.
        command: Injected ComputeCutPlanCommand.

    Returns:
        Placements, overflow, cut lines and utilization metrics.

    Raises:
        CutPlanInputError: If the sheet or any piece row is invalid.
    """
    sheet_input = SheetInput(width=request.sheet.width, height=request.sheet.height)
    piece_inputs = [
        PieceInput(
            width=piece.width,
            height=piece.height,
            quantity=piece.quantity,
            label=piece.label,
        )
        for piece in request.pieces
    ]
    output = command.execute(
        sheet_input, piece_inputs, skip_invalid=request.skip_invalid
    )
    return _output_to_schema(output)


@router.post("/from-config", response_model=CutPlanResponseSchema)
def create_cut_plan_from_config(
    request: CutPlanFromConfigRequest,
) -> CutPlanResponseSchema:
    """Compute a cut plan from a full job configuration.

    The configuration's search settings select the strategy grid. The
    search always runs in the server process, and the instance limit may
    be lowered but not raised above the server default.

    Raises:
        ConfigError: If the configuration fails validation.
        CutPlanInputError: If the job exceeds the instance limit.
    """
    config = load_config_from_dict(request.config)
    if config.search.max_instances > DEFAULT_MAX_INSTANCES:
        raise CutPlanInputError(
            [
                f"search.max_instances may not exceed {DEFAULT_MAX_INSTANCES}, "
                f"got {config.search.max_instances}"
            ]
        )
    search = config.search.model_copy(update={"max_workers": None})
    command = config_to_command(config.model_copy(update={"search": search}))
    output = command.execute(
        config_to_sheet_input(config), config_to_piece_inputs(config)
    )
    return _output_to_schema(output)

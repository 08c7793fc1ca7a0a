"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from sheetcut.web.schemas.common import PieceSchema, SheetSchema


class CutPlanRequest(BaseModel):
    """Request for computing a cut plan."""

    sheet: SheetSchema = Field(
        default_factory=SheetSchema, description="Sheet dimensions"
    )
    pieces: list[PieceSchema] = Field(
        default_factory=list, description="Pieces to cut, in request order"
    )
    skip_invalid: bool = Field(
        default=False,
        description="Drop rows with a non-positive dimension or quantity",
    )


class CutPlanFromConfigRequest(BaseModel):
    """Request for computing a cut plan from a full job configuration."""

    config: dict[str, Any] = Field(..., description="Full cut job configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Cut job configuration JSON")

"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from sheetcut.web.schemas.common import SheetSchema


class StrategySchema(BaseModel):
    """Search configuration that produced the plan."""

    sort_order: str = Field(..., description="Instance ordering")
    split_policy: str = Field(..., description="Split policy")
    transposed: bool = Field(..., description="Whether the sheet was turned")


class PlacedPieceSchema(BaseModel):
    """A piece copy placed on the sheet."""

    piece_id: str = Field(..., description="Piece identifier")
    label: str = Field(..., description="Label or positional name")
    index: int = Field(..., description="Copy number (0-based)")
    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., description="Width as placed")
    height: float = Field(..., description="Height as placed")
    rotated: bool = Field(..., description="Whether the piece was turned 90 degrees")


class OverflowPieceSchema(BaseModel):
    """A piece copy that did not fit."""

    piece_id: str = Field(..., description="Piece identifier")
    label: str = Field(..., description="Label or positional name")
    index: int = Field(..., description="Copy number (0-based)")
    width: float = Field(..., description="Requested width")
    height: float = Field(..., description="Requested height")


class CutLineSchema(BaseModel):
    """A straight guillotine cut."""

    x1: float
    y1: float
    x2: float
    y2: float


class MetricsSchema(BaseModel):
    """Sheet utilization figures."""

    sheet_area: float = Field(..., description="Sheet area")
    used_area: float = Field(..., description="Area covered by placed pieces")
    waste_area: float = Field(..., description="Unused sheet area")
    waste_percentage: float = Field(..., description="Waste as percent of sheet")
    utilization_percentage: float = Field(..., description="Used percent of sheet")
    total_pieces: int = Field(..., description="Requested piece copies")
    placed_count: int = Field(..., description="Placed piece copies")
    overflow_count: int = Field(..., description="Piece copies that did not fit")


class CutPlanResponseSchema(BaseModel):
    """Response for cut plan computation."""

    is_valid: bool = Field(..., description="Whether the plan was computed")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    sheet: SheetSchema | None = Field(default=None, description="Sheet dimensions")
    fits: bool = Field(..., description="Whether every piece was placed")
    strategy: StrategySchema | None = Field(
        default=None, description="Winning search configuration"
    )
    placed: list[PlacedPieceSchema] = Field(
        default_factory=list, description="Placements in packing order"
    )
    overflow: list[OverflowPieceSchema] = Field(
        default_factory=list, description="Pieces that did not fit"
    )
    cut_lines: list[CutLineSchema] = Field(
        default_factory=list, description="Guillotine cuts in cutting order"
    )
    metrics: MetricsSchema | None = Field(
        default=None, description="Utilization metrics"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )

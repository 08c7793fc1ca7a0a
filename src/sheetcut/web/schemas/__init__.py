"""Pydantic schemas for the REST API."""

from sheetcut.web.schemas.common import PieceSchema, SheetSchema
from sheetcut.web.schemas.requests import (
    ConfigValidateRequest,
    CutPlanFromConfigRequest,
    CutPlanRequest,
)
from sheetcut.web.schemas.responses import (
    CutLineSchema,
    CutPlanResponseSchema,
    ErrorResponseSchema,
    MetricsSchema,
    OverflowPieceSchema,
    PlacedPieceSchema,
    StrategySchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "PieceSchema",
    "SheetSchema",
    # Requests
    "ConfigValidateRequest",
    "CutPlanFromConfigRequest",
    "CutPlanRequest",
    # Responses
    "CutLineSchema",
    "CutPlanResponseSchema",
    "ErrorResponseSchema",
    "MetricsSchema",
    "OverflowPieceSchema",
    "PlacedPieceSchema",
    "StrategySchema",
    "ValidationResultSchema",
]

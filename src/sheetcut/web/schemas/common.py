"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from sheetcut.domain.value_objects import DEFAULT_SHEET_HEIGHT, DEFAULT_SHEET_WIDTH


class SheetSchema(BaseModel):
    """Sheet dimensions."""

    width: float = Field(default=DEFAULT_SHEET_WIDTH, description="Sheet width")
    height: float = Field(default=DEFAULT_SHEET_HEIGHT, description="Sheet height")


class PieceSchema(BaseModel):
    """One requested piece.

    Dimensions are not range-checked here; the cut plan command reports
    every invalid row at once.
    """

    width: float = Field(..., description="Piece width")
    height: float = Field(..., description="Piece height")
    quantity: int = Field(default=1, description="Number of copies")
    label: str = Field(default="", max_length=100, description="Display name")

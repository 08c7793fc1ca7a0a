"""Pydantic models for cut job configuration files.

A job file describes one sheet, the pieces to cut from it, and optional
search and output settings:

    {
        "schema_version": "1.0",
        "sheet": {"width": 275, "height": 185},
        "pieces": [{"width": 80, "height": 50, "quantity": 2, "label": "Door"}]
    }
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sheetcut.domain.services.strategy_search import SORT_ORDERS, SPLIT_POLICIES
from sheetcut.domain.value_objects import (
    DEFAULT_SHEET_HEIGHT,
    DEFAULT_SHEET_WIDTH,
    SortOrder,
    SplitPolicy,
)

# Version 1.0: Sheet, pieces, search and output settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Report formats for the CLI."""

    TEXT = "text"
    JSON = "json"


class SheetConfig(BaseModel):
    """Raw sheet dimensions."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=DEFAULT_SHEET_WIDTH, gt=0, description="Sheet width")
    height: float = Field(default=DEFAULT_SHEET_HEIGHT, gt=0, description="Sheet height")


class PieceConfig(BaseModel):
    """One requested piece."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, description="Piece width")
    height: float = Field(..., gt=0, description="Piece height")
    quantity: int = Field(default=1, ge=1, description="Number of copies")
    label: str = Field(default="", max_length=100, description="Display name")


class SearchConfig(BaseModel):
    """Strategy search settings.

    Attributes:
        sort_orders: Instance orderings to try, in tie-break order.
        split_policies: Split policies to try, in tie-break order.
        try_transposed: Also pack the quarter-turned sheet.
        max_workers: Processes for parallel evaluation (None = sequential).
        max_instances: Refuse requests expanding to more piece copies.
    """

    model_config = ConfigDict(extra="forbid")

    sort_orders: list[SortOrder] = Field(
        default_factory=lambda: list(SORT_ORDERS),
        min_length=1,
        description="Sort orders to try",
    )
    split_policies: list[SplitPolicy] = Field(
        default_factory=lambda: list(SPLIT_POLICIES),
        min_length=1,
        description="Split policies to try",
    )
    try_transposed: bool = Field(
        default=True, description="Also pack the sheet turned a quarter turn"
    )
    max_workers: int | None = Field(
        default=None, ge=1, le=64, description="Parallel worker processes"
    )
    max_instances: int = Field(
        default=1000, ge=1, description="Maximum total piece copies per job"
    )

    @field_validator("sort_orders", "split_policies")
    @classmethod
    def validate_unique(cls, v: list) -> list:
        """Reject repeated entries, which would only duplicate attempts."""
        if len(set(v)) != len(v):
            raise ValueError("Entries must be unique")
        return v


class OutputConfig(BaseModel):
    """Report settings."""

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(default=OutputFormat.TEXT, description="Report format")
    waste_warning_threshold: float = Field(
        default=30.0,
        ge=0,
        le=100,
        description="Waste percentage above which the report flags high waste",
    )


class CutJobConfiguration(BaseModel):
    """Root configuration model for a cut job file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        sheet: Sheet dimensions
        pieces: Pieces to cut
        search: Strategy search settings
        output: Report settings
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    sheet: SheetConfig = Field(default_factory=SheetConfig)
    pieces: list[PieceConfig] = Field(default_factory=list)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major = v.split(".")[0]
        supported_majors = {s.split(".")[0] for s in SUPPORTED_VERSIONS}
        if major in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

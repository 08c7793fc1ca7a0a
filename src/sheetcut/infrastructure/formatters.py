"""Output formatters for cut plans."""

from __future__ import annotations

import json
from typing import Any

from sheetcut.application.dtos import CutPlanOutput
from sheetcut.domain import CutLine, PlacedPiece

DEFAULT_WASTE_WARNING_THRESHOLD = 30.0


def _fmt(value: float) -> str:
    """Format a dimension with at most one decimal place."""
    text = f"{value:.1f}"
    return text[:-2] if text.endswith(".0") else text


def plan_to_dict(output: CutPlanOutput) -> dict[str, Any]:
    """Convert a cut plan into plain JSON-serializable data.

    Placed entries report the piece's size as placed (after rotation);
    overflow entries report the requested size and carry no position.
    """
    data: dict[str, Any] = {
        "is_valid": output.is_valid,
        "errors": list(output.errors),
        "sheet": None,
        "fits": output.fits,
        "strategy": None,
        "placed": [],
        "overflow": [],
        "cut_lines": [],
        "metrics": None,
    }
    if output.sheet is not None:
        data["sheet"] = {"width": output.sheet.width, "height": output.sheet.height}

    result = output.result
    if result is None:
        return data

    if result.strategy is not None:
        data["strategy"] = {
            "sort_order": result.strategy.sort_order.value,
            "split_policy": result.strategy.split_policy.value,
            "transposed": result.strategy.transposed,
        }

    data["placed"] = [
        {
            "piece_id": p.piece.piece_id,
            "label": output.display_name(p.piece),
            "index": p.index,
            "x": p.x,
            "y": p.y,
            "width": p.placed_width,
            "height": p.placed_height,
            "rotated": p.rotated,
        }
        for p in result.placed
    ]
    data["overflow"] = [
        {
            "piece_id": i.piece.piece_id,
            "label": output.display_name(i.piece),
            "index": i.index,
            "width": i.width,
            "height": i.height,
        }
        for i in result.overflow
    ]
    data["cut_lines"] = [
        {"x1": c.x1, "y1": c.y1, "x2": c.x2, "y2": c.y2} for c in result.cut_lines
    ]

    metrics = output.metrics
    if metrics is not None:
        data["metrics"] = {
            "sheet_area": metrics.sheet_area,
            "used_area": metrics.used_area,
            "waste_area": metrics.waste_area,
            "waste_percentage": metrics.waste_percentage,
            "utilization_percentage": metrics.utilization_percentage,
            "total_pieces": metrics.total_pieces,
            "placed_count": metrics.placed_count,
            "overflow_count": metrics.overflow_count,
        }
    return data


class JsonExporter:
    """Exports a cut plan as a JSON document."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, output: CutPlanOutput) -> str:
        return json.dumps(plan_to_dict(output), indent=self.indent)


class CutPlanFormatter:
    """Formats a cut plan as a plain text report.

    The report lists the piece legend, every placement, the guillotine
    cuts in the order they are made, any pieces that did not fit, and a
    utilization summary.
    """

    def __init__(self, waste_warning_threshold: float = DEFAULT_WASTE_WARNING_THRESHOLD) -> None:
        """Initialize formatter.

        Args:
            waste_warning_threshold: Waste percentage above which the
                summary flags the plan as wasteful.
        """
        self.waste_warning_threshold = waste_warning_threshold

    def format(self, output: CutPlanOutput) -> str:
        if not output.is_valid:
            lines = ["Cut plan could not be computed:"]
            lines.extend(f"  - {error}" for error in output.errors)
            return "\n".join(lines)

        sections = [
            self._format_header(output),
            self._format_pieces(output),
            self._format_placements(output),
            self._format_cuts(output),
        ]
        if output.result is not None and output.result.overflow:
            sections.append(self._format_overflow(output))
        sections.append(self._format_summary(output))
        return "\n\n".join(sections)

    def _format_header(self, output: CutPlanOutput) -> str:
        sheet = output.sheet
        lines = ["CUT PLAN", "=" * 70]
        if sheet is not None:
            lines.append(f"Sheet: {_fmt(sheet.width)} x {_fmt(sheet.height)}")
        if output.result is not None and output.result.strategy is not None:
            lines.append(f"Strategy: {output.result.strategy.describe()}")
        return "\n".join(lines)

    def _format_pieces(self, output: CutPlanOutput) -> str:
        if not output.pieces:
            return "No pieces requested."
        lines = [
            "PIECES",
            "-" * 70,
            f"{'#':<4} {'Piece':<24} {'Width':<10} {'Height':<10} {'Qty'}",
        ]
        for position, piece in enumerate(output.pieces, start=1):
            lines.append(
                f"{position:<4} {piece.display_name(position):<24} "
                f"{_fmt(piece.width):<10} {_fmt(piece.height):<10} {piece.quantity}"
            )
        return "\n".join(lines)

    def _format_placements(self, output: CutPlanOutput) -> str:
        placed: tuple[PlacedPiece, ...] = output.result.placed if output.result else ()
        if not placed:
            return "No pieces placed."
        lines = [
            "PLACEMENTS",
            "-" * 70,
            f"{'Piece':<24} {'Copy':<6} {'X':<8} {'Y':<8} {'Size':<16} {'Rotated'}",
        ]
        for p in placed:
            size = f"{_fmt(p.placed_width)} x {_fmt(p.placed_height)}"
            lines.append(
                f"{output.display_name(p.piece):<24} {p.index + 1:<6} "
                f"{_fmt(p.x):<8} {_fmt(p.y):<8} {size:<16} {'yes' if p.rotated else 'no'}"
            )
        return "\n".join(lines)

    def _format_cuts(self, output: CutPlanOutput) -> str:
        cuts: tuple[CutLine, ...] = output.result.cut_lines if output.result else ()
        if not cuts:
            return "No cuts required."
        lines = [f"CUTS ({len(cuts)})", "-" * 70]
        for number, cut in enumerate(cuts, start=1):
            if cut.is_horizontal:
                desc = f"horizontal at y={_fmt(cut.y1)} from x={_fmt(cut.x1)} to x={_fmt(cut.x2)}"
            else:
                desc = f"vertical at x={_fmt(cut.x1)} from y={_fmt(cut.y1)} to y={_fmt(cut.y2)}"
            lines.append(f"{number:>3}. {desc}")
        return "\n".join(lines)

    def _format_overflow(self, output: CutPlanOutput) -> str:
        overflow = output.result.overflow if output.result else ()
        lines = [f"WARNING: {len(overflow)} piece(s) did not fit on the sheet:"]
        for instance in overflow:
            lines.append(
                f"  - {output.display_name(instance.piece)}: "
                f"{_fmt(instance.width)} x {_fmt(instance.height)}"
            )
        return "\n".join(lines)

    def _format_summary(self, output: CutPlanOutput) -> str:
        metrics = output.metrics
        if metrics is None:
            return ""
        lines = [
            "SUMMARY",
            "-" * 70,
            f"Pieces: {metrics.total_pieces}   Placed: {metrics.placed_count}   "
            f"Utilization: {metrics.utilization_percentage:.1f}%   "
            f"Waste: {metrics.waste_percentage:.1f}%",
        ]
        if metrics.total_pieces > 0 and metrics.fits:
            lines.append("All pieces fit on the sheet.")
        if metrics.exceeds_waste(self.waste_warning_threshold):
            lines.append(
                f"High waste: more than {_fmt(self.waste_warning_threshold)}% of the sheet is unused."
            )
        return "\n".join(lines)

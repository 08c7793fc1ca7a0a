"""Infrastructure layer - report formatting and export."""

from .formatters import CutPlanFormatter, JsonExporter, plan_to_dict

__all__ = [
    "CutPlanFormatter",
    "JsonExporter",
    "plan_to_dict",
]

"""Configuration validation endpoints."""

from fastapi import APIRouter

from sheetcut.application.config import (
    ConfigError,
    check_oversized_pieces,
    load_config_from_dict,
)
from sheetcut.web.schemas.requests import ConfigValidateRequest
from sheetcut.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a cut job configuration without computing a plan.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"message": d.get("message", ""), "path": d.get("path", "")}
            for d in e.details
        ] or [{"message": e.message, "path": ""}]
        return ValidationResultSchema(is_valid=False, errors=errors)

    warnings = check_oversized_pieces(config)
    return ValidationResultSchema(
        is_valid=True,
        warnings=[{"message": w.message, "path": w.path} for w in warnings],
    )

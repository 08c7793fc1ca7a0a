"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sheetcut.application.config import ConfigError


class CutPlanInputError(Exception):
    """Raised when a cut plan request contains invalid sheet or piece data."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid cut plan input: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CutPlanInputError)
    async def cut_plan_input_error_handler(
        request: Request, exc: CutPlanInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cut plan could not be computed",
                "error_type": "invalid_input",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid cut job configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path", ""), "message": d.get("message", "")}
                    for d in exc.details
                ]
                or None,
            },
        )

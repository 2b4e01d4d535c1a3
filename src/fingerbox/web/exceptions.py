"""Error types raised by the routes and the handlers that render them.

Every error body has the ``ErrorResponseSchema`` shape: a message, an
``error_type`` tag and optional details. Request-body validation errors are
rendered the same way as configuration errors, with dotted field paths.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fingerbox.application.config import ConfigError, validation_details
from fingerbox.web.schemas.responses import ErrorResponseSchema


class BoxGenerationError(Exception):
    """Raised when the command rejects the box parameters."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Generation failed: {errors}")


class UnsupportedFormatError(Exception):
    """Raised when no exporter is registered for the requested format."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponseSchema, "description": "Unsupported format"},
    422: {"model": ErrorResponseSchema, "description": "Invalid box parameters"},
}


def _field_problems(details: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # Responses carry only the field path and message, never the input.
    return [{"path": d.get("path"), "message": d.get("message")} for d in details]


def _body_field(loc: Any) -> tuple[str | int, ...]:
    # ("body", "width") reads as "width", matching configuration field paths.
    loc = tuple(loc)
    if len(loc) > 1 and loc[0] == "body":
        return loc[1:]
    return loc


def _error_response(
    status_code: int,
    error: str,
    error_type: str,
    details: list[dict[str, Any]] | dict[str, Any] | None = None,
) -> JSONResponse:
    body = ErrorResponseSchema(error=error, error_type=error_type, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Register the box API error handlers with the FastAPI app."""

    @app.exception_handler(BoxGenerationError)
    async def generation_error_handler(
        request: Request, exc: BoxGenerationError
    ) -> JSONResponse:
        return _error_response(
            422,
            "Box generation failed",
            "generation",
            [{"message": e} for e in exc.errors],
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return _error_response(
            422, exc.message, exc.error_type, _field_problems(exc.details)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [{**err, "loc": _body_field(err["loc"])} for err in exc.errors()]
        return _error_response(
            422,
            "Invalid box parameters",
            "validation",
            _field_problems(validation_details(errors)),
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return _error_response(
            400,
            str(exc),
            "unsupported_format",
            {"format": exc.format_name, "available": exc.available},
        )

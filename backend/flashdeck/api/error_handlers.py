"""Error Handlers — every failure leaves the API in the FlashdeckError envelope.

Invariants:
    - FlashdeckError → its own http_status and to_response() body
    - RequestValidationError → 400 InvalidRequestError; message names the first
      problem the way clients read it ('Missing "title"', "Invalid JSON body"),
      field-level details follow
    - Exception → 500 INTERNAL_ERROR, message fixed, no internal detail
    - 5xx logged at error level with table/operation when known; 4xx at warning
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flashdeck.core.errors import (
    ErrorCategory, ErrorSeverity, FlashdeckError, InvalidRequestError,
)

logger = logging.getLogger(__name__)

_INVALID_JSON = "Invalid JSON body"
_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FlashdeckError, flashdeck_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    _log_error(request, exc)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    errors = exc.errors()
    message, field = _describe_first(errors)
    error = InvalidRequestError(message, field)
    _log_error(request, error)

    content = error.to_response()
    content["error"]["details"] = [
        {"field": _field_path(e["loc"]), "message": _clean(e["msg"]), "type": e["type"]}
        for e in errors
    ]
    return JSONResponse(status_code=error.http_status, content=content)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    error = FlashdeckError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def _log_error(request: Request, exc: FlashdeckError) -> None:
    extra = {"error_code": exc.code, "path": request.url.path}
    if exc.context.table:
        extra["table"] = exc.context.table
    if exc.context.operation:
        extra["operation"] = exc.context.operation
    if exc.http_status >= 500:
        logger.error(exc.message, extra=extra)
    else:
        logger.warning(exc.message, extra=extra)


def _describe_first(errors) -> tuple[str, str | None]:
    """Client-facing message and field for the first validation problem."""
    if not errors:
        return "Invalid request", None
    first = errors[0]
    field = _field_path(first["loc"])
    if first["type"] == "json_invalid" or (first["type"] == "missing" and not field):
        return _INVALID_JSON, None
    if first["type"] == "missing":
        return f'Missing "{field}"', field
    return _clean(first["msg"]), field


def _field_path(loc) -> str | None:
    # Drop the "body"/"path" source marker and JSON positions.
    parts = [str(p) for p in loc[1:] if isinstance(p, str)]
    return ".".join(parts) or None


def _clean(msg: str) -> str:
    return msg.removeprefix(_VALUE_ERROR_PREFIX)

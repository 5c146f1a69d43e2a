import traceback

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from a11y_checker.api.schemas import MISSING_INPUT_MESSAGE
from a11y_checker.audit.exceptions import (
    AuditError,
    InputValidationError,
    MethodNotAllowedError,
    PayloadTooLargeError,
)
from a11y_checker.config.settings import Settings
from a11y_checker.logging.logger import Log

PROCESSING_FAILED_MESSAGE = "Failed to process PDF."
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed. Use POST."


def failure_body(exc: Exception, settings: Settings) -> dict[str, object]:
    """Response body for a workflow failure; the traceback only goes out when enabled."""
    body: dict[str, object] = {
        "error": PROCESSING_FAILED_MESSAGE,
        "details": str(exc),
        "step": exc.step if isinstance(exc, AuditError) else "audit",
    }
    if settings.expose_error_trace:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


def rejection_body(exc: AuditError) -> dict[str, object]:
    """Response body for requests refused before any work was done."""
    message = str(exc)
    if isinstance(exc, (MethodNotAllowedError, PayloadTooLargeError)) or message == MISSING_INPUT_MESSAGE:
        return {"error": message}
    return {"error": "Invalid request.", "details": message}


async def audit_error_handler(request: Request, exc: AuditError) -> JSONResponse:
    Log.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc}")
    return JSONResponse(status_code=exc.status_code, content=rejection_body(exc))


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"{request.method} {request.url.path} rejected: malformed body")
    return JSONResponse(
        status_code=InputValidationError.status_code,
        content={"error": MISSING_INPUT_MESSAGE},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Give router-level 405s the same body as the explicit fallback route."""
    if exc.status_code == MethodNotAllowedError.status_code:
        Log.warning(f"{request.method} {request.url.path} rejected (405)")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": METHOD_NOT_ALLOWED_MESSAGE},
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)

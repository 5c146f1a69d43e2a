from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from a11y_checker.api.errors import METHOD_NOT_ALLOWED_MESSAGE, failure_body
from a11y_checker.api.schemas import CheckAccessibilityRequest
from a11y_checker.audit.exceptions import InputValidationError, MethodNotAllowedError
from a11y_checker.audit.processor import AuditProcessor
from a11y_checker.config.settings import Settings
from a11y_checker.logging.logger import Log

CHECK_PATH = "/checkAccessibility"

router = APIRouter(prefix="/api")


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post(CHECK_PATH)
def check_accessibility(payload: CheckAccessibilityRequest, request: Request) -> JSONResponse:
    """Audit one uploaded PDF; runs in the threadpool, one browser per request."""
    upload = payload.to_upload()
    processor: AuditProcessor = request.app.state.processor
    settings: Settings = request.app.state.settings
    try:
        results = processor.process(upload)
    except InputValidationError:
        raise
    except Exception as exc:
        Log.exception(f"Error processing PDF '{upload.name}'")
        return JSONResponse(status_code=500, content=failure_body(exc, settings))
    return JSONResponse(status_code=200, content={"results": results})


@router.api_route(
    CHECK_PATH,
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"],
)
def check_accessibility_wrong_method() -> None:
    raise MethodNotAllowedError(METHOD_NOT_ALLOWED_MESSAGE)

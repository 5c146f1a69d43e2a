from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from a11y_checker.api.errors import audit_error_handler, http_error_handler, request_validation_handler
from a11y_checker.api.middleware import BodySizeLimitMiddleware
from a11y_checker.api.routes import router
from a11y_checker.audit.exceptions import AuditError
from a11y_checker.audit.processor import AuditProcessor, build_processor
from a11y_checker.config.settings import Settings
from a11y_checker.logging.logger import Log


def create_app(
    settings: Settings | None = None,
    processor: AuditProcessor | None = None,
) -> FastAPI:
    """Build the API; pass processor to substitute the browser-backed workflow."""
    settings = settings if settings is not None else Settings()
    app = FastAPI(
        title="PDF Accessibility Checker",
        description="Renders uploaded PDFs in PDF.js and audits them with axe-core",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_exception_handler(AuditError, audit_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)

    if settings.serve_viewer and settings.public_dir.is_dir():
        # Same origin as the API so the viewer can fetch staged files
        app.mount("/", StaticFiles(directory=settings.public_dir), name="public")
        Log.info(f"Serving viewer assets from {settings.public_dir}")

    return app

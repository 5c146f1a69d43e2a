class AuditError(Exception):
    """Base exception for all accessibility-check errors."""

    status_code: int = 500
    step: str = "audit"


class InputValidationError(AuditError):
    """Raised when the request is missing content or name, or the content is unusable."""

    status_code = 400
    step = "validate"


class MethodNotAllowedError(AuditError):
    """Raised when the endpoint is called with anything but POST."""

    status_code = 405
    step = "validate"


class PayloadTooLargeError(AuditError):
    """Raised when the request body exceeds the configured limit."""

    status_code = 413
    step = "validate"


class StagingError(AuditError):
    """Raised when the upload cannot be written to, or verified in, the staging directory."""

    step = "stage"


class SessionError(AuditError):
    """Raised when the headless browser cannot be started."""

    step = "session"


class NavigationError(AuditError):
    """Raised when the viewer URL gives no response or a non-success status."""

    step = "navigate"


class ReadinessTimeoutError(AuditError):
    """Raised when the viewer never reports itself initialized."""

    step = "readiness"


class RenderTimeoutError(AuditError):
    """Raised when no rendered page element appears in time."""

    step = "render"

    def __init__(self, message: str, dom_snippet: str) -> None:
        super().__init__(message)
        self.dom_snippet = dom_snippet


class AnalysisError(AuditError):
    """Raised when the rule engine cannot be injected or fails while running."""

    step = "analyze"

"""PDF.js viewer contract: URL shape, readiness flag and state snapshot."""

import time
from collections.abc import Callable
from urllib.parse import quote

from a11y_checker.audit.exceptions import ReadinessTimeoutError
from a11y_checker.audit.models import ViewerState
from a11y_checker.browser.base import BaseRenderSession
from a11y_checker.logging.logger import Log

READINESS_SCRIPT = """
() => typeof PDFViewerApplication !== 'undefined' && !!PDFViewerApplication.initialized
"""

STATE_SCRIPT = """
() => {
    const app = typeof PDFViewerApplication !== 'undefined' ? PDFViewerApplication : null;
    return {
        initialized: !!(app && app.initialized),
        numPages: (app && app.pdfDocument && app.pdfDocument.numPages) || 0,
        isLoading: app ? app.pdfLoading : null,
        isDocumentLoaded: !!(app && app.pdfDocument),
        fileName: (app && app.url) || null,
    };
}
"""


def build_viewer_url(base_url: str, viewer_path: str, file_url_path: str) -> str:
    """Point the viewer page at a staged file via its ?file= parameter."""
    return f"{base_url.rstrip('/')}{viewer_path}?file={quote(file_url_path, safe='/')}"


def wait_for_viewer_ready(
    session: BaseRenderSession,
    *,
    max_attempts: int,
    interval_seconds: float,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Poll the readiness flag until it is true.

    Returns:
        Number of attempts it took.

    Raises:
        ReadinessTimeoutError: if the flag is still false after max_attempts polls.
    """
    sleep = sleep if sleep is not None else time.sleep
    for attempt in range(1, max_attempts + 1):
        if session.evaluate(READINESS_SCRIPT) is True:
            Log.debug(f"PDFViewerApplication ready after {attempt} attempt(s)")
            return attempt
        if attempt < max_attempts:
            sleep(interval_seconds)
    raise ReadinessTimeoutError(
        f"PDFViewerApplication did not initialize after {max_attempts} attempts "
        f"({max_attempts * interval_seconds:.1f}s)"
    )


def read_viewer_state(session: BaseRenderSession) -> ViewerState:
    payload = session.evaluate(STATE_SCRIPT)
    if not isinstance(payload, dict):
        payload = {}
    return ViewerState.from_payload(payload)

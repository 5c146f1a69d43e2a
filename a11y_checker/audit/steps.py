from a11y_checker.analysis.base import BaseAnalyzer
from a11y_checker.audit.exceptions import (
    AnalysisError,
    InputValidationError,
    NavigationError,
    RenderTimeoutError,
    SessionError,
)
from a11y_checker.audit.models import AuditState
from a11y_checker.audit.pipeline import AuditContext, PipelineStep
from a11y_checker.audit.staging import FileStager
from a11y_checker.audit.viewer import build_viewer_url, read_viewer_state, wait_for_viewer_ready
from a11y_checker.browser.base import BaseSessionLauncher
from a11y_checker.browser.exceptions import RenderWaitTimeout
from a11y_checker.logging.logger import Log
from a11y_checker.pdf.base import BasePdfInspector
from a11y_checker.pdf.exceptions import PdfInspectionError


class InspectUploadStep(PipelineStep):
    number = 0
    label = "Inspecting uploaded PDF"

    def __init__(self, inspector: BasePdfInspector) -> None:
        self._inspector = inspector

    def run(self, context: AuditContext) -> AuditContext:
        try:
            context.expected_pages = self._inspector.page_count(context.upload.content)
        except PdfInspectionError as exc:
            raise InputValidationError(f"Upload is not a readable PDF: {exc}") from exc
        Log.info(f"Upload '{context.upload.name}' has {context.expected_pages} page(s)")
        return context


class StageFileStep(PipelineStep):
    number = 1
    label = "Writing PDF to temporary file"

    def __init__(self, stager: FileStager) -> None:
        self._stager = stager

    def run(self, context: AuditContext) -> AuditContext:
        context.staged_file = self._stager.stage(context.upload)
        context.state = AuditState.STAGED
        return context


class OpenSessionStep(PipelineStep):
    number = 2
    label = "Launching headless browser"

    def __init__(self, launcher: BaseSessionLauncher) -> None:
        self._launcher = launcher

    def run(self, context: AuditContext) -> AuditContext:
        try:
            context.session = self._launcher.open()
        except Exception as exc:
            raise SessionError(f"Browser could not be launched: {exc}") from exc
        context.state = AuditState.SESSION_OPEN
        return context


class NavigateStep(PipelineStep):
    number = 3
    label = "Loading PDF.js viewer"

    def __init__(
        self,
        *,
        base_url: str,
        viewer_path: str,
        wait_until: str,
        timeout_ms: int,
    ) -> None:
        self._base_url = base_url
        self._viewer_path = viewer_path
        self._wait_until = wait_until
        self._timeout_ms = timeout_ms

    def run(self, context: AuditContext) -> AuditContext:
        if context.session is None or context.staged_file is None:
            raise ValueError("AuditContext.session and staged_file must be set before navigation")
        url = build_viewer_url(self._base_url, self._viewer_path, context.staged_file.url_path)
        context.viewer_url = url
        Log.info(f"Viewer URL: {url}")
        try:
            status = context.session.navigate(
                url, wait_until=self._wait_until, timeout_ms=self._timeout_ms
            )
        except Exception as exc:
            raise NavigationError(f"Failed to load viewer URL: {url} ({exc})") from exc
        if status is None or not 200 <= status < 300:
            shown = "no response" if status is None else status
            raise NavigationError(f"Failed to load viewer URL: {url} (status: {shown})")
        context.state = AuditState.NAVIGATED
        return context


class AwaitViewerReadyStep(PipelineStep):
    number = 4
    label = "Ensuring PDFViewerApplication is ready"

    def __init__(self, *, max_attempts: int, interval_ms: int) -> None:
        self._max_attempts = max_attempts
        self._interval_seconds = interval_ms / 1000

    def run(self, context: AuditContext) -> AuditContext:
        if context.session is None:
            raise ValueError("AuditContext.session must be set before readiness polling")
        context.readiness_attempts = wait_for_viewer_ready(
            context.session,
            max_attempts=self._max_attempts,
            interval_seconds=self._interval_seconds,
        )
        context.viewer_state = read_viewer_state(context.session)
        Log.info(f"PDF.js state after loading: {context.viewer_state}")
        context.state = AuditState.APPLICATION_READY
        return context


class AwaitRenderStep(PipelineStep):
    number = 6
    label = "Waiting for PDF to render"

    def __init__(self, *, selector: str, timeout_ms: int, snippet_chars: int) -> None:
        self._selector = selector
        self._timeout_ms = timeout_ms
        self._snippet_chars = snippet_chars

    def run(self, context: AuditContext) -> AuditContext:
        if context.session is None:
            raise ValueError("AuditContext.session must be set before the render wait")
        try:
            context.session.wait_for_selector(self._selector, timeout_ms=self._timeout_ms)
        except RenderWaitTimeout as exc:
            snippet = self._dom_snippet(context)
            raise RenderTimeoutError(
                f"PDF page did not render: {exc}\nHTML:\n{snippet}", dom_snippet=snippet
            ) from exc
        self._check_page_count(context)
        context.state = AuditState.RENDERED
        return context

    def _dom_snippet(self, context: AuditContext) -> str:
        assert context.session is not None
        try:
            html = context.session.content()
        except Exception as exc:
            Log.warning(f"Could not capture DOM for diagnostics: {exc}")
            html = ""
        snippet = html[: self._snippet_chars]
        return snippet or f"<no DOM captured; '{self._selector}' never appeared>"[: self._snippet_chars]

    def _check_page_count(self, context: AuditContext) -> None:
        # numPages is 0 until the viewer has finished opening the document
        if context.viewer_state is None or not context.viewer_state.num_pages:
            return
        if context.expected_pages and context.viewer_state.num_pages != context.expected_pages:
            Log.warning(
                f"Viewer reports {context.viewer_state.num_pages} page(s), "
                f"upload has {context.expected_pages}"
            )


class AnalyzeStep(PipelineStep):
    number = 7
    label = "Running axe accessibility analysis"

    def __init__(self, analyzer: BaseAnalyzer, tags: list[str]) -> None:
        self._analyzer = analyzer
        self._tags = list(tags)

    def run(self, context: AuditContext) -> AuditContext:
        if context.session is None:
            raise ValueError("AuditContext.session must be set before analysis")
        try:
            context.results = self._analyzer.analyze(context.session, self._tags)
        except Exception as exc:
            raise AnalysisError(f"Accessibility analysis failed: {exc}") from exc
        Log.info("Accessibility analysis completed.")
        context.state = AuditState.ANALYZED
        return context

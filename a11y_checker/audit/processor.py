from a11y_checker.analysis.axe_adapter import AxeAnalyzer
from a11y_checker.audit.exceptions import AuditError
from a11y_checker.audit.models import AuditState, Upload
from a11y_checker.audit.pipeline import AuditContext, PipelineStep
from a11y_checker.audit.staging import FileStager
from a11y_checker.audit.steps import (
    AnalyzeStep,
    AwaitRenderStep,
    AwaitViewerReadyStep,
    InspectUploadStep,
    NavigateStep,
    OpenSessionStep,
    StageFileStep,
)
from a11y_checker.browser.playwright_adapter import PlaywrightLauncher
from a11y_checker.config.settings import Settings
from a11y_checker.logging.logger import Log
from a11y_checker.pdf.factory import PdfInspectorFactory


class AuditProcessor:
    """Runs the accessibility-check workflow for one upload.

    Pipeline: inspect -> stage -> open session -> navigate -> ready -> render -> analyze.
    Cleanup (close session, delete staged file) runs on every outcome.
    """

    def __init__(self, steps: list[PipelineStep], stager: FileStager) -> None:
        self._steps = steps
        self._stager = stager

    def process(self, upload: Upload) -> dict[str, object]:
        """Run every step in order and return the rule engine's results."""
        context = AuditContext(upload=upload)
        try:
            for step in self._steps:
                if step.number:
                    Log.step(step.number, step.label)
                context = step.run(context)
            return context.results
        except Exception as exc:
            context.state = AuditState.FAILED
            context.error_message = str(exc)
            step_label = exc.step if isinstance(exc, AuditError) else "audit"
            Log.error(f"Error processing PDF at step '{step_label}': {exc}")
            raise
        finally:
            Log.step(8, "Cleaning up")
            self._cleanup(context)

    def _cleanup(self, context: AuditContext) -> None:
        if context.session is not None:
            try:
                context.session.close()
            except Exception as exc:
                Log.warning(f"Closing browser session failed: {exc}")
        if context.staged_file is not None:
            try:
                self._stager.remove(context.staged_file)
            except OSError as exc:
                Log.warning(f"Removing {context.staged_file.path} failed: {exc}")
        context.state = AuditState.CLEANED


def build_steps(settings: Settings, stager: FileStager) -> list[PipelineStep]:
    return [
        InspectUploadStep(PdfInspectorFactory.create(settings)),
        StageFileStep(stager),
        OpenSessionStep(PlaywrightLauncher.from_settings(settings)),
        NavigateStep(
            base_url=settings.viewer_base_url,
            viewer_path=settings.viewer_path,
            wait_until=settings.navigation_wait_until,
            timeout_ms=settings.navigation_timeout_ms,
        ),
        AwaitViewerReadyStep(
            max_attempts=settings.readiness_max_attempts,
            interval_ms=settings.readiness_interval_ms,
        ),
        AwaitRenderStep(
            selector=settings.render_selector,
            timeout_ms=settings.render_timeout_ms,
            snippet_chars=settings.dom_snippet_chars,
        ),
        AnalyzeStep(AxeAnalyzer.from_settings(settings), settings.axe_tags),
    ]


def build_processor(settings: Settings) -> AuditProcessor:
    """Build an AuditProcessor with the Playwright, axe-core and PDF adapters."""
    stager = FileStager(settings.staging_dir, settings.staging_url_path)
    return AuditProcessor(steps=build_steps(settings, stager), stager=stager)

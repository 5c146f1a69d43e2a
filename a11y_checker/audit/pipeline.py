from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from a11y_checker.audit.models import AuditState, StagedFile, Upload, ViewerState
from a11y_checker.browser.base import BaseRenderSession


@dataclass(slots=True)
class AuditContext:
    upload: Upload
    state: AuditState = AuditState.IDLE
    expected_pages: int = 0
    staged_file: StagedFile | None = None
    session: BaseRenderSession | None = None
    viewer_url: str = ""
    readiness_attempts: int = 0
    viewer_state: ViewerState | None = None
    results: dict[str, object] = field(default_factory=dict)
    error_message: str = ""


class PipelineStep(ABC):
    number: int = 0
    label: str = ""

    @abstractmethod
    def run(self, context: AuditContext) -> AuditContext:
        raise NotImplementedError

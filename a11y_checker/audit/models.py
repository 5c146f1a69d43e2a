from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class AuditState(str, Enum):
    """Lifecycle of a single accessibility-check request."""

    IDLE = "Idle"
    STAGED = "Staged"
    SESSION_OPEN = "SessionOpen"
    NAVIGATED = "Navigated"
    APPLICATION_READY = "ApplicationReady"
    RENDERED = "Rendered"
    ANALYZED = "Analyzed"
    FAILED = "Failed"
    CLEANED = "Cleaned"


@dataclass(frozen=True)
class Upload:
    """Decoded request payload: PDF bytes plus the caller's display name."""

    content: bytes
    name: str


@dataclass(frozen=True)
class StagedFile:
    """An upload written where the viewer can fetch it over HTTP."""

    path: Path
    url_path: str


@dataclass(frozen=True)
class ViewerState:
    """Snapshot of PDFViewerApplication after readiness."""

    initialized: bool
    num_pages: int
    is_loading: bool | None
    is_document_loaded: bool
    url: str | None

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "ViewerState":
        num_pages = payload.get("numPages") or 0
        return cls(
            initialized=bool(payload.get("initialized")),
            num_pages=int(num_pages) if isinstance(num_pages, (int, float)) else 0,
            is_loading=payload.get("isLoading"),  # type: ignore[arg-type]
            is_document_loaded=bool(payload.get("isDocumentLoaded")),
            url=payload.get("fileName"),  # type: ignore[arg-type]
        )

from abc import ABC, abstractmethod
from pathlib import Path


class BaseRenderSession(ABC):
    """Contract for one browser context holding exactly one page."""

    @abstractmethod
    def navigate(self, url: str, *, wait_until: str, timeout_ms: int) -> int | None:
        """Load url in the page.

        Returns:
            HTTP status of the main response, or None when there was no response.
        """

    @abstractmethod
    def evaluate(self, script: str) -> object:
        """Evaluate a JavaScript expression or function in the page and return its value."""

    @abstractmethod
    def add_script(self, path: Path) -> None:
        """Inject a local JavaScript file into the page."""

    @abstractmethod
    def wait_for_selector(self, selector: str, *, timeout_ms: int) -> None:
        """Block until selector is attached to the DOM.

        Raises:
            RenderWaitTimeout: if it does not appear within timeout_ms.
        """

    @abstractmethod
    def content(self) -> str:
        """Return the current serialized DOM."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the page, the browser and the automation driver."""


class BaseSessionLauncher(ABC):
    """Contract for starting isolated render sessions, one per request."""

    @abstractmethod
    def open(self) -> BaseRenderSession:
        """Start a browser and return a session with a fresh page."""

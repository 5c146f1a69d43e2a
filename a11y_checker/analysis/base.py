from abc import ABC, abstractmethod

from a11y_checker.browser.base import BaseRenderSession


class BaseAnalyzer(ABC):
    """Contract for rule engines run against a live, rendered page."""

    @abstractmethod
    def analyze(self, session: BaseRenderSession, tags: list[str]) -> dict[str, object]:
        """Evaluate the page against rules carrying any of tags.

        Returns:
            The engine's result object, unmodified.

        Raises:
            RuleEngineError: if the engine cannot run or returns garbage.
        """

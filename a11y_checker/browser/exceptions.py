class BrowserError(Exception):
    """Raised when the automation backend fails outside the workflow's own checks."""


class RenderWaitTimeout(BrowserError):
    """Raised when a selector wait runs out of time."""

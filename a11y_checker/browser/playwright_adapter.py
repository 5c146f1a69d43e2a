from pathlib import Path

from playwright.sync_api import Browser, Page, Playwright, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from a11y_checker.browser.base import BaseRenderSession, BaseSessionLauncher
from a11y_checker.browser.exceptions import RenderWaitTimeout
from a11y_checker.config.settings import Settings
from a11y_checker.logging.logger import Log


class PlaywrightSession(BaseRenderSession):
    """Render session backed by a headless Chromium page."""

    def __init__(self, playwright: Playwright, browser: Browser, page: Page) -> None:
        self._playwright = playwright
        self._browser = browser
        self._page = page

    @property
    def page(self) -> Page:
        return self._page

    def navigate(self, url: str, *, wait_until: str, timeout_ms: int) -> int | None:
        response = self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)  # type: ignore[arg-type]
        if response is None:
            return None
        return response.status

    def evaluate(self, script: str) -> object:
        return self._page.evaluate(script)

    def add_script(self, path: Path) -> None:
        self._page.add_script_tag(path=str(path))

    def wait_for_selector(self, selector: str, *, timeout_ms: int) -> None:
        try:
            self._page.wait_for_selector(selector, state="attached", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise RenderWaitTimeout(str(exc)) from exc

    def content(self) -> str:
        return self._page.content()

    def close(self) -> None:
        try:
            self._browser.close()
        finally:
            self._playwright.stop()


class PlaywrightLauncher(BaseSessionLauncher):
    """Launches a fresh headless Chromium per request."""

    def __init__(self, browser_args: list[str]) -> None:
        self._browser_args = list(browser_args)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlaywrightLauncher":
        return cls(browser_args=settings.browser_args)

    def open(self) -> PlaywrightSession:
        playwright = sync_playwright().start()
        try:
            browser = playwright.chromium.launch(headless=True, args=self._browser_args)
            page = browser.new_page()
        except Exception:
            playwright.stop()
            raise
        Log.debug(f"Chromium {browser.version} launched with args {self._browser_args}")
        return PlaywrightSession(playwright, browser, page)

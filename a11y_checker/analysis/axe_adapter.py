import json
import threading
import uuid
from pathlib import Path

import httpx

from a11y_checker.analysis.base import BaseAnalyzer
from a11y_checker.analysis.exceptions import RuleEngineError
from a11y_checker.browser.base import BaseRenderSession
from a11y_checker.config.settings import Settings
from a11y_checker.logging.logger import Log

_download_lock = threading.Lock()

AXE_RUN_SCRIPT = """
async (tags) => {
    if (!window.axe || !window.axe.run) {
        return { error: 'axe not loaded' };
    }
    return await window.axe.run(document, {
        runOnly: { type: 'tag', values: tags },
    });
}
"""


class AxeAnalyzer(BaseAnalyzer):
    """Runs axe-core inside the page and returns its results object."""

    def __init__(
        self,
        *,
        script_path: Path,
        cdn_url: str,
        download_timeout_seconds: int,
    ) -> None:
        self._script_path = script_path
        self._cdn_url = cdn_url
        self._download_timeout_seconds = download_timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "AxeAnalyzer":
        return cls(
            script_path=settings.axe_script_path,
            cdn_url=settings.axe_cdn_url,
            download_timeout_seconds=settings.axe_download_timeout_seconds,
        )

    def analyze(self, session: BaseRenderSession, tags: list[str]) -> dict[str, object]:
        script_path = self.ensure_script()
        session.add_script(script_path)
        result = session.evaluate(f"({AXE_RUN_SCRIPT})({json.dumps(tags)})")
        if not isinstance(result, dict):
            raise RuleEngineError(f"axe returned {type(result).__name__}, expected an object")
        if "error" in result and "violations" not in result:
            raise RuleEngineError(f"axe failed in page: {result['error']}")
        Log.info(
            f"axe found {len(result.get('violations') or [])} violation(s) "
            f"for tags {', '.join(tags)}"
        )
        return result

    def ensure_script(self) -> Path:
        """Return the local axe-core path, downloading it once if it is missing.

        The copy is written to a sibling temp file and renamed into place, so a
        concurrent request never sees a partial script.
        """
        if self._has_script():
            return self._script_path
        with _download_lock:
            if self._has_script():
                return self._script_path
            Log.info(f"axe-core not found at {self._script_path}, downloading {self._cdn_url}")
            try:
                response = httpx.get(
                    self._cdn_url,
                    timeout=self._download_timeout_seconds,
                    follow_redirects=True,
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise RuleEngineError(f"Could not download axe-core: {exc}") from exc
            self._script_path.parent.mkdir(parents=True, exist_ok=True)
            partial = self._script_path.with_name(f".{self._script_path.name}.{uuid.uuid4().hex}.tmp")
            try:
                partial.write_bytes(response.content)
                partial.replace(self._script_path)
            finally:
                partial.unlink(missing_ok=True)
        return self._script_path

    def _has_script(self) -> bool:
        return self._script_path.is_file() and self._script_path.stat().st_size > 0

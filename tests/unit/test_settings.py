from pathlib import Path

import pytest
from pydantic import ValidationError

from a11y_checker.config.settings import AXE_TAGS, Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_readiness_budget(self) -> None:
        s = Settings()
        assert s.readiness_max_attempts == 100
        assert s.readiness_interval_ms == 100

    def test_default_render_wait(self) -> None:
        s = Settings()
        assert s.render_selector == ".page"
        assert s.render_timeout_ms == 30000
        assert s.dom_snippet_chars == 1000

    def test_default_axe_tags(self) -> None:
        s = Settings()
        assert s.axe_tags == AXE_TAGS
        assert "best-practice" in s.axe_tags
        assert "wcag22aa" in s.axe_tags

    def test_default_body_limit_is_100mb(self) -> None:
        s = Settings()
        assert s.max_body_bytes == 100 * 1024 * 1024

    def test_default_browser_disables_sandbox(self) -> None:
        s = Settings()
        assert "--no-sandbox" in s.browser_args
        assert "--disable-setuid-sandbox" in s.browser_args

    def test_default_staging_dir(self) -> None:
        s = Settings()
        assert s.staging_dir == Path("public/pdf-viewer/web")

    def test_error_trace_hidden_by_default(self) -> None:
        s = Settings()
        assert s.expose_error_trace is False


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_viewer_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIEWER_BASE_URL", "http://viewer.internal:8080")
        s = Settings()
        assert s.viewer_base_url == "http://viewer.internal:8080"

    def test_loads_axe_tags_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AXE_TAGS", '["wcag2a"]')
        s = Settings()
        assert s.axe_tags == ["wcag2a"]

    def test_loads_expose_error_trace(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPOSE_ERROR_TRACE", "true")
        s = Settings()
        assert s.expose_error_trace is True


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_render_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_TIMEOUT_MS", "abc")
        with pytest.raises(ValidationError):
            Settings()

import os
from pathlib import Path

import httpx
import pytest
from playwright.sync_api import sync_playwright

from a11y_checker.config.settings import Settings


def _viewer_reachable(settings: Settings) -> bool:
    try:
        response = httpx.get(f"{settings.viewer_base_url.rstrip('/')}{settings.viewer_path}", timeout=5)
    except httpx.HTTPError:
        return False
    return response.is_success


def _chromium_available(settings: Settings) -> bool:
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=settings.browser_args)
            browser.close()
    except Exception:
        return False
    return True


@pytest.fixture(scope="session")
def integration_settings() -> Settings:
    """Settings for a running PDF.js viewer whose served directory is STAGING_DIR."""
    settings = Settings()
    if not _viewer_reachable(settings):
        pytest.skip(
            f"PDF.js viewer not reachable at {settings.viewer_base_url}{settings.viewer_path}. "
            "Set VIEWER_BASE_URL and STAGING_DIR to a served pdf.js build"
        )
    if not _chromium_available(settings):
        pytest.skip("Chromium not installed; run `playwright install chromium`")
    if not os.access(settings.staging_dir, os.W_OK):
        pytest.skip(f"Staging dir {settings.staging_dir} is not writable")
    return settings


@pytest.fixture
def staged_files(integration_settings: Settings):  # type: ignore[no-untyped-def]
    def _list() -> list[Path]:
        return sorted(integration_settings.staging_dir.glob("temp-*"))

    return _list

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

AXE_TAGS = [
    "wcag2a",
    "wcag2aa",
    "wcag21a",
    "wcag21aa",
    "best-practice",
    "wcag22a",
    "wcag22aa",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    max_body_bytes: int = 100 * 1024 * 1024
    expose_error_trace: bool = False

    public_dir: Path = Path("public")
    serve_viewer: bool = True
    viewer_base_url: str = "http://localhost:3000"
    viewer_path: str = "/pdf-viewer/web/viewer.html"
    staging_dir: Path = Path("public/pdf-viewer/web")
    staging_url_path: str = "/pdf-viewer/web/"

    browser_args: list[str] = ["--no-sandbox", "--disable-setuid-sandbox"]
    navigation_wait_until: str = "networkidle"
    navigation_timeout_ms: int = 30000
    readiness_max_attempts: int = 100
    readiness_interval_ms: int = 100
    render_selector: str = ".page"
    render_timeout_ms: int = 30000
    dom_snippet_chars: int = 1000

    axe_tags: list[str] = AXE_TAGS
    axe_script_path: Path = Path("assets/axe.min.js")
    axe_cdn_url: str = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js"
    axe_download_timeout_seconds: int = 20

    pdf_engine: str = "pdfplumber"

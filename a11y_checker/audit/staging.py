import time
import uuid
from pathlib import Path

from werkzeug.utils import secure_filename

from a11y_checker.audit.exceptions import InputValidationError, StagingError
from a11y_checker.audit.models import StagedFile, Upload
from a11y_checker.logging.logger import Log


def sanitize_file_name(name: str) -> str:
    """Reduce a caller-supplied name to a single safe path component.

    Raises:
        InputValidationError: if nothing usable remains.
    """
    safe_name = secure_filename(name)
    if not safe_name:
        raise InputValidationError(f"File name '{name}' is not usable for staging")
    return safe_name


def staged_file_name(name: str) -> str:
    """Build temp-{ns timestamp}-{random}-{safe name}; unique across concurrent requests."""
    return f"temp-{time.time_ns()}-{uuid.uuid4().hex[:8]}-{sanitize_file_name(name)}"


class FileStager:
    """Writes uploads into the directory the viewer serves, and removes them again."""

    def __init__(self, staging_dir: Path, url_path: str) -> None:
        self._staging_dir = staging_dir
        self._url_path = url_path if url_path.endswith("/") else f"{url_path}/"

    @property
    def staging_dir(self) -> Path:
        return self._staging_dir

    def stage(self, upload: Upload) -> StagedFile:
        """Write upload bytes to a unique file under the staging directory.

        Raises:
            InputValidationError: if the upload name sanitizes to nothing.
            StagingError: if the write fails or the file is missing afterwards.
        """
        file_name = staged_file_name(upload.name)
        path = self._staging_dir / file_name
        try:
            self._staging_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(upload.content)
        except OSError as exc:
            path.unlink(missing_ok=True)
            raise StagingError(f"Temp PDF file was not written successfully: {path}: {exc}") from exc
        if not path.is_file():
            path.unlink(missing_ok=True)
            raise StagingError(f"Temp PDF file does not exist at: {path}")
        Log.info(f"Temp PDF file path: {path}")
        return StagedFile(path=path, url_path=f"{self._url_path}{file_name}")

    def remove(self, staged: StagedFile) -> None:
        staged.path.unlink(missing_ok=True)

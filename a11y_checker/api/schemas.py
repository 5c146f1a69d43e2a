import base64
import binascii

from pydantic import BaseModel

from a11y_checker.audit.exceptions import InputValidationError
from a11y_checker.audit.models import Upload

MISSING_INPUT_MESSAGE = "No file content or file name provided."


class CheckAccessibilityRequest(BaseModel):
    """JSON body of POST /api/checkAccessibility; field names match the upload UI."""

    fileContent: str | None = None
    fileName: str | None = None

    def to_upload(self) -> Upload:
        """Decode the base64 payload.

        Raises:
            InputValidationError: if either field is missing/empty or content is not base64.
        """
        if not self.fileContent or not self.fileName or not self.fileName.strip():
            raise InputValidationError(MISSING_INPUT_MESSAGE)
        try:
            content = base64.b64decode(self.fileContent, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InputValidationError(f"fileContent is not valid base64: {exc}") from exc
        if not content:
            raise InputValidationError(MISSING_INPUT_MESSAGE)
        return Upload(content=content, name=self.fileName)

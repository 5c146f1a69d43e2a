import io

import pdfplumber

from a11y_checker.pdf.base import BasePdfInspector
from a11y_checker.pdf.exceptions import PdfInspectionError


class PdfPlumberInspector(BasePdfInspector):
    """Reads PDF page count using pdfplumber."""

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return len(pdf.pages)
        except Exception as exc:
            raise PdfInspectionError(f"pdfplumber could not open PDF: {exc}") from exc

import pymupdf

from a11y_checker.pdf.base import BasePdfInspector
from a11y_checker.pdf.exceptions import PdfInspectionError


class PyMuPdfInspector(BasePdfInspector):
    """Reads PDF page count using PyMuPDF."""

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return int(doc.page_count)
        except Exception as exc:
            raise PdfInspectionError(f"pymupdf could not open PDF: {exc}") from exc

class PdfInspectionError(Exception):
    """Raised when uploaded bytes cannot be opened as a PDF."""

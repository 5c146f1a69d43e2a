from abc import ABC, abstractmethod


class BasePdfInspector(ABC):
    """Contract for adapters that open an upload before it is staged."""

    @abstractmethod
    def page_count(self, pdf_bytes: bytes) -> int:
        """Count the pages of a PDF.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Number of pages the document declares.

        Raises:
            PdfInspectionError: if the bytes are not a readable PDF.
        """

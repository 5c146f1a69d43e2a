from a11y_checker.config.settings import Settings
from a11y_checker.pdf.base import BasePdfInspector
from a11y_checker.pdf.pdfplumber_adapter import PdfPlumberInspector
from a11y_checker.pdf.pymupdf_adapter import PyMuPdfInspector


class PdfInspectorFactory:
    """Creates the PDF inspector named by settings.pdf_engine."""

    ADAPTERS: dict[str, type[BasePdfInspector]] = {
        "pdfplumber": PdfPlumberInspector,
        "pymupdf": PyMuPdfInspector,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfInspector:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

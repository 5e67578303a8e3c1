from talentscout.config.settings import Settings
from talentscout.pdf.base import BasePageTextExtractor
from talentscout.pdf.pdfplumber_adapter import PdfPlumberAdapter
from talentscout.pdf.pymupdf_adapter import PyMuPdfAdapter


class PageTextExtractorFactory:
    """Creates the PDF page-text engine named in settings."""

    ADAPTERS: dict[str, type[BasePageTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePageTextExtractor:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

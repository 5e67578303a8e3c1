from talentscout.config.settings import Settings
from talentscout.ingestion.extractors import (
    BaseTextExtractor,
    DocxTextExtractor,
    PdfTextExtractor,
    PlainTextExtractor,
)
from talentscout.ingestion.models import ExtractionStrategy
from talentscout.ingestion.normalizer import DocumentNormalizer
from talentscout.pdf.factory import PageTextExtractorFactory


class DocumentNormalizerFactory:
    """Creates a DocumentNormalizer wired with the configured extractors."""

    @classmethod
    def create(cls, settings: Settings) -> DocumentNormalizer:
        timeout = settings.extraction_timeout_seconds
        return DocumentNormalizer(
            extractors=cls.build_extractors(settings),
            extraction_timeout_seconds=timeout if timeout > 0 else None,
        )

    @classmethod
    def build_extractors(cls, settings: Settings) -> dict[ExtractionStrategy, BaseTextExtractor]:
        page_extractor = PageTextExtractorFactory.create(settings)
        return {
            ExtractionStrategy.PDF: PdfTextExtractor(page_extractor),
            ExtractionStrategy.WORD_PROCESSING: DocxTextExtractor(),
            ExtractionStrategy.PLAIN_TEXT: PlainTextExtractor(settings.text_encoding),
        }

"""Maps an upload's declared media type and filename onto an extraction strategy."""

from pathlib import PurePath

from talentscout.ingestion.models import ExtractionStrategy

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_GENERIC_MEDIA_TYPES = frozenset({"", "application/octet-stream"})

_MEDIA_TYPE_STRATEGIES: dict[str, ExtractionStrategy] = {
    PDF_MEDIA_TYPE: ExtractionStrategy.PDF,
    DOCX_MEDIA_TYPE: ExtractionStrategy.WORD_PROCESSING,
}

_SUFFIX_STRATEGIES: dict[str, ExtractionStrategy] = {
    ".pdf": ExtractionStrategy.PDF,
    ".docx": ExtractionStrategy.WORD_PROCESSING,
}


def base_media_type(declared_media_type: str) -> str:
    """Lowercase media type without parameters, e.g. 'text/plain; charset=utf-8' -> 'text/plain'."""
    return (declared_media_type or "").split(";", 1)[0].strip().lower()


def classify(declared_media_type: str, filename: str) -> ExtractionStrategy:
    """Pick the extraction strategy for a document.

    The media type wins when it is specific. Empty or generic media types
    fall back to the filename suffix, and anything unrecognised is treated
    as plain text.
    """
    media_type = base_media_type(declared_media_type)
    if media_type not in _GENERIC_MEDIA_TYPES:
        if media_type.startswith("image/"):
            return ExtractionStrategy.OPAQUE_IMAGE
        return _MEDIA_TYPE_STRATEGIES.get(media_type, ExtractionStrategy.PLAIN_TEXT)

    suffix = PurePath(filename or "").suffix.lower()
    return _SUFFIX_STRATEGIES.get(suffix, ExtractionStrategy.PLAIN_TEXT)


def carries_binary(declared_media_type: str) -> bool:
    """True for documents the model receives as inline binary (PDF and raster images)."""
    media_type = base_media_type(declared_media_type)
    return media_type == PDF_MEDIA_TYPE or media_type.startswith("image/")

class IngestionError(Exception):
    """Base exception for all document ingestion errors."""


class ExtractionError(IngestionError):
    """Raised when a strategy-specific text extraction step fails."""


class ExtractionTimeoutError(ExtractionError):
    """Raised when text extraction does not finish within the configured timeout."""


class EncodingError(IngestionError):
    """Raised when the binary transport encoding of a document cannot be produced."""


class NoUsableContentError(IngestionError):
    """Raised when a document has neither meaningful text nor a binary payload."""


class UploadError(IngestionError):
    """Raised when a selected file cannot be turned into a usable payload."""

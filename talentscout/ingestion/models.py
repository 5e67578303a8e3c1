from dataclasses import dataclass, field
from enum import Enum

IMAGE_SENTINEL_TEXT = "[Image File Uploaded]"
PASTED_DOCUMENT_NAME = "pasted_resume.txt"


class ExtractionStrategy(str, Enum):
    """How text is pulled out of an uploaded document."""

    PDF = "pdf"
    WORD_PROCESSING = "word_processing"
    PLAIN_TEXT = "plain_text"
    OPAQUE_IMAGE = "opaque_image"


@dataclass(frozen=True)
class UploadedDocument:
    """One user-submitted file, held for the duration of a session."""

    name: str
    declared_media_type: str
    raw_bytes: bytes = field(repr=False)

    @classmethod
    def from_text(cls, text: str) -> "UploadedDocument":
        """Wrap manually pasted resume text as a plain-text upload."""
        return cls(
            name=PASTED_DOCUMENT_NAME,
            declared_media_type="text/plain",
            raw_bytes=text.encode("utf-8"),
        )


@dataclass(frozen=True)
class InlineData:
    """Binary document content as sent to the analysis model."""

    mime_type: str
    base64_data: str = field(repr=False)


@dataclass(frozen=True)
class NormalizedPayload:
    """Dual text/binary representation of a document handed to analysis."""

    extracted_text: str
    media_type: str
    encoded_binary: str | None = field(default=None, repr=False)

    @property
    def inline_data(self) -> InlineData | None:
        if not self.encoded_binary:
            return None
        return InlineData(mime_type=self.media_type, base64_data=self.encoded_binary)

    @property
    def has_usable_content(self) -> bool:
        text = self.extracted_text.strip()
        if text and text != IMAGE_SENTINEL_TEXT:
            return True
        return bool(self.encoded_binary)

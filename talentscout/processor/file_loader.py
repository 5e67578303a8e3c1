import mimetypes
from pathlib import Path

from talentscout.ingestion.classifier import DOCX_MEDIA_TYPE
from talentscout.ingestion.models import UploadedDocument
from talentscout.processor.exceptions import FileReadError, FileTooLargeError

# Not every platform's mime database knows .docx.
mimetypes.add_type(DOCX_MEDIA_TYPE, ".docx")


def guess_media_type(path: Path) -> str:
    """Declared media type for a local file, as a browser would report it ('' if unknown)."""
    media_type, _encoding = mimetypes.guess_type(path.name)
    return media_type or ""


class FileLoader:
    """Reads a local file into an UploadedDocument."""

    DEFAULT_MAX_BYTES = 10 * 1024 * 1024

    def __init__(self, max_bytes: int | None = None) -> None:
        self._max_bytes = max_bytes if max_bytes is not None else self.DEFAULT_MAX_BYTES

    def load(self, path: Path, media_type: str | None = None) -> UploadedDocument:
        """Read file bytes and attach the declared (or guessed) media type.

        Raises:
            FileNotFoundError: if the path does not exist.
            FileTooLargeError: if the file exceeds the size limit.
            FileReadError: if the file cannot be read.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        size = path.stat().st_size
        if size > self._max_bytes:
            raise FileTooLargeError(
                f"{path.name} is {size} bytes, limit is {self._max_bytes} bytes"
            )
        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return UploadedDocument(
            name=path.name,
            declared_media_type=media_type if media_type is not None else guess_media_type(path),
            raw_bytes=raw_bytes,
        )

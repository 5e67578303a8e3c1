import io
from abc import ABC, abstractmethod

import docx
from docx.table import Table

from talentscout.ingestion.exceptions import ExtractionError
from talentscout.pdf.base import BasePageTextExtractor
from talentscout.pdf.exceptions import PdfExtractionError

PAGE_SEPARATOR = "\n\n"
PARAGRAPH_SEPARATOR = "\n\n"


class BaseTextExtractor(ABC):
    """Contract for strategy-specific text extraction."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> str:
        """Turn raw document bytes into text.

        Raises:
            ExtractionError: if the content cannot be read.
        """


class PdfTextExtractor(BaseTextExtractor):
    """Concatenates page texts in page order, each followed by a blank line."""

    def __init__(self, page_extractor: BasePageTextExtractor) -> None:
        self._page_extractor = page_extractor

    def extract(self, raw_bytes: bytes) -> str:
        try:
            pages = self._page_extractor.pages(raw_bytes)
        except PdfExtractionError as exc:
            raise ExtractionError(str(exc)) from exc
        return "".join(page + PAGE_SEPARATOR for page in pages)


class DocxTextExtractor(BaseTextExtractor):
    """Raw text of a .docx body (paragraphs and table rows), styling dropped."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(raw_bytes))
            blocks = [
                self._table_text(item) if isinstance(item, Table) else item.text
                for item in document.iter_inner_content()
            ]
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
        return PARAGRAPH_SEPARATOR.join(block for block in blocks if block.strip())

    @staticmethod
    def _table_text(table: Table) -> str:
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            rows.append("\t".join(cell for cell in cells if cell))
        return "\n".join(row for row in rows if row)


class PlainTextExtractor(BaseTextExtractor):
    """Decodes bytes verbatim with a fixed encoding; invalid sequences are an error."""

    def __init__(self, encoding: str = "utf-8") -> None:
        # utf-8-sig drops a leading byte order mark, which strip() would keep
        self._encoding = "utf-8-sig" if encoding.lower() in ("utf-8", "utf8") else encoding

    def extract(self, raw_bytes: bytes) -> str:
        try:
            return raw_bytes.decode(self._encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ExtractionError(f"text decoding failed: {exc}") from exc

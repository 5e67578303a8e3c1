import io

import pdfplumber

from talentscout.pdf.base import BasePageTextExtractor
from talentscout.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePageTextExtractor):
    """Reads page text runs using pdfplumber."""

    def pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [
                    " ".join(word["text"] for word in page.extract_words())
                    for page in pdf.pages
                ]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc

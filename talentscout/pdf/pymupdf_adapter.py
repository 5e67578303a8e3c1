import pymupdf

from talentscout.pdf.base import BasePageTextExtractor
from talentscout.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePageTextExtractor):
    """Reads page text runs using PyMuPDF."""

    def pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                # word tuples: (x0, y0, x1, y1, text, block_no, line_no, word_no)
                return [
                    " ".join(word[4] for word in page.get_text("words", sort=True))
                    for page in doc
                ]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc

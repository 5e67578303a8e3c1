import pytest

from talentscout.pdf.exceptions import PdfExtractionError
from talentscout.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_returns_one_entry_per_page_in_order(self, sample_pdf_bytes: bytes) -> None:
        pages = PyMuPdfAdapter().pages(sample_pdf_bytes)
        assert pages == ["Alice Smith", "Engineer"]

    def test_blank_page_yields_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfAdapter().pages(empty_pdf_bytes) == [""]

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError, match="pymupdf"):
            PyMuPdfAdapter().pages(b"not a pdf")

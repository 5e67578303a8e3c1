from abc import ABC, abstractmethod


class BasePageTextExtractor(ABC):
    """Contract for all PDF page-text engines."""

    @abstractmethod
    def pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract the text of every page, in page order.

        Positioned text runs within a page are joined with single spaces.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One string per page, page 1 first. Pages without a text layer
            yield an empty string.

        Raises:
            PdfExtractionError: if the document cannot be opened or read.
        """

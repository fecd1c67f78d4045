from abc import ABC, abstractmethod

from privacy_relay.pdf.models import ExtractedText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        """Extract plain text and page count from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            ExtractedText with pages joined by newlines and stripped.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """

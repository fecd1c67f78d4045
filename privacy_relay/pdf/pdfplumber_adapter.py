import io

import pdfplumber

from privacy_relay.pdf.base import BasePdfExtractor
from privacy_relay.pdf.exceptions import PdfExtractionError
from privacy_relay.pdf.models import ExtractedText


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts contract text using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return ExtractedText(text="\n".join(pages).strip(), page_count=len(pages))

import pymupdf

from privacy_relay.pdf.base import BasePdfExtractor
from privacy_relay.pdf.exceptions import PdfExtractionError
from privacy_relay.pdf.models import ExtractedText


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts contract text using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return ExtractedText(text="\n".join(pages).strip(), page_count=len(pages))

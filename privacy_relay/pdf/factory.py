from privacy_relay.config.settings import Settings
from privacy_relay.pdf.base import BasePdfExtractor
from privacy_relay.pdf.pdfplumber_adapter import PdfPlumberAdapter
from privacy_relay.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the contract PDF extractor named by settings.pdf_engine."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        try:
            adapter_cls = cls.ADAPTERS[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            ) from None
        return adapter_cls()

from unittest.mock import patch

import pytest

from privacy_relay.pdf.factory import PdfExtractorFactory
from privacy_relay.pdf.pdfplumber_adapter import PdfPlumberAdapter
from privacy_relay.pdf.pymupdf_adapter import PyMuPdfAdapter


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("privacy_relay.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings(" PdfPlumber "))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine 'tesseract'"):
            PdfExtractorFactory.create(_make_settings("tesseract"))

import pytest

from privacy_relay.config.settings import Settings
from privacy_relay.processor.processor import build_redactor
from privacy_relay.redaction.models import KnownNames

KNOWN = KnownNames(
    company_name="Acme Corp",
    employee_names=["John Doe"],
    project_names=["ClientX Website"],
)


@pytest.mark.integration
@pytest.mark.parametrize("engine", ["pdfplumber", "pymupdf"])
class TestContractRedaction:
    def test_redacts_contract_pdf(
        self, engine: str, contract_pdf_bytes: bytes, test_settings: Settings
    ) -> None:
        redactor = build_redactor(test_settings.model_copy(update={"pdf_engine": engine}))
        result = redactor.redact_pdf(contract_pdf_bytes, KNOWN)

        assert result.is_scanned_pdf is False
        text = result.redacted_text
        for secret in ("Acme Corp", "John Doe", "ClientX Website", "john.doe@acme.example", "DK50"):
            assert secret not in text
        assert "50000 DKK" in text
        assert "2026-06-30" in text
        assert result.stats.chunks_total == 5
        assert result.stats.redactions_applied == 5

    def test_empty_pdf_is_reported_as_scanned(
        self, engine: str, empty_pdf_bytes: bytes, test_settings: Settings
    ) -> None:
        redactor = build_redactor(test_settings.model_copy(update={"pdf_engine": engine}))
        result = redactor.redact_pdf(empty_pdf_bytes, KNOWN)

        assert result.is_scanned_pdf is True
        assert result.redacted_text == ""

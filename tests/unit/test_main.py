from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from privacy_relay.main import EXIT_SCANNED_PDF, main
from privacy_relay.pdf.exceptions import PdfExtractionError
from privacy_relay.processor.models import RedactionResult, RedactionStats
from privacy_relay.redaction.models import KnownNames


@pytest.fixture(autouse=True)
def _no_log_handler() -> Iterator[None]:
    with patch("privacy_relay.main.Log.configure"):
        yield


@pytest.fixture()
def pdf_path(tmp_path: Path) -> Path:
    path = tmp_path / "contract.pdf"
    path.write_bytes(b"%PDF-fake")
    return path


def _patched_redactor(result: RedactionResult | None = None) -> MagicMock:
    redactor = MagicMock()
    redactor.redact_pdf.return_value = result
    return redactor


class TestMain:
    def test_prints_redacted_text(self, pdf_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        redactor = _patched_redactor(
            RedactionResult(
                redacted_text="[COMPANY] pays [EMAIL_1]",
                stats=RedactionStats(redactions_applied=2),
            )
        )
        with patch("privacy_relay.main.build_redactor", return_value=redactor):
            code = main(
                [str(pdf_path), "--company", "Acme", "--employee", "Bo Lind", "--employee", "Ida Holm"]
            )

        assert code == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == "[COMPANY] pays [EMAIL_1]"
        assert "2 items redacted" in captured.err
        redactor.redact_pdf.assert_called_once_with(
            b"%PDF-fake",
            KnownNames(company_name="Acme", employee_names=["Bo Lind", "Ida Holm"], project_names=[]),
        )

    def test_scanned_pdf_exit_code(self, pdf_path: Path) -> None:
        redactor = _patched_redactor(RedactionResult(redacted_text="", is_scanned_pdf=True))
        with patch("privacy_relay.main.build_redactor", return_value=redactor):
            assert main([str(pdf_path)]) == EXIT_SCANNED_PDF

    def test_missing_file_returns_error(self, tmp_path: Path) -> None:
        with patch("privacy_relay.main.build_redactor", return_value=_patched_redactor()):
            assert main([str(tmp_path / "missing.pdf")]) == 1

    def test_unreadable_pdf_returns_error(self, pdf_path: Path) -> None:
        redactor = MagicMock()
        redactor.redact_pdf.side_effect = PdfExtractionError("broken")
        with patch("privacy_relay.main.build_redactor", return_value=redactor):
            assert main([str(pdf_path)]) == 1

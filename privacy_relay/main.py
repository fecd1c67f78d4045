import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from privacy_relay.config.settings import Settings
from privacy_relay.logging.logger import Log
from privacy_relay.pdf.exceptions import PdfExtractionError
from privacy_relay.processor.processor import build_redactor
from privacy_relay.redaction.models import KnownNames

EXIT_SCANNED_PDF = 2


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="privacy-relay-redact",
        description="Redact a contract PDF before sending it for term extraction.",
    )
    parser.add_argument("pdf", type=Path, help="Path to the contract PDF")
    parser.add_argument("--company", default="", help="Company name to replace")
    parser.add_argument(
        "--employee", action="append", default=[], help="Employee full name (repeatable)"
    )
    parser.add_argument(
        "--project", action="append", default=[], help="Project name (repeatable)"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> build redactor -> redact one PDF."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    redactor = build_redactor(settings)
    known_names = KnownNames(
        company_name=args.company,
        employee_names=args.employee,
        project_names=args.project,
    )

    try:
        result = redactor.redact_pdf(args.pdf.read_bytes(), known_names)
    except (OSError, PdfExtractionError) as exc:
        Log.error(f"Cannot redact {args.pdf}: {exc}")
        return 1

    if result.is_scanned_pdf:
        Log.warning(f"{args.pdf} has no usable text layer; nothing to redact")
        return EXIT_SCANNED_PDF

    print(result.redacted_text)
    print(f"\n{result.stats.redactions_applied} items redacted", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

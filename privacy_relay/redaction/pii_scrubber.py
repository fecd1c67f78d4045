"""Deterministic regex scrubbing of structured PII in contract text.

Categories run in priority order so a looser pattern never swallows a more
specific one:

1. CPR     national id, date + sequence  (010190-1234)
2. IBAN    bank account                  (DK50 0040 0440 1162 43)
3. CVR     company registration          (DK12345678, DK-12345678)
4. EMAIL   email address
5. POSTAL  postal code + city            (Address: 2100 København)

A postal code only counts at the start of a line or after ",", ":" or ";",
so "in 2026 March" and "is 5000 Danish kroner" are left alone.

Each category numbers distinct values from 1 within one call; a value seen
again reuses its first tag. Bare amounts such as "50000" or "5000 DKK" carry
none of these structures and are left alone.
"""

from __future__ import annotations

import re
from typing import ClassVar

from privacy_relay.logging.logger import Log
from privacy_relay.redaction.models import Artifact, ScrubResult

# Capitalized words that follow a 4-digit number without being a city.
_NOT_CITIES = (
    "Kr", "Kroner", "Danish", "Euro", "Euros", "Dollar", "Dollars",
    "January", "February", "March", "April", "May", "June", "July", "August",
    "September", "October", "November", "December",
    "Januar", "Februar", "Marts", "Maj", "Juni", "Juli", "Oktober",
)


class PiiScrubber:
    """Replaces structured PII with numbered tags like "[EMAIL_1]"."""

    _CPR_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b\d{6}-\d{4}\b")
    _IBAN_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b[A-Z]{2}\d{2}(?: ?\d{4}){3}(?: ?\d{1,4}){0,2}\b"
    )
    _CVR_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<![\w.+-])DK[ -]?\d{8}\b(?!@)", re.IGNORECASE
    )
    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
    )
    _POSTAL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?:^|(?<=[,:;])|(?<=[,:;][ \t])|(?<=DK-))"
        r"\d{4}[ \t]+"
        r"(?!(?:" + "|".join(_NOT_CITIES) + r")\b)"
        r"[A-ZÆØÅ][a-zæøå]+\b",
        re.MULTILINE,
    )

    RULES: ClassVar[list[tuple[str, re.Pattern[str]]]] = [
        ("CPR", _CPR_RE),
        ("IBAN", _IBAN_RE),
        ("CVR", _CVR_RE),
        ("EMAIL", _EMAIL_RE),
        ("POSTAL", _POSTAL_RE),
    ]

    def scrub(self, text: str) -> ScrubResult:
        """Replace every detected PII value in *text*.

        Returns:
            ScrubResult whose count is the number of distinct values tagged.
        """
        if not text:
            return ScrubResult(scrubbed_text=text)

        result = text
        artifacts: list[Artifact] = []
        for category, pattern in self.RULES:
            result = self._scrub_category(result, category, pattern, artifacts)

        if artifacts:
            Log.info(f"PII scrub: {len(artifacts)} values redacted")
        return ScrubResult(scrubbed_text=result, count=len(artifacts), artifacts=artifacts)

    @staticmethod
    def _scrub_category(
        text: str,
        category: str,
        pattern: re.Pattern[str],
        artifacts: list[Artifact],
    ) -> str:
        seen: dict[str, str] = {}

        def tag(match: re.Match[str]) -> str:
            value = match.group(0)
            if value not in seen:
                seen[value] = f"[{category}_{len(seen) + 1}]"
                artifacts.append(Artifact(type=category, original=value, replacement=seen[value]))
            return seen[value]

        return pattern.sub(tag, text)


def scrub_pii(text: str) -> ScrubResult:
    return PiiScrubber().scrub(text)

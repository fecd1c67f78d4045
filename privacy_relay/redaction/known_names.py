"""Replaces identity strings the caller already knows about.

One merged table is built per call:

- company name         -> [COMPANY]
- employee full name   -> [PERSON_n]
- employee name tokens -> the same [PERSON_n] (tokens of 3+ characters only)
- project name         -> [PROJECT_n]

and applied in a single case-sensitive pass, longest string first, so
"Acme Corporation" wins over "Acme Corp" and "Jan De Vries" is replaced
whole before "Vries" could fragment it. Matches are anchored at word edges,
which keeps numbers, ISO dates and words that merely contain a token intact.
Project names are replaced whole only; their tokens are not registered.
"""

from __future__ import annotations

from privacy_relay.anonymization.replacer import PatternReplacer
from privacy_relay.logging.logger import Log
from privacy_relay.redaction.models import Artifact, KnownNames, ScrubResult

COMPANY_TAG = "[COMPANY]"
MIN_TOKEN_LENGTH = 3


def build_replacement_table(names: KnownNames) -> dict[str, tuple[str, str]]:
    """Map every registered string to its (entity type, tag).

    The first registration of a string wins: company, then employees (full
    names before their own tokens), then projects.
    """
    table: dict[str, tuple[str, str]] = {}

    if names.company_name:
        table[names.company_name] = ("COMPANY", COMPANY_TAG)

    person_tags: dict[str, str] = {}
    for full_name in names.employee_names:
        if not full_name or full_name in person_tags:
            continue
        tag = f"[PERSON_{len(person_tags) + 1}]"
        person_tags[full_name] = tag
        table.setdefault(full_name, ("PERSON", tag))

    for full_name, tag in person_tags.items():
        tokens = full_name.split()
        if len(tokens) < 2:
            continue
        for token in tokens:
            if len(token) >= MIN_TOKEN_LENGTH:
                table.setdefault(token, ("PERSON", tag))

    project_count = 0
    for project_name in dict.fromkeys(names.project_names):
        if not project_name:
            continue
        project_count += 1
        table.setdefault(project_name, ("PROJECT", f"[PROJECT_{project_count}]"))

    return table


class KnownNameScrubber:
    """Replaces known company, employee and project names with tags."""

    def scrub(self, text: str, names: KnownNames) -> ScrubResult:
        """Scrub *text* of every name in *names*.

        Returns:
            ScrubResult whose count is the number of distinct registered
            strings that were found and replaced.
        """
        if not text or names.is_empty:
            return ScrubResult(scrubbed_text=text)

        table = build_replacement_table(names)
        replacer = PatternReplacer({term: tag for term, (_, tag) in table.items()})
        scrubbed, matched = replacer.replace_with_matches(text)

        artifacts = [
            Artifact(type=table[term][0], original=term, replacement=table[term][1])
            for term in dict.fromkeys(matched)
        ]
        if artifacts:
            Log.info(f"Known-name scrub: {len(artifacts)} names redacted")
        return ScrubResult(scrubbed_text=scrubbed, count=len(artifacts), artifacts=artifacts)


def scrub_known_names(text: str, names: KnownNames) -> ScrubResult:
    return KnownNameScrubber().scrub(text, names)

"""Restores real identities in text returned by the AI service."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import fields, is_dataclass, replace
from typing import Any, TypeVar

from privacy_relay.anonymization.models import IdentityMap
from privacy_relay.anonymization.replacer import PatternReplacer
from privacy_relay.logging.logger import Log

RecordT = TypeVar("RecordT")

# A pseudonym followed by another capital letter is a longer code
# ("Employee AB"), not a suffixed one ("Employee As").
_LONGER_CODE = "[A-Z]"


class DataDeanonymizer:
    """Substitutes pseudonyms back to real names using one identity map.

    Every pseudonym (employees, projects, company) is matched as a substring
    in a single longest-first pass, so "Employee AA" is restored intact even
    when "Employee A" also exists, and "Employee As" restores to the
    suffixed real name. Pseudonym-like text that is not in the map is left
    as it is.
    """

    def __init__(self, identity_map: IdentityMap) -> None:
        self._replacer = PatternReplacer(
            identity_map.reverse_table(), whole_words=False, forbid_after=_LONGER_CODE
        )

    def restore_text(self, text: str) -> str:
        return self._replacer.replace(text)

    def restore_record(self, record: RecordT) -> RecordT:
        """Return a copy of *record* with every string field restored.

        Plain strings, dataclass instances and mappings are supported;
        anything else is returned unchanged.
        """
        if isinstance(record, str):
            return self.restore_text(record)  # type: ignore[return-value]
        if is_dataclass(record) and not isinstance(record, type):
            changes = {
                f.name: self.restore_text(getattr(record, f.name))
                for f in fields(record)
                if isinstance(getattr(record, f.name), str)
            }
            return replace(record, **changes)  # type: ignore[type-var]
        if isinstance(record, Mapping):
            return {k: self._restore_value(v) for k, v in record.items()}  # type: ignore[return-value]
        return record

    def restore_records(self, records: Iterable[RecordT]) -> list[RecordT]:
        restored = [self.restore_record(r) for r in records]
        Log.debug(f"Deanonymized {len(restored)} records")
        return restored

    def _restore_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.restore_text(value)
        return value


def deanonymize(records: Iterable[RecordT], identity_map: IdentityMap) -> list[RecordT]:
    """Restore real names in every string field of *records* (or in plain strings)."""
    return DataDeanonymizer(identity_map).restore_records(records)

from collections import Counter
from dataclasses import dataclass, field

from privacy_relay.redaction.models import Artifact


@dataclass(frozen=True)
class RedactionStats:
    original_length: int = 0
    chunks_kept: int = 0
    chunks_total: int = 0
    redactions_applied: int = 0


@dataclass
class RedactionResult:
    """Output of the contract redaction pipeline."""

    redacted_text: str
    is_scanned_pdf: bool = False
    stats: RedactionStats = field(default_factory=RedactionStats)
    artifacts: list[Artifact] = field(default_factory=list)

    def redactions_by_type(self) -> dict[str, int]:
        """Count of redacted values per entity type, e.g. {"EMAIL": 2}."""
        return dict(Counter(a.type for a in self.artifacts))

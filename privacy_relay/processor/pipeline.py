from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from privacy_relay.redaction.models import KnownNames, ScrubResult


@dataclass(slots=True)
class RedactionContext:
    known_names: KnownNames
    pdf_bytes: bytes = b""
    raw_text: str = ""
    page_count: int = 1
    is_scanned_pdf: bool = False
    chunks: list[str] = field(default_factory=list)
    selected_chunks: list[str] = field(default_factory=list)
    text: str = ""
    pii_result: ScrubResult | None = None
    name_result: ScrubResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: RedactionContext) -> RedactionContext:
        raise NotImplementedError

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Artifact:
    """Single redaction record."""

    type: str  # e.g. "EMAIL", "CPR", "PERSON", "COMPANY"
    original: str  # text that was replaced
    replacement: str  # tag used in the scrubbed text, e.g. "[EMAIL_1]"


@dataclass
class ScrubResult:
    """Output of a scrubber: the scrubbed text and how much was redacted."""

    scrubbed_text: str
    count: int = 0
    artifacts: list[Artifact] = field(default_factory=list)


@dataclass(frozen=True)
class KnownNames:
    """Identity strings the caller knows appear in a document."""

    company_name: str = ""
    employee_names: list[str] = field(default_factory=list)
    project_names: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.company_name or any(self.employee_names) or any(self.project_names))

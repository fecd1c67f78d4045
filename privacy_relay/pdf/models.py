from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedText:
    """Plain text of a PDF plus its page count."""

    text: str
    page_count: int

    @property
    def chars_per_page(self) -> float:
        return len(self.text) / max(self.page_count, 1)

"""Splits contract text into paragraph-scale chunks."""

import re
from dataclasses import dataclass

DEFAULT_MIN_CHUNK_LENGTH = 20

# Blank lines, or the start of a numbered clause ("\n3. ", "\n4) "), or an
# ALL-CAPS heading line ("\nPAYMENT TERMS:\n").
_BOUNDARY_RE = re.compile(r"\n[ \t]*\n\s*|(?=\n\d+[.)]\s)|(?=\n[A-Z][A-Z ]{2,}:?\n)")


@dataclass(frozen=True)
class Chunk:
    """A chunk of source text with its original position and relevance score."""

    index: int
    text: str
    score: int = 0


def split_into_chunks(text: str, min_length: int = DEFAULT_MIN_CHUNK_LENGTH) -> list[str]:
    """Split *text* into stripped chunks, dropping ones shorter than *min_length*."""
    if not text:
        return []
    normalized = text.replace("\r\n", "\n")
    pieces = (piece.strip() for piece in _BOUNDARY_RE.split(normalized))
    return [piece for piece in pieces if len(piece) >= min_length]

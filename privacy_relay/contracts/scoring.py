"""Keyword relevance scoring and bounded chunk selection.

A chunk scores one point per keyword occurrence, plus a bonus for every
keyword cluster beyond the first it touches. Chunks that mention budget,
scope and deadline together therefore outrank chunks that repeat a single
theme, and boilerplate with no keywords scores exactly 0.
"""

import re
from collections.abc import Sequence
from typing import ClassVar

from privacy_relay.contracts.chunker import Chunk

DEFAULT_CHUNK_LIMIT = 15


class RelevanceScorer:
    """Scores contract chunks by density of contract-term keywords."""

    KEYWORD_CLUSTERS: ClassVar[dict[str, tuple[str, ...]]] = {
        "budget": (
            "budget", "fee", "cap", "invoice", "cost", "price", "payment", "rate",
            "compensation", "amount", "billing", "remuneration",
        ),
        "hours": (
            "hours", "hourly", "maximum", "limit", "time", "duration", "period",
            "man-hours", "work hours", "working hours",
        ),
        "deadline": (
            "deadline", "term", "expires", "expiration", "termination", "completion",
            "delivery", "effective date", "commencement",
        ),
        "scope": (
            "scope", "services", "deliverables", "deliverable", "obligations",
            "responsibilities", "shall", "undertake", "perform", "provide",
        ),
        "exclusions": (
            "exclusion", "excluded", "not included", "limitation", "restriction",
            "shall not", "does not include", "outside scope",
        ),
    }

    CLUSTER_BONUS: ClassVar[int] = 2

    def __init__(self) -> None:
        self._cluster_patterns = {
            cluster: re.compile(
                r"\b(?:" + "|".join(re.escape(t) for t in terms) + r")s?\b",
                re.IGNORECASE,
            )
            for cluster, terms in self.KEYWORD_CLUSTERS.items()
        }

    def score(self, chunk: str) -> int:
        hits = 0
        clusters_hit = 0
        for pattern in self._cluster_patterns.values():
            found = sum(1 for _ in pattern.finditer(chunk))
            if found:
                hits += found
                clusters_hit += 1
        if clusters_hit == 0:
            return 0
        return hits + self.CLUSTER_BONUS * (clusters_hit - 1)

    def rank(self, chunks: Sequence[str]) -> list[Chunk]:
        """Score every chunk and order best first, ties by original position."""
        scored = [Chunk(index=i, text=text, score=self.score(text)) for i, text in enumerate(chunks)]
        return sorted(scored, key=lambda c: (-c.score, c.index))


class ChunkSelector:
    """Keeps the most relevant chunks, in original document order."""

    def __init__(self, scorer: RelevanceScorer | None = None) -> None:
        self._scorer = scorer or RelevanceScorer()

    def select(self, chunks: Sequence[str], limit: int = DEFAULT_CHUNK_LIMIT) -> list[str]:
        if limit < 0:
            raise ValueError(f"Chunk limit must be >= 0, got {limit}")
        if len(chunks) <= limit:
            return list(chunks)
        selected = self._scorer.rank(chunks)[:limit]
        selected.sort(key=lambda c: c.index)
        return [c.text for c in selected]


_default_scorer = RelevanceScorer()


def score_chunk(chunk: str) -> int:
    return _default_scorer.score(chunk)


def select_relevant_chunks(chunks: Sequence[str], limit: int = DEFAULT_CHUNK_LIMIT) -> list[str]:
    return ChunkSelector(_default_scorer).select(chunks, limit)

from privacy_relay.contracts.chunker import Chunk, split_into_chunks
from privacy_relay.contracts.scoring import (
    ChunkSelector,
    RelevanceScorer,
    score_chunk,
    select_relevant_chunks,
)

__all__ = [
    "Chunk",
    "ChunkSelector",
    "RelevanceScorer",
    "score_chunk",
    "select_relevant_chunks",
    "split_into_chunks",
]

# irengine/ranker.py
"""
Shared ranking contract for the retrieval models.

Every model exposes
    rank(query, result_count, token_transformers) -> list[DocumentScore]
and orders its output with top_k(): score descending, ties broken by
ascending docid, zero (or negative) scores dropped, truncated to result_count.
"""

from collections import Counter
from collections.abc import Mapping
from typing import Iterable, NamedTuple, Protocol, Sequence

from irengine.tokenizer import TokenTransformer, apply_transformers, split_tokens


class DocumentScore(NamedTuple):
    doc_id: int
    score: float


class RetrievalModel(Protocol):
    def rank(
        self,
        query: str,
        result_count: int,
        token_transformers: Sequence[TokenTransformer] = (),
    ) -> list[DocumentScore]:
        ...


def query_term_frequencies(
    query: str,
    vocabulary: Mapping[str, object],
    token_transformers: Sequence[TokenTransformer] = (),
) -> dict[str, int]:
    """
    Split the query on the token boundary rule, transform each token and count
    the ones present in the vocabulary. Unknown terms are dropped silently.
    """
    counts = Counter()
    for token in split_tokens(query):
        term = apply_transformers(token, token_transformers)
        if term and term in vocabulary:
            counts[term] += 1
    return dict(counts)


def top_k(scores: Mapping[int, float] | Iterable[tuple[int, float]], result_count: int) -> list[DocumentScore]:
    """
    Deterministic ordering and truncation shared by all models.
    Accepts {docid: score} or (docid, score) pairs.
    """
    if result_count < 0:
        raise ValueError(f"result_count must be >= 0, got {result_count}")
    items = scores.items() if isinstance(scores, Mapping) else scores
    ranked = [DocumentScore(docid, score) for docid, score in items if score > 0]
    ranked.sort(key=lambda ds: (-ds.score, ds.doc_id))
    return ranked[:result_count]

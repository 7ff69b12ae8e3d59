"""
Posting and index term data structures.

A posting records how often one term occurs in one document.
An IndexTerm owns every posting of its term, keyed by document id.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Posting:
    """
    A term's occurrence count within a single document.
    - doc_id: document identifier (>= 0)
    - term_frequency: number of occurrences of the term in that document (>= 1)
    """

    doc_id: int
    term_frequency: int


@dataclass
class IndexTerm:
    """
    A vocabulary entry: the term string and its postings (doc_id -> Posting).
    Postings grow while the index is being built and are only read afterwards.
    """

    term: str
    postings: dict[int, Posting] = field(default_factory=dict)

    def add_posting(self, doc_id: int, term_frequency: int) -> None:
        """Record the aggregate frequency of this term in one document."""
        self.postings[doc_id] = Posting(doc_id, term_frequency)

    @property
    def document_frequency(self) -> int:
        return len(self.postings)

    def sorted_postings(self) -> Iterator[Posting]:
        """Postings in ascending document id order."""
        for doc_id in sorted(self.postings):
            yield self.postings[doc_id]

    def as_pairs(self) -> list[tuple[int, int]]:
        return [(p.doc_id, p.term_frequency) for p in self.sorted_postings()]

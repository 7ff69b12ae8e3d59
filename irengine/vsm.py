"""
irengine/vsm.py

Vector Space Model used by cosine similarity.

Each document becomes a sparse vector over the vocabulary:
    weight(t, d) = (ln(tf(t, d)) + 1) * ln(N / df(t))
normalised to unit length. Vector positions follow the vocabulary's insertion
order at construction time; query vectors must use the same positions.
"""

import math

from irengine.profkit import timeit


def normalize(vector: dict[int, float]) -> dict[int, float]:
    """Scale to unit length in place. Zero-length vectors are left as they are."""
    norm = math.sqrt(sum(w * w for w in vector.values()))
    if norm > 0:
        for i in vector:
            vector[i] /= norm
    return vector


class VectorSpaceModel:
    def __init__(self, doc_vectors, terms, index):
        self.doc_vectors: dict[int, dict[int, float]] = doc_vectors
        self.terms: list[str] = terms
        self.index = index
        self.positions: dict[str, int] = {t: i for i, t in enumerate(terms)}

    @property
    def document_count(self):
        return len(self.doc_vectors)

    def position(self, term):
        return self.positions.get(term)

    def idf(self, term):
        return math.log(self.document_count / self.index[term].document_frequency)

    @classmethod
    def from_index(cls, index):
        """
        Build normalised tf·idf document vectors from a term -> IndexTerm map.
        N is the number of distinct documents that appear in any posting.
        """
        with timeit("vsm.build_ms"):
            terms = list(index)
            doc_ids = set()
            for index_term in index.values():
                doc_ids.update(index_term.postings)
            N = len(doc_ids)

            doc_vectors: dict[int, dict[int, float]] = {docid: {} for docid in doc_ids}
            for i, term in enumerate(terms):
                postings = index[term].postings
                if not postings:
                    continue
                idf = math.log(N / len(postings))
                for docid, posting in postings.items():
                    tf = math.log(posting.term_frequency) + 1
                    doc_vectors[docid][i] = tf * idf

            for vector in doc_vectors.values():
                normalize(vector)

        print(f"[VSM] Built {N} document vectors over {len(terms)} terms")
        return cls(doc_vectors, terms, index)

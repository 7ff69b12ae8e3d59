# irengine/cosine.py
import math
from collections import defaultdict

from irengine.ranker import query_term_frequencies, top_k
from irengine.vsm import normalize


class CosineSimilarity:
    """
    Cosine similarity ranker over a prebuilt VectorSpaceModel.

    The query is weighted like a document, (ln(qtf) + 1) * idf, and normalised.
    A document's score is the dot product of its vector with the query vector,
    restricted to the query's dimensions. A term present in every document has
    idf 0 and adds nothing.
    """

    def __init__(self, vsm):
        self.vsm = vsm

    def query_vector(self, query, token_transformers=()):
        """Return {position: weight} for the query, unit length unless all weights are 0."""
        vector = {}
        for term, qtf in query_term_frequencies(query, self.vsm.positions, token_transformers).items():
            if not self.vsm.index[term].postings:
                continue
            vector[self.vsm.position(term)] = (math.log(qtf) + 1) * self.vsm.idf(term)
        return normalize(vector)

    def score(self, query, token_transformers=()):
        scores = defaultdict(float)
        for i, weight in self.query_vector(query, token_transformers).items():
            # only documents holding the term have a non-zero weight at position i
            for docid in self.vsm.index[self.vsm.terms[i]].postings:
                scores[docid] += weight * self.vsm.doc_vectors[docid][i]
        return scores

    def rank(self, query, result_count, token_transformers=()):
        return top_k(self.score(query, token_transformers), result_count)

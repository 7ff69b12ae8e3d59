# irengine/tfidf.py
import math
from collections import defaultdict

from irengine.ranker import query_term_frequencies, top_k


class TfIdf:
    """
    tf·idf ranker.

    For each matched query term t and document d:
        tf  = tf(t, d) / len(d)
        idf = ln(N / df(t))
    and a document's score is the sum over matched terms. Repeating a term in
    the query does not change the score.
    """

    def __init__(self, stats, index):
        self.stats = stats
        self.index = index

    def score(self, query, token_transformers=()):
        """Return {docid: score} for every document sharing a term with the query."""
        scores = defaultdict(float)
        N = self.stats.document_count
        if N == 0:
            return scores

        for term in query_term_frequencies(query, self.index, token_transformers):
            postings = self.index[term].postings
            if not postings:
                continue
            idf = math.log(N / len(postings))
            for docid, posting in postings.items():
                tf = posting.term_frequency / self.stats.doc_length(docid)
                scores[docid] += tf * idf
        return scores

    def rank(self, query, result_count, token_transformers=()):
        return top_k(self.score(query, token_transformers), result_count)

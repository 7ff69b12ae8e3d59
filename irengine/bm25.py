# irengine/bm25.py
import math
from collections import defaultdict

from irengine.paths import BM25_B, BM25_K1, BM25_K2
from irengine.ranker import query_term_frequencies, top_k


class BM25:
    """
    BM25 ranker: computes document scores given an inverted index and corpus statistics.

    Requirements / assumptions:
    - `index` is a mapping: term -> IndexTerm (docid -> Posting)
    - `stats` is a CorpusStatistics holding every indexed document's length
    - k1 and b control tf saturation and length normalisation, k2 saturates
      the query term frequency
    """

    def __init__(self, stats, index, k1=BM25_K1, k2=BM25_K2, b=BM25_B):
        self.stats = stats
        self.index = index
        self.k1 = k1
        self.k2 = k2
        self.b = b

        self.N = stats.document_count
        # Average document length; 0 for an empty corpus (rank() then returns [])
        self.avdl = stats.average_doc_length

    def idf(self, df):
        # +1 inside the log keeps the component positive when df > N/2
        return math.log(1.0 + 1.0 / (df / (self.N - df + 0.5)))

    def bm25(self, tf, qtf, df, dl):
        """
        Compute the BM25 contribution of one query term to one document.

        Args:
            tf: term frequency in this document
            qtf: term frequency in the query
            df: document frequency of the term
            dl: document length of this document
        """
        K = self.k1 * ((1.0 - self.b) + self.b * (dl / self.avdl))
        tf_doc = ((self.k1 + 1.0) * tf) / (K + tf)
        tf_query = ((self.k2 + 1.0) * qtf) / (self.k2 + qtf)
        return self.idf(df) * tf_doc * tf_query

    def score(self, query, token_transformers=()):
        """
        Compute BM25 scores for all documents that contain at least one query term.

        Returns:
            {docid: score}
        """
        scores = defaultdict(float)
        if self.N == 0 or self.avdl <= 0:
            return scores

        for term, qtf in query_term_frequencies(query, self.index, token_transformers).items():
            postings = self.index[term].postings
            df = len(postings)
            if df == 0:
                continue
            for docid, posting in postings.items():
                dl = self.stats.doc_length(docid)
                scores[docid] += self.bm25(posting.term_frequency, qtf, df, dl)
        return scores

    def rank(self, query, result_count, token_transformers=()):
        return top_k(self.score(query, token_transformers), result_count)

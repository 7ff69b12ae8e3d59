# irengine/searcher.py
import os

from irengine.bm25 import BM25
from irengine.cosine import CosineSimilarity
from irengine.lexicon import load_index
from irengine.paths import BM25_B, BM25_K1, BM25_K2, CORPUS_STATS_PATH, INDEX_PATH, RESULT_COUNT
from irengine.ranker import RetrievalModel
from irengine.stats import CorpusStatistics, load_doc_lengths
from irengine.tfidf import TfIdf
from irengine.tokenizer import DEFAULT_TRANSFORMERS
from irengine.vsm import VectorSpaceModel

MODEL_NAMES = ("CosineSimilarity", "TfIdf", "BM25")


class Searcher:
    """
    Loads the index and corpus statistics once and ranks queries with any of
    the three retrieval models.

    - index: term -> IndexTerm, or a path to a serialized index
    - stats: CorpusStatistics, a {docid: length} dict, or a path to a stats file
    - Models (and the Vector Space Model) are built up front and never mutated,
      so search() may be called from several threads.
    """

    def __init__(self, index=INDEX_PATH, stats=CORPUS_STATS_PATH, transformers=DEFAULT_TRANSFORMERS,
                 k1=BM25_K1, k2=BM25_K2, b=BM25_B):
        if isinstance(index, (str, os.PathLike)):
            index = load_index(index)
        if isinstance(stats, (str, os.PathLike)):
            stats = load_doc_lengths(stats)
        elif isinstance(stats, dict):
            stats = CorpusStatistics(stats)
        elif not isinstance(stats, CorpusStatistics):
            raise TypeError(f"stats must be CorpusStatistics | dict | path, got {type(stats)}")

        self.index = index
        self.stats = stats
        self.transformers = tuple(transformers)
        self.models: dict[str, RetrievalModel] = {
            "CosineSimilarity": CosineSimilarity(VectorSpaceModel.from_index(index)),
            "TfIdf": TfIdf(stats, index),
            "BM25": BM25(stats, index, k1=k1, k2=k2, b=b),
        }

    def model(self, name):
        for key, model in self.models.items():
            if key.lower() == name.lower():
                return model
        raise ValueError(f"unknown model {name!r}, expected one of {', '.join(MODEL_NAMES)}")

    def search(self, query: str, model: str = "BM25", topk: int = RESULT_COUNT):
        """Return list[DocumentScore] ranked by the named model."""
        return self.model(model).rank(query, topk, self.transformers)

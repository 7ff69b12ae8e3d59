# tests/conftest.py
import pytest

from irengine.indexer import Indexer
from irengine.stats import CorpusStatistics

# doc1="cat dog cat", doc2="dog bird", doc3="cat"
TOY_DOCS = {
    1: ["cat", "dog", "cat"],
    2: ["dog", "bird"],
    3: ["cat"],
}


@pytest.fixture
def toy_docs():
    return {docid: list(tokens) for docid, tokens in TOY_DOCS.items()}


@pytest.fixture
def toy_index(toy_docs):
    return Indexer(1).build_inverted_index(toy_docs.items())


@pytest.fixture
def toy_stats(toy_docs):
    return CorpusStatistics({docid: len(tokens) for docid, tokens in toy_docs.items()})


@pytest.fixture
def toy_token_dir(tmp_path, toy_docs):
    """Token file directory in the tokenizer's layout (file0001.txt, ...)."""
    d = tmp_path / "tokenizedDocs"
    d.mkdir()
    for docid, tokens in toy_docs.items():
        (d / f"file{docid:04d}.txt").write_text(" ".join(tokens), encoding="utf-8")
    return d

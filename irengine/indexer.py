"""
irengine/indexer.py

Builds an n-gram inverted index from tokenized documents and writes it to
disk as sorted, tab-separated text (see irengine/lexicon.py for the format).

Input is either a stream of (docid, tokens) pairs or a directory of token
files (file0001.txt, ... one whitespace-separated token sequence each).
"""

import os
import re
from collections import Counter
from typing import Iterable

from irengine.errors import DocumentReadError
from irengine.lexicon import Lexicon
from irengine.paths import INDEX_PATH
from irengine.posting import IndexTerm
from irengine.profkit import tick, timeit

DOCID_IN_NAME = re.compile(r"(\d+)")


def ngrams(tokens: list[str], n: int) -> list[str]:
    """Every window of n consecutive tokens, space-joined. [] if len(tokens) < n."""
    return [" ".join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)]


def docid_from_filename(name: str) -> int:
    stem = os.path.splitext(name)[0]
    m = DOCID_IN_NAME.search(stem)
    if not m:
        raise DocumentReadError(name, "no document id in file name")
    return int(m.group(1))


def read_token_file(path: str) -> list[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().split()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, e) from e


def iter_token_files(directory: str):
    """
    Yield (docid, tokens) for every token file in a directory, in sorted name order.
    Any unreadable file raises DocumentReadError, aborting the caller's build.
    """
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise DocumentReadError(directory, e) from e
    for name in names:
        path = os.path.join(directory, name)
        if not os.path.isfile(path):
            continue
        yield docid_from_filename(name), read_token_file(path)


class Indexer:
    """
    In-memory inverted index builder.
    Maintains a mapping:
        term -> IndexTerm (docid -> Posting with the per-document term frequency)

    After building, use save_to_disk() to serialize the index.
    """

    def __init__(self, n: int = 1):
        if n < 1:
            raise ValueError(f"n-gram width must be >= 1, got {n}")
        self.n = n
        self.index: dict[str, IndexTerm] = {}
        self.doc_ids: set[int] = set()

    def add_document(self, docid: int, tokens: list[str]):
        if docid in self.doc_ids:
            raise ValueError(f"document {docid} indexed twice")
        self.doc_ids.add(docid)
        # one posting per (term, doc): frequencies are aggregated first
        for term, tf in Counter(ngrams(tokens, self.n)).items():
            index_term = self.index.get(term)
            if index_term is None:
                index_term = self.index[term] = IndexTerm(term)
            index_term.add_posting(docid, tf)
        tick("indexer.docs")

    def build_inverted_index(self, docs: Iterable[tuple[int, list[str]]]):
        """
        Construct an inverted index from tokenized documents.

        Args:
            docs: iterable of (docid, list of tokens)

        Returns:
            dict[str, IndexTerm] : term -> IndexTerm
        """
        with timeit("indexer.build_ms"):
            for docid, tokens in docs:
                self.add_document(docid, tokens)
        return self.index

    def build_from_directory(self, directory: str):
        """Index every token file in a directory. Nothing is kept if any file fails."""
        built = Indexer(self.n)
        built.build_inverted_index(iter_token_files(directory))
        self.index, self.doc_ids = built.index, built.doc_ids
        print(f"[Indexer] Indexed {len(self.doc_ids)} docs, {len(self.index)} {self.n}-gram terms from {directory}")
        return self.index

    def save_to_disk(self, path: str = INDEX_PATH):
        """Write the index sorted by term, postings sorted by docid."""
        lex = Lexicon()
        lex.map = self.index
        with timeit("indexer.save_ms"):
            lex.save(path)
        print(f"[Indexer] Wrote index → {path}")


def create_index(n: int, tokenized_dir: str, out_path: str = INDEX_PATH) -> dict[str, IndexTerm]:
    """Build the n-gram index of a token file directory and write it to out_path."""
    print(f"[Indexer] Creating index with {n}-grams in file {out_path}")
    indexer = Indexer(n)
    index = indexer.build_from_directory(tokenized_dir)
    indexer.save_to_disk(out_path)
    return index

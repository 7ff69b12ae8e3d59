# irengine/run.py
"""
Batch pipeline: tokenize the raw corpus, build the index, and write one ranked
run per retrieval model.

Usage:
  python -m irengine.run all
  python -m irengine.run tokenize --raw-docs cacm/rawDocs --out cacm/tokenizedDocs
  python -m irengine.run index --ngram 2 --out Bigram-Index.txt
  python -m irengine.run rank --queries cacm/cacm.query --topk 100 --k1 1.2 --k2 100 --b 0.75

Set PROFKIT=1 to print timing counters at the end of the run.
"""

from __future__ import annotations

import argparse
import os
import sys

from irengine import paths
from irengine.errors import IREngineError
from irengine.indexer import create_index
from irengine.parser import CacmParser
from irengine.profkit import report, timeit
from irengine.queries import parse_structured_queries, parse_unstructured_queries
from irengine.results import write_results
from irengine.searcher import MODEL_NAMES, Searcher
from irengine.tokenizer import DEFAULT_TRANSFORMERS, tokenize_documents

RUN_FILE_NAMES = {
    "CosineSimilarity": "Cosine-Similarity-Run.txt",
    "TfIdf": "TfIdf-Run.txt",
    "BM25": "BM25-Run.txt",
}


def do_tokenize(args):
    docs = CacmParser().parse_docs(args.raw_docs)
    with timeit("run.tokenize_ms"):
        tokenize_documents(docs, args.tokenized_docs, args.stats, DEFAULT_TRANSFORMERS)


def do_index(args):
    with timeit("run.index_ms"):
        create_index(args.ngram, args.tokenized_docs, args.index)


def do_rank(args):
    if args.unstructured:
        queries = parse_unstructured_queries(args.queries)
    else:
        queries = parse_structured_queries(args.queries)

    searcher = Searcher(args.index, args.stats, DEFAULT_TRANSFORMERS, k1=args.k1, k2=args.k2, b=args.b)
    for name in args.models:
        print(f"[Run] Performing {name} run")
        with timeit(f"run.{name}_ms"):
            ranked = {qid: searcher.search(q, model=name, topk=args.topk) for qid, q in queries.items()}
        write_results(os.path.join(args.out_dir, RUN_FILE_NAMES[name]), ranked, name)


def do_all(args):
    do_tokenize(args)
    do_index(args)
    do_rank(args)


def build_parser():
    ap = argparse.ArgumentParser(prog="irengine", description="Index a corpus and rank queries with tf·idf, BM25 and cosine similarity.")
    sub = ap.add_subparsers(dest="command", required=True)

    def corpus_opts(p):
        p.add_argument("--tokenized-docs", default=paths.TOKENIZED_DOC_DIR, help="Directory of per-document token files.")
        p.add_argument("--stats", default=paths.CORPUS_STATS_PATH, help="Document length table.")

    def tokenize_opts(p):
        p.add_argument("--raw-docs", default=paths.RAW_DOC_DIR, help="Raw CACM documents (directory or file).")

    def index_opts(p):
        p.add_argument("--index", default=paths.INDEX_PATH, help="Serialized index file.")
        p.add_argument("--ngram", type=int, default=paths.NGRAM_SIZE, help="n-gram width of index terms.")

    def rank_opts(p):
        p.add_argument("--queries", default=paths.QUERY_PATH, help="Query file.")
        p.add_argument("--unstructured", action="store_true", help="Query file has one query per line.")
        p.add_argument("--out-dir", default=paths.RUN_OUTPUT_DIR, help="Directory for run tables.")
        p.add_argument("--topk", type=int, default=paths.RESULT_COUNT, help="Results per query.")
        p.add_argument("--models", nargs="+", choices=MODEL_NAMES, default=list(MODEL_NAMES))
        p.add_argument("--k1", type=float, default=paths.BM25_K1)
        p.add_argument("--k2", type=float, default=paths.BM25_K2)
        p.add_argument("--b", type=float, default=paths.BM25_B)

    p = sub.add_parser("tokenize", help="Parse raw documents into token files and a stats file.")
    tokenize_opts(p)
    corpus_opts(p)
    p.set_defaults(func=do_tokenize)

    p = sub.add_parser("index", help="Build the n-gram inverted index from token files.")
    corpus_opts(p)
    index_opts(p)
    p.set_defaults(func=do_index)

    p = sub.add_parser("rank", help="Rank every query with each retrieval model.")
    corpus_opts(p)
    index_opts(p)
    rank_opts(p)
    p.set_defaults(func=do_rank)

    p = sub.add_parser("all", help="tokenize + index + rank.")
    tokenize_opts(p)
    corpus_opts(p)
    index_opts(p)
    rank_opts(p)
    p.set_defaults(func=do_all)

    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    if getattr(args, "topk", 0) < 0:
        print("[ERROR] --topk must be >= 0", file=sys.stderr)
        return 2
    try:
        args.func(args)
    except (IREngineError, OSError) as e:
        print(f"[ERROR] {args.command} failed: {e}", file=sys.stderr)
        return 1
    finally:
        report()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Tokenization and token transformation.

One boundary rule is used everywhere terms are produced (documents and
queries): any character that is not an ASCII letter or digit separates tokens.

Token transformers are plain `str -> str` callables applied in order.
"""

import os
import re
from typing import Callable, Iterable, Sequence

from irengine.paths import TOKEN_FILE_FORMAT
from irengine.stats import write_doc_lengths

TokenTransformer = Callable[[str], str]

DELIMITER = re.compile(r"[^a-zA-Z0-9]")


def case_fold(token: str) -> str:
    return token.lower()


DEFAULT_TRANSFORMERS: tuple[TokenTransformer, ...] = (case_fold,)


def split_tokens(text: str) -> list[str]:
    """Split on the boundary rule. Empty strings between adjacent delimiters are kept."""
    return DELIMITER.split(text)


def apply_transformers(token: str, transformers: Sequence[TokenTransformer]) -> str:
    for transform in transformers:
        # once a token is empty it stays empty
        if not token:
            break
        token = transform(token)
    return token


def transform_tokens(tokens: Iterable[str], transformers: Sequence[TokenTransformer]) -> list[str]:
    """Apply the transformer pipeline to each token and discard empty results."""
    out = []
    for token in tokens:
        token = apply_transformers(token, transformers)
        if token:
            out.append(token)
    return out


def tokenize(text: str, transformers: Sequence[TokenTransformer] = DEFAULT_TRANSFORMERS) -> list[str]:
    """
    Tokenize a raw text string.
    - split on non-alphanumerics
    - run the transformer pipeline (case folding by default)
    - return [] if nothing remains
    """
    return transform_tokens(split_tokens(text.strip()), transformers)


def write_token_file(path, tokens: Sequence[str]):
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(" ".join(tokens))


def tokenize_documents(docs, out_dir, stats_path, transformers=DEFAULT_TRANSFORMERS):
    """
    Tokenize parsed documents into one token file per document and write the
    corpus statistics file (docid -> token count).

    Args:
        docs: iterable of Doc (doc_id, text)
        out_dir: directory receiving file%04d.txt token files
        stats_path: path of the doc length table
    Returns:
        dict[int, int] : docid -> document length
    """
    os.makedirs(out_dir, exist_ok=True)
    doc_lengths = {}
    for doc in docs:
        tokens = tokenize(doc.text, transformers)
        write_token_file(os.path.join(out_dir, TOKEN_FILE_FORMAT % doc.doc_id), tokens)
        doc_lengths[doc.doc_id] = len(tokens)

    print(f"[Tokenizer] Wrote {len(doc_lengths)} token files → {out_dir}")
    write_doc_lengths(doc_lengths, stats_path)
    return doc_lengths

# irengine/stats.py

from typing import Mapping

from irengine.errors import CorpusStatsError


class CorpusStatistics:
    """
    Per-document length table shared read-only by all retrieval models.

    - doc_lengths: docid -> number of tokens in the document
    - document_count: number of distinct documents (== len(doc_lengths))
    """

    def __init__(self, doc_lengths: Mapping[int, int] | None = None):
        self.doc_lengths = dict(doc_lengths or {})
        self.document_count = len(self.doc_lengths)
        if self.document_count:
            self.average_doc_length = sum(self.doc_lengths.values()) / self.document_count
        else:
            self.average_doc_length = 0.0

    def doc_length(self, doc_id: int) -> int:
        try:
            length = self.doc_lengths[doc_id]
        except KeyError:
            raise CorpusStatsError(f"No length recorded for document {doc_id}") from None
        # a document that appears in a posting holds at least one token
        if length <= 0:
            raise CorpusStatsError(f"Document {doc_id} has non-positive length {length}")
        return length

    def __len__(self):
        return self.document_count


def write_doc_lengths(doc_lengths, path):
    """
    Save doc_lengths (docid -> length) as tab-separated text, one document per line.
    Args:
        doc_lengths: dict[int, int]
        path: str, file path
    """
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for docid in sorted(doc_lengths):
            f.write(f"{docid}\t{doc_lengths[docid]}\n")
    print(f"[Stats] Doc lengths saved to {path}")


def load_doc_lengths(path):
    """
    Load a statistics file into CorpusStatistics.
    The file holds whitespace-separated `docid length` integer pairs until EOF.
    Raises OSError if unreadable, CorpusStatsError if malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            fields = f.read().split()
    except UnicodeDecodeError as e:
        raise CorpusStatsError(f"{path}: not valid UTF-8 ({e.reason})") from e

    if len(fields) % 2:
        raise CorpusStatsError(f"{path}: odd number of values, expected docid/length pairs")

    doc_lengths = {}
    for i in range(0, len(fields), 2):
        try:
            docid, length = int(fields[i]), int(fields[i + 1])
        except ValueError:
            raise CorpusStatsError(
                f"{path}: non-integer pair {fields[i]!r} {fields[i + 1]!r}"
            ) from None
        doc_lengths[docid] = length

    print(f"[Stats] Doc lengths loaded from {path}: {len(doc_lengths)} docs")
    return CorpusStatistics(doc_lengths)

"""
irengine/lexicon.py

Lexicon maps each vocabulary term to its IndexTerm and owns the on-disk
index format. The file is UTF-8 text with one line per term, sorted by term:

    <term>\t<docid>,<tf>\t<docid>,<tf>...

Postings on a line are in ascending docid order. A term may have no postings.

Reading tolerates any line order. A term seen twice is rejected (the first
line wins) and reported on stderr; an unparsable posting aborts the load.
"""

import sys

from irengine.errors import IndexFormatError
from irengine.posting import IndexTerm

FIELD_SEP = "\t"
POSTING_SEP = ","


def format_line(index_term: IndexTerm) -> str:
    parts = [index_term.term]
    for p in index_term.sorted_postings():
        parts.append(f"{p.doc_id}{POSTING_SEP}{p.term_frequency}")
    return FIELD_SEP.join(parts) + "\n"


def parse_line(line: str, path="<index>", line_no=0) -> IndexTerm | None:
    """
    Parse one index line into an IndexTerm.
    Returns None for blank lines; raises IndexFormatError on bad postings.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEP)
    term = fields[0].strip()
    if not term:
        if any(f.strip() for f in fields[1:]):
            raise IndexFormatError(path, line_no, "postings without a term")
        return None

    index_term = IndexTerm(term)
    for raw in fields[1:]:
        values = raw.strip().split(POSTING_SEP)
        if len(values) != 2:
            raise IndexFormatError(path, line_no, f"bad posting {raw!r} for term {term!r}")
        try:
            docid, tf = int(values[0]), int(values[1])
        except ValueError:
            raise IndexFormatError(path, line_no, f"bad posting {raw!r} for term {term!r}") from None
        if docid < 0 or tf < 1:
            raise IndexFormatError(path, line_no, f"out-of-range posting {raw!r} for term {term!r}")
        index_term.add_posting(docid, tf)
    return index_term


class Lexicon:
    """
    In-memory vocabulary: term -> IndexTerm.

    Typical usage:
        lex = Lexicon()
        lex.add(index_term)
        lex.save("Unstemmed-Index.txt")

        # Later:
        index = Lexicon.load("Unstemmed-Index.txt").map
        postings = index["hello"].postings
    """

    def __init__(self):
        self.map: dict[str, IndexTerm] = {}

    def add(self, index_term: IndexTerm) -> bool:
        """Add a term; returns False (and keeps the existing entry) on duplicates."""
        if index_term.term in self.map:
            return False
        self.map[index_term.term] = index_term
        return True

    def __len__(self):
        return len(self.map)

    def __contains__(self, term):
        return term in self.map

    def save(self, path):
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for term in sorted(self.map):
                f.write(format_line(self.map[term]))
        print(f"[Lexicon] Saved {len(self.map)} terms to {path}")

    @classmethod
    def load(cls, path):
        lex = cls()
        duplicates = 0
        # decoded line by line so a bad byte is reported with its line number
        with open(path, "rb") as f:
            for line_no, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise IndexFormatError(path, line_no, f"not valid UTF-8 ({e.reason})") from e
                index_term = parse_line(line, path, line_no)
                if index_term is None:
                    continue
                if not lex.add(index_term):
                    duplicates += 1
                    print(f"[Lexicon] Duplicate term: {index_term.term} ({path}:{line_no})", file=sys.stderr)
        print(f"[Lexicon] Loaded {len(lex.map)} terms from {path}")
        if duplicates:
            print(f"[Lexicon] Rejected {duplicates} duplicate terms", file=sys.stderr)
        return lex


def load_index(path) -> dict[str, IndexTerm]:
    """Load a serialized index into a term -> IndexTerm mapping."""
    return Lexicon.load(path).map


def write_index(index: dict[str, IndexTerm], path):
    """Serialize a term -> IndexTerm mapping in sorted term order."""
    lex = Lexicon()
    lex.map = dict(index)
    lex.save(path)

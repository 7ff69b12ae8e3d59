import os
import re
from dataclasses import dataclass

from bs4 import BeautifulSoup
from ftfy import fix_text

from irengine.errors import DocumentReadError


@dataclass
class Doc:
    doc_id: int
    text: str


HTML_NAME = re.compile(r"^CACM-(\d+)\.html$", re.IGNORECASE)
DOC_HEADER = re.compile(r"^# (\d+)$")


class CacmParser:
    """
    Parser for the raw CACM corpus.
    Uses BeautifulSoup + ftfy to pull clean text out of the source files.

    What it does:
    - CACM-NNNN.html: the document text is the content of its <pre> blocks,
      the document id is NNNN
    - any other file: plain text holding several documents, each introduced
      by a `# <docid>` header line
    - directories are walked recursively in sorted name order

    Methods:
        parse_docs(path: str) -> list[Doc]
        iter_docs(path: str) -> yields Doc
    """

    def parse_docs(self, path: str) -> list[Doc]:
        docs = list(self.iter_docs(path))
        print(f"[Parser] Loaded {len(docs)} docs from {path}")
        return docs

    def iter_docs(self, path: str):
        if os.path.isdir(path):
            for name in sorted(os.listdir(path)):
                yield from self.iter_docs(os.path.join(path, name))
        elif path.lower().endswith(".html"):
            yield self.parse_html_file(path)
        else:
            yield from self.parse_text_file(path)

    def parse_html_file(self, path: str) -> Doc:
        match = HTML_NAME.match(os.path.basename(path))
        if not match:
            raise DocumentReadError(path, "could not get document id from file name")
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                soup = BeautifulSoup(f.read(), "html.parser")
        except OSError as e:
            raise DocumentReadError(path, e) from e
        text = " ".join(pre.get_text(" ") for pre in soup.find_all("pre"))
        return Doc(int(match.group(1)), clean_text(text))

    def parse_text_file(self, path: str) -> list[Doc]:
        """
        Split a text file into documents on `# <docid>` header lines.
        Text before the first header is ignored.
        """
        docs = []
        docid = None
        lines: list[str] = []
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                for line in f:
                    line = line.strip()
                    m = DOC_HEADER.match(line)
                    if m:
                        if docid is not None:
                            docs.append(Doc(docid, clean_text(" ".join(lines))))
                        docid = int(m.group(1))
                        lines = []
                    else:
                        lines.append(line)
        except OSError as e:
            raise DocumentReadError(path, e) from e
        if docid is not None:
            docs.append(Doc(docid, clean_text(" ".join(lines))))
        return docs


def clean_text(text: str) -> str:
    """Fix mojibake and collapse whitespace runs."""
    return " ".join(fix_text(text).split())

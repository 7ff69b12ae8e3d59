# irengine/queries.py
"""
Query file readers. Both return {query_id: query_text} ordered by query id.

Structured files (CACM style):
    <DOC>
    <DOCNO> 1 </DOCNO>
    What articles exist which deal with TSS ...
    </DOC>

Unstructured files: one query per non-empty line, ids numbered from 1.
"""

from bs4 import BeautifulSoup

from irengine.errors import QueryFileError


def parse_structured_queries(path) -> dict[int, str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            soup = BeautifulSoup(f.read(), "html.parser")
    except UnicodeDecodeError as e:
        raise QueryFileError(f"{path}: not valid UTF-8 ({e.reason})") from e

    queries = {}
    for doc in soup.find_all("doc"):
        docno = doc.find("docno")
        if docno is None:
            raise QueryFileError(f"{path}: <DOC> without <DOCNO>")
        try:
            qid = int(docno.get_text().strip())
        except ValueError:
            raise QueryFileError(f"{path}: bad query id {docno.get_text()!r}") from None
        docno.extract()
        queries[qid] = " ".join(doc.get_text(" ").split())

    print(f"[Queries] Parsed {len(queries)} queries from {path}")
    return dict(sorted(queries.items()))


def parse_unstructured_queries(path) -> dict[int, str]:
    queries = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                queries[len(queries) + 1] = line
    except UnicodeDecodeError as e:
        raise QueryFileError(f"{path}: not valid UTF-8 ({e.reason})") from e
    print(f"[Queries] Parsed {len(queries)} queries from {path}")
    return queries

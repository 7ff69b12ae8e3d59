# irengine/results.py

import os

from irengine.paths import RESULTS_TABLE_FORMAT


def format_results(query_id, results, model_name):
    """One table line per result: query_id Q0 CACM-docid rank score model."""
    return [
        RESULTS_TABLE_FORMAT % (query_id, ds.doc_id, rank, ds.score, model_name)
        for rank, ds in enumerate(results, start=1)
    ]


def write_results(path, ranked_by_query, model_name):
    """
    Write a run table.
    Args:
        ranked_by_query: dict[int, list[DocumentScore]] in query id order
        model_name: name written in the last column
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    n = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for query_id, results in ranked_by_query.items():
            lines = format_results(query_id, results, model_name)
            f.writelines(lines)
            n += len(lines)
    print(f"[Results] Wrote {n} rows for {len(ranked_by_query)} queries → {path}")

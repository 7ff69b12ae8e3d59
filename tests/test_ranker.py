import pytest

from irengine.ranker import DocumentScore, query_term_frequencies, top_k
from irengine.tokenizer import case_fold

VOCAB = {"cat": None, "dog": None, "bird": None}


def test_query_term_frequencies_counts_known_terms():
    assert query_term_frequencies("cat,dog! cat zebra", VOCAB) == {"cat": 2, "dog": 1}


def test_query_transformers_are_applied():
    assert query_term_frequencies("CAT Dog", VOCAB) == {}
    assert query_term_frequencies("CAT Dog", VOCAB, [case_fold]) == {"cat": 1, "dog": 1}


def test_order_by_score_then_docid():
    ranked = top_k({7: 0.5, 2: 0.9, 5: 0.5, 1: 0.1}, 10)
    assert ranked == [
        DocumentScore(2, 0.9),
        DocumentScore(5, 0.5),
        DocumentScore(7, 0.5),
        DocumentScore(1, 0.1),
    ]


def test_zero_scores_are_excluded():
    assert top_k([(1, 0.0), (2, 0.3), (3, -0.2)], 10) == [DocumentScore(2, 0.3)]


@pytest.mark.parametrize("k,expected", [(0, []), (1, [3]), (2, [3, 1]), (50, [3, 1, 2])])
def test_truncation(k, expected):
    ranked = top_k({1: 0.5, 2: 0.2, 3: 0.8}, k)
    assert [d for d, _ in ranked] == expected


def test_negative_result_count():
    with pytest.raises(ValueError):
        top_k({1: 1.0}, -1)

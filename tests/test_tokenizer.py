import pytest

from irengine.parser import Doc
from irengine.tokenizer import apply_transformers, case_fold, tokenize, tokenize_documents, transform_tokens


@pytest.mark.parametrize("text,expected", [
    ("Cat dog CAT", ["cat", "dog", "cat"]),
    ("U.S.A.", ["u", "s", "a"]),
    ("foo_bar", ["foo", "bar"]),
    ("3.14", ["3", "14"]),
    ("e-mail", ["e", "mail"]),
    ("COVID19", ["covid19"]),
    ("Café", ["caf"]),
    ("  spaced   out  ", ["spaced", "out"]),
    ("...", []),
    ("", []),
])
def test_tokenize(text, expected):
    assert tokenize(text) == expected


def test_no_transformers_keeps_case():
    assert tokenize("Cat Dog", ()) == ["Cat", "Dog"]


def test_transformers_apply_in_order():
    def strip_s(token):
        return token[:-1] if token.endswith("s") else token

    assert apply_transformers("CATS", [case_fold, strip_s]) == "cat"
    # strip_s sees "CATS" first and leaves it alone
    assert apply_transformers("CATS", [strip_s, case_fold]) == "cats"


def test_empty_tokens_are_dropped():
    def drop_stopword(token):
        return "" if token == "the" else token

    assert transform_tokens(["the", "cat", ""], [case_fold, drop_stopword]) == ["cat"]


def test_tokenize_documents(tmp_path):
    out_dir = tmp_path / "tokens"
    stats_path = tmp_path / "stats.txt"
    docs = [Doc(1, "Cat dog cat"), Doc(12, "Dog, bird!"), Doc(3, "")]
    lengths = tokenize_documents(docs, str(out_dir), str(stats_path))

    assert lengths == {1: 3, 12: 2, 3: 0}
    assert (out_dir / "file0001.txt").read_text(encoding="utf-8") == "cat dog cat"
    assert (out_dir / "file0012.txt").read_text(encoding="utf-8") == "dog bird"
    assert (out_dir / "file0003.txt").read_text(encoding="utf-8") == ""
    assert stats_path.read_text(encoding="utf-8") == "1\t3\n3\t0\n12\t2\n"

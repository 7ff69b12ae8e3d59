import pytest

from irengine.errors import DocumentReadError
from irengine.indexer import Indexer, create_index, docid_from_filename, ngrams


def postings_of(index):
    return {term: index_term.as_pairs() for term, index_term in index.items()}


def test_unigram_postings_match_example(toy_index):
    assert postings_of(toy_index) == {
        "cat": [(1, 2), (3, 1)],
        "dog": [(1, 1), (2, 1)],
        "bird": [(2, 1)],
    }
    assert toy_index["cat"].document_frequency == 2


def test_bigrams_skip_short_documents(toy_docs):
    index = Indexer(2).build_inverted_index(toy_docs.items())
    # doc3 has a single token and contributes nothing
    assert postings_of(index) == {
        "cat dog": [(1, 1)],
        "dog cat": [(1, 1)],
        "dog bird": [(2, 1)],
    }


@pytest.mark.parametrize("tokens,n,expected", [
    (["a", "b", "c"], 1, ["a", "b", "c"]),
    (["a", "b", "c"], 2, ["a b", "b c"]),
    (["a", "b", "c"], 3, ["a b c"]),
    (["a", "b"], 3, []),
    ([], 1, []),
])
def test_ngrams(tokens, n, expected):
    assert ngrams(tokens, n) == expected


def test_ngram_width_must_be_positive():
    with pytest.raises(ValueError):
        Indexer(0)


def test_duplicate_document_rejected():
    indexer = Indexer(1)
    indexer.add_document(1, ["a"])
    with pytest.raises(ValueError):
        indexer.add_document(1, ["b"])


def test_postings_per_term(toy_docs):
    indexer = Indexer(1)
    indexer.build_inverted_index(toy_docs.items())
    assert indexer.index["cat"].as_pairs() == [(1, 2), (3, 1)]
    assert "zebra" not in indexer.index


def test_docid_from_filename():
    assert docid_from_filename("file0042.txt") == 42
    with pytest.raises(DocumentReadError):
        docid_from_filename("notes.txt")


def test_create_index_writes_sorted_table(toy_token_dir, tmp_path):
    out = tmp_path / "index.txt"
    create_index(1, str(toy_token_dir), str(out))
    assert out.read_text(encoding="utf-8") == (
        "bird\t2,1\n"
        "cat\t1,2\t3,1\n"
        "dog\t1,1\t2,1\n"
    )


def test_rebuild_is_byte_identical(toy_token_dir, tmp_path):
    a, b = tmp_path / "a.txt", tmp_path / "b.txt"
    create_index(2, str(toy_token_dir), str(a))
    create_index(2, str(toy_token_dir), str(b))
    assert a.read_bytes() == b.read_bytes()


def test_unreadable_document_aborts_build(toy_token_dir, tmp_path):
    (toy_token_dir / "file0004.txt").write_bytes(b"\xff\xfe\xfa bad")
    out = tmp_path / "index.txt"
    with pytest.raises(DocumentReadError) as exc:
        create_index(1, str(toy_token_dir), str(out))
    assert "file0004.txt" in str(exc.value)
    assert not out.exists()


def test_failed_directory_build_keeps_previous_index(toy_token_dir, tmp_path):
    indexer = Indexer(1)
    indexer.build_inverted_index([(9, ["keep"])])
    missing = tmp_path / "missing"
    with pytest.raises(DocumentReadError):
        indexer.build_from_directory(str(missing))
    assert indexer.index["keep"].as_pairs() == [(9, 1)]

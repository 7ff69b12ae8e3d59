import pytest

from irengine.errors import CorpusStatsError
from irengine.stats import CorpusStatistics, load_doc_lengths, write_doc_lengths


def test_counts_and_average():
    stats = CorpusStatistics({1: 3, 2: 2, 3: 1})
    assert stats.document_count == 3
    assert stats.average_doc_length == pytest.approx(2.0)
    assert stats.doc_length(2) == 2


def test_empty_corpus():
    stats = CorpusStatistics()
    assert stats.document_count == 0
    assert stats.average_doc_length == 0.0


def test_missing_length_is_reported():
    with pytest.raises(CorpusStatsError):
        CorpusStatistics({1: 3}).doc_length(7)


def test_zero_length_is_reported():
    with pytest.raises(CorpusStatsError, match="non-positive"):
        CorpusStatistics({1: 0, 2: 1}).doc_length(1)


def test_write_then_load(tmp_path):
    path = tmp_path / "Corpus-Stats.txt"
    write_doc_lengths({3: 1, 1: 3, 2: 2}, path)
    assert path.read_text(encoding="utf-8") == "1\t3\n2\t2\n3\t1\n"
    assert load_doc_lengths(path).doc_lengths == {1: 3, 2: 2, 3: 1}


def test_load_accepts_any_whitespace(tmp_path):
    path = tmp_path / "stats.txt"
    path.write_text("1 3\n2\t2   3\n1\n", encoding="utf-8")
    assert load_doc_lengths(path).doc_lengths == {1: 3, 2: 2, 3: 1}


@pytest.mark.parametrize("content", ["1\t3\n2\n", "1\tthree\n"])
def test_malformed_stats(tmp_path, content):
    path = tmp_path / "stats.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CorpusStatsError):
        load_doc_lengths(path)


def test_missing_stats_file(tmp_path):
    with pytest.raises(OSError):
        load_doc_lengths(tmp_path / "absent.txt")


def test_load_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "Corpus-Stats.txt"
    path.write_bytes(b"1\t1\n\xff 2\n")
    with pytest.raises(CorpusStatsError, match="Corpus-Stats.txt"):
        load_doc_lengths(str(path))

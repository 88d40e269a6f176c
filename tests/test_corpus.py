"""
Tests for the Corpus Store.
"""

import threading
import time

import pytest

from passwordstrength import corpus as corpus_module
from passwordstrength.config import config
from passwordstrength.corpus import Corpus, CorpusEntry, default_corpus, load, load_file
from passwordstrength.errors import InvalidInputError
from passwordstrength.penalty import score_penalty


class TestLoad:
    """Tests for load()."""

    def test_normalizes_lines(self):
        corpus = load("  Password  \nQWERTY\n")
        assert "password" in corpus
        assert "qwerty" in corpus
        assert "Password" not in corpus

    def test_skips_blank_lines(self):
        corpus = load("\n\npassword\n   \n\t\n123456\n")
        assert len(corpus) == 2

    def test_discards_duplicates(self):
        corpus = load("password\nPASSWORD\n password\n")
        assert len(corpus) == 1
        assert len(corpus.bucket(8)) == 1

    def test_handles_crlf(self):
        corpus = load("password\r\n123456\r\n")
        assert "password" in corpus
        assert "123456" in corpus

    def test_empty_and_missing_text_give_empty_corpus(self):
        assert load("").is_empty
        assert load(None).is_empty
        assert load("\n\n  \n").is_empty

    def test_bytes_are_decoded(self):
        corpus = load("café\n".encode("utf-8"))
        assert "café" in corpus
        assert corpus.bucket(4)[0].length == 4

    def test_undecodable_bytes_rejected(self):
        with pytest.raises(InvalidInputError):
            load(b"password\n\xff\xfe\n")

    def test_entry_length_is_code_point_count(self):
        corpus = load("pässwörd\n🔒🔑🔒\n")
        for entry in corpus:
            assert entry.length == len(entry.text)
        assert [e.text for e in corpus.bucket(8)] == ["pässwörd"]
        assert [e.text for e in corpus.bucket(3)] == ["🔒🔑🔒"]

    def test_entries_record_first_and_last(self):
        entry = load("password\n").bucket(8)[0]
        assert entry.first == "p"
        assert entry.last == "d"


class TestCorpus:
    """Tests for the Corpus index."""

    def test_buckets_keep_first_seen_order(self):
        corpus = load("bbb\naaa\nccc\n")
        assert [e.text for e in corpus.bucket(3)] == ["bbb", "aaa", "ccc"]

    def test_missing_bucket_is_empty(self):
        assert load("abc\n").bucket(10) == ()

    def test_lengths_sorted(self):
        corpus = load("abcdef\na\nabc\n")
        assert corpus.lengths == [1, 3, 6]

    def test_iterates_every_entry(self):
        corpus = load("abcdef\na\nabc\n")
        assert sorted(e.text for e in corpus) == ["a", "abc", "abcdef"]

    def test_buckets_are_immutable(self):
        corpus = load("abc\n")
        assert isinstance(corpus.bucket(3), tuple)

    def test_built_from_entries(self):
        corpus = Corpus([CorpusEntry.from_text("abc"), CorpusEntry.from_text("abc")])
        assert len(corpus) == 1


class TestLoadFile:
    """Tests for load_file()."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "weak.txt"
        path.write_text("password\n123456\n", encoding="utf-8")
        corpus = load_file(path)
        assert len(corpus) == 2

    def test_missing_file_gives_empty_corpus(self, tmp_path):
        corpus = load_file(tmp_path / "does-not-exist.txt")
        assert corpus.is_empty

    def test_undecodable_file_gives_empty_corpus(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_bytes(b"password\n\xff\xfe\n")
        assert load_file(path).is_empty

    def test_bundled_corpus_loads(self, bundled_corpus_path):
        corpus = load_file(bundled_corpus_path)
        assert "password" in corpus
        assert "123456" in corpus
        assert len(corpus) > 50


class TestDefaultCorpus:
    """Tests for the process-wide default corpus."""

    def test_loads_configured_path(self, tmp_path, monkeypatch):
        path = tmp_path / "weak.txt"
        path.write_text("hunter2\n", encoding="utf-8")
        monkeypatch.setattr(config, "CORPUS_PATH", path)
        corpus = default_corpus()
        assert "hunter2" in corpus
        assert len(corpus) == 1

    def test_returns_same_object(self):
        assert default_corpus() is default_corpus()

    def test_built_once_under_concurrent_first_access(self, tmp_path, monkeypatch):
        path = tmp_path / "weak.txt"
        path.write_text("password\n", encoding="utf-8")
        monkeypatch.setattr(config, "CORPUS_PATH", path)

        calls = []
        real_load_file = corpus_module.load_file

        def slow_load_file(p):
            calls.append(p)
            time.sleep(0.05)
            return real_load_file(p)

        monkeypatch.setattr(corpus_module, "load_file", slow_load_file)

        seen = []
        start = threading.Event()

        def worker():
            start.wait()
            seen.append(default_corpus())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        start.set()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(seen) == 8
        assert all(c is seen[0] for c in seen)
        assert "password" in seen[0]

    def test_unavailable_corpus_degrades_to_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "CORPUS_PATH", tmp_path / "missing.txt")
        assert default_corpus().is_empty


class TestLineBreaks:
    """Only "\\n" separates corpus entries."""

    @pytest.mark.parametrize(
        "entry", ["pass\x0cword", "pass\u2028word", "pass\x0bword", "pass\x85word"]
    )
    def test_other_line_separators_stay_in_entry(self, entry):
        corpus = load(f"{entry}\nqwerty\n")
        assert len(corpus) == 2
        assert entry in corpus
        assert "pass" not in corpus
        assert "word" not in corpus

    def test_entry_with_form_feed_is_exact_match(self):
        corpus = load("pass\x0cword\nqwerty\n")
        assert score_penalty("pass\x0cword", corpus).is_exact_match

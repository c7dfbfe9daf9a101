# tests/test_stats.py
from __future__ import annotations

from lexi import stats


def test_unique_letters():
    assert stats.unique_letters("apple") == 4
    assert stats.unique_letters("") == 0


def test_is_pangram():
    assert stats.is_pangram("pleat", "aelpt")
    assert not stats.is_pangram("plea", "aelpt")
    assert stats.is_pangram("anything", "")


def test_letter_counts_once_per_word():
    counts = stats.letter_counts(["apple", "pea"])
    assert list(counts.items()) == [("a", 2), ("e", 2), ("p", 2), ("l", 1)]


def test_letter_counts_empty():
    assert stats.letter_counts([]) == {}


def test_length_summary():
    summary = stats.length_summary(["a", "bb", "ccc"])
    assert summary == {"count": 3, "min": 1, "max": 3, "mean": 2.0, "median": 2.0}


def test_length_summary_accepts_lexicon(abc_lexicon):
    abc_lexicon.with_more_length(1)
    assert stats.length_summary(abc_lexicon)["count"] == 2
    assert len(abc_lexicon) == 2


def test_length_summary_empty():
    assert stats.length_summary([]) == {
        "count": 0,
        "min": None,
        "max": None,
        "mean": None,
        "median": None,
    }

"""
Letter and length statistics over a set of words, e.g. to pick puzzle letters
or to see what a chain of filters left behind.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable

import numpy as np


def unique_letters(w: str) -> int:
    return len(set(w))


def is_pangram(w: str, letters: Iterable[str]) -> bool:
    """True if the word uses every one of the given letters."""
    return set(letters) <= set(w)


def letter_counts(words: Iterable[str]) -> dict[str, int]:
    """
    How many words contain each letter (once per word, however often it
    repeats). Most common first, ties alphabetical.
    """
    counts: Counter[str] = Counter()
    for w in words:
        counts.update(set(w))
    return dict(sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])))


def length_summary(words: Iterable[str]) -> dict[str, Any]:
    lengths = np.fromiter((len(w) for w in words), dtype=np.int64)
    if lengths.size == 0:
        return {"count": 0, "min": None, "max": None, "mean": None, "median": None}
    return {
        "count": int(lengths.size),
        "min": int(lengths.min()),
        "max": int(lengths.max()),
        "mean": float(np.mean(lengths)),
        "median": float(np.median(lengths)),
    }

"""
Spelling Bee: words of at least min_length letters, using only the puzzle
letters, always including the center letter.
Scoring: 1 point for a minimum-length word, otherwise 1 per letter; +7 for a
pangram (uses every puzzle letter).
"""
from __future__ import annotations

from typing import NamedTuple

from .stats import is_pangram
from .veclexicon import VecLexicon

MIN_LENGTH = 4
PANGRAM_BONUS = 7


class BeeWord(NamedTuple):
    word: str
    score: int
    is_pangram: bool


def score_word(word: str, letters: str, min_length: int = MIN_LENGTH) -> BeeWord:
    pangram = is_pangram(word, letters)
    score = 1 if len(word) <= min_length else len(word)
    if pangram:
        score += PANGRAM_BONUS
    return BeeWord(word, score, pangram)


def solve(lexicon: VecLexicon, letters: str, center: str, *, min_length: int = MIN_LENGTH) -> list[BeeWord]:
    """
    Narrow the lexicon down to the puzzle's answers and score them, best first.
    The lexicon is filtered in place, then drained.
    """
    center = center.lower()
    puzzle_letters = "".join(sorted(set(letters.lower()) | {center}))

    lexicon.only_using_letters(puzzle_letters)
    lexicon.with_letter(center)
    lexicon.with_more_length(min_length - 1)

    results = {w: score_word(w, puzzle_letters, min_length) for w in lexicon.drain()}
    return sorted(results.values(), key=lambda b: (-b.score, b.word))

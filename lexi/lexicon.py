"""
Lexicon: a set of words that can be narrowed down in place by letter and
length constraints.

Implementations provide the primitive filters; the multi-letter filters are
built on top of them here, so a new storage strategy only has to supply the
primitives.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class Lexicon(ABC):
    """
    A queryable set of words. Every filter keeps a subset of the current
    words and never reorders the survivors.

    Length filters measure words in the implementation's own string-length
    unit, which may not match the visual length of some Unicode words.
    """

    @abstractmethod
    def contains(self, word: str) -> bool:
        """True if the lexicon holds exactly this word."""

    @abstractmethod
    def with_letter(self, letter: str) -> None:
        """Keep only words that contain the given letter."""

    @abstractmethod
    def without_letter(self, letter: str) -> None:
        """Remove any word that contains the given letter."""

    @abstractmethod
    def only_using_letters(self, letters: Iterable[str]) -> None:
        """
        Keep only words formed solely from the given letters.

        Unlike with_letters(), a word need not use every letter; it just can't
        use any letter from outside the collection.
        """

    @abstractmethod
    def with_exact_length(self, length: int) -> None:
        """Keep only words of exactly the given length."""

    @abstractmethod
    def with_more_length(self, length: int) -> None:
        """Keep only words longer than the given length."""

    @abstractmethod
    def with_less_length(self, length: int) -> None:
        """Keep only words shorter than the given length."""

    def with_letters(self, letters: Iterable[str]) -> None:
        """
        Keep only words that contain all of the given letters.
        Chained with_letter() calls, in the order the letters are given.
        """
        for letter in letters:
            self.with_letter(letter)

    def without_letters(self, letters: Iterable[str]) -> None:
        """Remove every word that contains any of the given letters."""
        for letter in letters:
            self.without_letter(letter)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

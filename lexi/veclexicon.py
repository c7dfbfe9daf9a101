"""
Lexicon stored as a plain list of lowercase words.
Every operation is a single linear pass over the list; there is no index.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from .lexicon import Lexicon
from .wordlist import Flag, WordList

logger = logging.getLogger(__name__)


class VecLexicon(Lexicon):
    """
    Words are lowercased on the way in and kept in insertion order, duplicates
    included. Queries are not lowercased: contains("Apple") is always False.

    Lengths are str lengths (code points), so a letter written with a combining
    mark counts as two.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: list[str] = [w.lower() for w in words]

    @classmethod
    def from_wordlist(cls, wordlist: WordList, flags: Iterable[Flag] | None = None) -> VecLexicon:
        """Build from a parsed WordList. Consumes the word list."""
        if flags is None:
            return cls(wordlist.default_selection())
        return cls(wordlist.select(flags))

    def _retain(self, keep: Callable[[str], bool], op: str) -> None:
        before = len(self._words)
        self._words = [w for w in self._words if keep(w)]
        logger.debug("%s: %d -> %d words", op, before, len(self._words))

    def contains(self, word: str) -> bool:
        return word in self._words

    def with_letter(self, letter: str) -> None:
        self._retain(lambda w: letter in w, f"with_letter({letter!r})")

    def without_letter(self, letter: str) -> None:
        self._retain(lambda w: letter not in w, f"without_letter({letter!r})")

    def only_using_letters(self, letters: Iterable[str]) -> None:
        allowed = set(letters)
        self._retain(
            lambda w: all(c in allowed for c in w),
            f"only_using_letters({''.join(sorted(allowed))!r})",
        )

    def with_exact_length(self, length: int) -> None:
        self._retain(lambda w: len(w) == length, f"with_exact_length({length})")

    def with_more_length(self, length: int) -> None:
        self._retain(lambda w: len(w) > length, f"with_more_length({length})")

    def with_less_length(self, length: int) -> None:
        self._retain(lambda w: len(w) < length, f"with_less_length({length})")

    # --- Conversion / iteration ---

    def to_list(self) -> list[str]:
        return list(self._words)

    def copy(self) -> VecLexicon:
        clone = VecLexicon()
        clone._words = list(self._words)
        return clone

    def snapshot(self) -> Iterator[str]:
        """Iterate over a copy of the current words. The lexicon is untouched."""
        return iter(tuple(self._words))

    def drain(self) -> Iterator[str]:
        """
        Hand the words over to the caller. The lexicon is empty as soon as this
        is called; the returned iterator is single-pass.
        """
        words, self._words = self._words, []
        return iter(words)

    def __iter__(self) -> Iterator[str]:
        return self.snapshot()

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecLexicon):
            return NotImplemented
        return self._words == other._words

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        preview = ", ".join(self._words[:5])
        more = ", ..." if len(self._words) > 5 else ""
        return f"VecLexicon([{preview}{more}], n={len(self._words)})"

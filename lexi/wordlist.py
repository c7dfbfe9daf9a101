"""
Parse the annotated word list into buckets, then merge the buckets back into a
flat list of words according to a set of flags.

The main list is the 2of12inf list from 12dicts
(http://wordlist.aspell.net/12dicts-readme/#2of12inf): one word per line,
no capitalizations or abbreviations, but swears included. Two trailing
markers carry extra information:
  - "!" marks a neologism (added around 2016). Most of these, like "anime",
    "barista" or "blogger", are standard by now, so they are included by
    default.
  - "%" marks the plural of a noun that usually has none, like "acnes" or
    "breads". These can often be argued as correct but are rarely wanted,
    so they are excluded by default.
Swears are not marked in the main list; they come from a separate denylist
(one word per line, no markers) and are excluded by default.
"""
from __future__ import annotations

import logging
from contextlib import ExitStack
from enum import Enum
from pathlib import Path
from typing import IO, Iterable, Iterator

logger = logging.getLogger(__name__)

NEOLOGISM_ANNOT = "!"
UNCOUNTABLE_PLURAL_ANNOT = "%"


class ParseError(Exception):
    """A word list could not be built from its sources."""


class SourceUnavailable(ParseError):
    """A source could not be opened or read."""


class DecodeFailure(ParseError):
    """A source line is not valid UTF-8."""


class WordListConsumed(RuntimeError):
    """select() was called on a WordList that was already selected from."""


class Flag(Enum):
    """Optional buckets that can be merged into the normal words."""

    # Plurals of nouns that typically don't have them, like "acrimoniousnesses".
    UNCOUNTABLE_PLURALS = "uncountable_plurals"
    # Profanities, as listed in the denylist.
    SWEARS = "swears"
    # Newer words. Recommended: many are very standard now.
    NEOLOGISMS = "neologisms"


DEFAULT_FLAGS = frozenset({Flag.NEOLOGISMS})


class WordList:
    """
    Every line of the main list, in exactly one of four buckets.
    Built once by parse(); select() hands the words over and can only be
    called once.
    """

    def __init__(
        self,
        normal_words: list[str],
        uncountable_plurals: list[str],
        swears: list[str],
        neologisms: list[str],
    ) -> None:
        self._buckets: dict[Flag | None, list[str]] | None = {
            None: normal_words,
            Flag.UNCOUNTABLE_PLURALS: uncountable_plurals,
            Flag.SWEARS: swears,
            Flag.NEOLOGISMS: neologisms,
        }

    def _bucket(self, key: Flag | None) -> list[str]:
        if self._buckets is None:
            raise WordListConsumed("word list was already consumed by select()")
        return self._buckets[key]

    @property
    def normal_words(self) -> tuple[str, ...]:
        return tuple(self._bucket(None))

    @property
    def uncountable_plurals(self) -> tuple[str, ...]:
        return tuple(self._bucket(Flag.UNCOUNTABLE_PLURALS))

    @property
    def swears(self) -> tuple[str, ...]:
        return tuple(self._bucket(Flag.SWEARS))

    @property
    def neologisms(self) -> tuple[str, ...]:
        return tuple(self._bucket(Flag.NEOLOGISMS))

    @property
    def consumed(self) -> bool:
        return self._buckets is None

    def counts(self) -> dict[str, int]:
        """Words per bucket, keyed "normal" or by flag value."""
        return {
            "normal": len(self._bucket(None)),
            **{flag.value: len(self._bucket(flag)) for flag in Flag},
        }

    def __len__(self) -> int:
        return sum(self.counts().values())

    def select(self, flags: Iterable[Flag]) -> list[str]:
        """
        Normal words, followed by each flagged bucket (uncountable plurals,
        swears, neologisms). No deduplication; no order guarantee beyond
        normal words first.
        """
        wanted = set(flags)
        out = self._bucket(None)
        for flag in Flag:
            if flag in wanted:
                out.extend(self._bucket(flag))
        self._buckets = None
        return out

    def default_selection(self) -> list[str]:
        """Neologisms in; swears and uncountable plurals out."""
        return self.select(DEFAULT_FLAGS)

    def __repr__(self) -> str:
        if self._buckets is None:
            return "WordList(consumed)"
        return f"WordList({self.counts()})"


def _source_name(source: object, default: str) -> str:
    return str(getattr(source, "name", default))


def _read_lines(source: Iterable[str | bytes], name: str) -> Iterator[str]:
    """Yield non-blank lines with their terminators stripped."""
    it = iter(source)
    lineno = 0
    while True:
        lineno += 1
        try:
            raw = next(it)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise DecodeFailure(f"{name}: invalid UTF-8 near line {lineno}") from e
        except OSError as e:
            raise SourceUnavailable(f"{name}: read failed: {e}") from e
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeFailure(f"{name}: invalid UTF-8 on line {lineno}") from e
        line = raw.rstrip("\r\n")
        if line:
            yield line


def _strip_annotation(line: str) -> tuple[str, Flag | None]:
    if line.endswith(NEOLOGISM_ANNOT):
        return line[: -len(NEOLOGISM_ANNOT)], Flag.NEOLOGISMS
    if line.endswith(UNCOUNTABLE_PLURAL_ANNOT):
        return line[: -len(UNCOUNTABLE_PLURAL_ANNOT)], Flag.UNCOUNTABLE_PLURALS
    return line, None


def parse(
    main_source: Iterable[str | bytes],
    denylist_source: Iterable[str | bytes],
) -> WordList:
    """
    Classify every line of main_source. Sources are any iterables of lines:
    open files (text or binary), lists of strings, etc.

    The denylist is read fully first. A main line that matches it once its
    marker is stripped is a swear, whatever marker it had.
    """
    denylist = set(_read_lines(denylist_source, _source_name(denylist_source, "<denylist>")))

    normal_words: list[str] = []
    uncountable_plurals: list[str] = []
    swears: list[str] = []
    neologisms: list[str] = []

    for line in _read_lines(main_source, _source_name(main_source, "<main>")):
        word, annot = _strip_annotation(line)
        if not word:
            continue
        if word in denylist:
            swears.append(word)
        elif annot is Flag.NEOLOGISMS:
            neologisms.append(word)
        elif annot is Flag.UNCOUNTABLE_PLURALS:
            uncountable_plurals.append(word)
        else:
            normal_words.append(word)

    wordlist = WordList(normal_words, uncountable_plurals, swears, neologisms)
    logger.info("Parsed word list: %s", wordlist.counts())
    return wordlist


def _open_source(path: str | Path) -> IO[bytes]:
    # Binary, so each line is decoded on its own and errors carry the exact line
    try:
        return open(path, "rb")
    except OSError as e:
        raise SourceUnavailable(f"Could not open word list {path}: {e}") from e


def parse_list(main_path: str | Path, denylist_path: str | Path) -> WordList:
    """Parse the two files. Both are opened before either is read."""
    logger.debug("Opening word list %s (denylist %s)", main_path, denylist_path)
    with ExitStack() as stack:
        main_file = stack.enter_context(_open_source(main_path))
        denylist_file = stack.enter_context(_open_source(denylist_path))
        return parse(main_file, denylist_file)


def parse_strings(main_text: str, denylist_text: str) -> WordList:
    """Same as parse_list, for in-memory text."""
    return parse(main_text.split("\n"), denylist_text.split("\n"))

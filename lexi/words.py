"""
Locate and load the default word list.
Uses data/2of12inf.txt and data/swears.txt, or the LEXI_WORDLIST / LEXI_SWEARS
paths (from the environment or a .env file at the repo root).
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv

from .veclexicon import VecLexicon
from .wordlist import Flag, SourceUnavailable, WordList, parse_list

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
DEFAULT_WORD_LIST = DATA_DIR / "2of12inf.txt"
DEFAULT_SWEARS_LIST = DATA_DIR / "swears.txt"

# Real environment wins over .env
load_dotenv(ROOT_DIR / ".env", override=False)


def _resolve(env_var: str, default: Path) -> Path:
    p = os.environ.get(env_var)
    path = Path(p) if p else default
    if not path.exists():
        raise SourceUnavailable(
            f"No word list found at {path}. Set {env_var} to a path or add the file under {DATA_DIR}."
        )
    logger.debug("%s -> %s", env_var, path)
    return path


def get_word_list_path() -> Path:
    return _resolve("LEXI_WORDLIST", DEFAULT_WORD_LIST)


def get_swears_path() -> Path:
    return _resolve("LEXI_SWEARS", DEFAULT_SWEARS_LIST)


def load_wordlist() -> WordList:
    return parse_list(get_word_list_path(), get_swears_path())


def load_lexicon(flags: Iterable[Flag] | None = None) -> VecLexicon:
    """
    A fresh lexicon over the configured word list. With no flags: neologisms
    kept, swears and uncountable plurals removed.
    """
    return VecLexicon.from_wordlist(load_wordlist(), flags)

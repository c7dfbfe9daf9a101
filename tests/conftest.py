# tests/conftest.py
import pytest

from lexi.veclexicon import VecLexicon

MAIN_LIST = """apple
acnes%
blogger!
fuck!
pea
apples
leap
breads%
anime!
shit
"""

SWEARS_LIST = """fuck
shit
damn
"""


@pytest.fixture
def word_files(tmp_path):
    """Writes a small annotated main list and a denylist; returns both paths."""
    main = tmp_path / "2of12inf.txt"
    swears = tmp_path / "swears.txt"
    main.write_text(MAIN_LIST, encoding="utf-8")
    swears.write_text(SWEARS_LIST, encoding="utf-8")
    return main, swears


@pytest.fixture
def abc_lexicon():
    return VecLexicon(["a", "bb", "ccc"])

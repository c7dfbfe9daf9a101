# tests/test_bee.py
from __future__ import annotations

from lexi.bee import BeeWord, score_word, solve
from lexi.veclexicon import VecLexicon

WORDS = ["doughy", "dough", "bough", "good", "hobby", "bog", "goody", "body", "apple", "hydro", "dough"]


def test_solve_filters_scores_and_sorts():
    lex = VecLexicon(WORDS)
    results = solve(lex, "dughby", "o")
    assert [r.word for r in results] == ["doughy", "bough", "dough", "goody", "hobby", "body", "good"]
    assert results[0] == BeeWord("doughy", 6, False)
    assert results[-1].score == 1


def test_solve_drains_lexicon():
    lex = VecLexicon(WORDS)
    solve(lex, "dughby", "o")
    assert len(lex) == 0


def test_solve_is_case_insensitive_on_letters():
    assert solve(VecLexicon(WORDS), "DUGHBY", "O") == solve(VecLexicon(WORDS), "dughby", "o")


def test_solve_requires_center():
    results = solve(VecLexicon(WORDS), "doughb", "y")
    assert {r.word for r in results} == {"doughy", "hobby", "goody", "body"}


def test_solve_min_length():
    results = solve(VecLexicon(WORDS), "dughby", "o", min_length=3)
    assert "bog" in {r.word for r in results}


def test_score_word_pangram():
    assert score_word("doughby", "bdghouy") == BeeWord("doughby", 14, True)
    assert score_word("good", "bdghouy") == BeeWord("good", 1, False)

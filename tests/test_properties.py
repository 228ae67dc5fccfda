"""Whole-dictionary properties of the filter, using the embedded word list."""
import random

import pytest
from wordsieve.datasets import load_dictionary
from wordsieve.engine import Guess, LetterState, Word, filter_candidates, score

DICT = load_dictionary()


def _history_for(secret, guesses):
    secret = Word(secret)
    return [Guess(Word(g), score(Word(g), secret)) for g in guesses]


HISTORIES = [
    _history_for("paint", ["crane", "doubt"]),
    _history_for("steel", ["arise", "clout", "sheet"]),
    _history_for("fuzzy", ["happy", "mummy"]),
    _history_for("level", ["belle", "eight"]),
]


def test_empty_history_returns_whole_dictionary():
    assert set(filter_candidates(DICT, [])) == set(DICT)


@pytest.mark.parametrize("history", HISTORIES)
def test_filter_is_idempotent(history):
    once = filter_candidates(DICT, history)
    assert filter_candidates(DICT, history) == once
    assert filter_candidates(once, history) == once


@pytest.mark.parametrize("history", HISTORIES)
def test_filter_is_monotonic(history):
    prev = set(DICT)
    for k in range(1, len(history) + 1):
        cur = set(filter_candidates(DICT, history[:k]))
        assert cur <= prev
        prev = cur


@pytest.mark.parametrize("history", HISTORIES)
def test_secret_always_survives(history):
    # every history above was scored against a secret in the dictionary
    secret = {"crane": "paint", "arise": "steel", "happy": "fuzzy", "belle": "level"}[str(history[0].word)]
    assert Word(secret) in filter_candidates(DICT, history)


def test_all_correct_guess_keeps_only_itself():
    rng = random.Random(7)
    for w in rng.sample(list(DICT), 10):
        g = Guess(w, (LetterState.CORRECT,) * 5)
        assert filter_candidates(DICT, [g]) == [w]


def test_order_follows_dictionary():
    history = _history_for("paint", ["crane"])
    out = filter_candidates(DICT, history)
    idx = [DICT.index(w) for w in out]
    assert idx == sorted(idx)


@pytest.mark.parametrize("history", HISTORIES)
def test_process_pool_filter_matches_sequential(history):
    assert len(DICT) >= 2048
    assert filter_candidates(DICT, history, workers=2) == filter_candidates(DICT, history)

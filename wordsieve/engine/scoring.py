"""
Wordle-style scoring (feedback) for a single (guess, candidate) pair.

Conventions (as pattern symbols):
  - 'G'  : correct   = right letter in the right position
  - 'Y'  : misplaced = letter occurs in the candidate, elsewhere
  - '-'  : absent    = letter not present, or present fewer times than guessed

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks exact positions CORRECT and consumes one occurrence of
     that letter from a multiset of the candidate's letters.
  2) Second pass walks the remaining positions left to right and marks a
     position MISPLACED only while the multiset still holds the letter,
     consuming one occurrence each time; everything else is ABSENT.

Exact matches therefore win over misplaced ones, and earlier positions win
over later ones when a letter is guessed more often than it occurs.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Tuple

from .model import LetterState, Word

Feedback = Tuple[LetterState, ...]

_C = LetterState.CORRECT
_M = LetterState.MISPLACED
_A = LetterState.ABSENT


def score(guess: Word, candidate: Word) -> Feedback:
    """
    Compute the feedback `guess` would receive if `candidate` were the secret.

    Examples (as patterns):
      score(Word("belle"), Word("level")) -> "-GYYY"
      score(Word("happy"), Word("paper")) -> "-GGY-"
    """
    states = [_A] * len(guess)

    # Pass 1: exact positions, consuming from the candidate's letter counts.
    remaining = Counter(candidate)
    for i, (g, c) in enumerate(zip(guess, candidate)):
        if g == c:
            states[i] = _C
            remaining[g] -= 1

    # Pass 2: misplaced only while an unconsumed occurrence is left.
    for i, g in enumerate(guess):
        if states[i] is _C:
            continue
        if remaining[g] > 0:
            states[i] = _M
            remaining[g] -= 1

    return tuple(states)


def format_pattern(states: Iterable[LetterState]) -> str:
    return "".join(st.symbol for st in states)


def parse_pattern(pattern: str) -> Feedback:
    """
    "-GY.." -> (ABSENT, CORRECT, MISPLACED, ABSENT, ABSENT)

    Case-insensitive; '.', '_', 'b' and 'x' are accepted for absent.
    """
    return tuple(LetterState.from_symbol(ch) for ch in pattern)


def score_pattern(guess: str, answer: str) -> str:
    """String-in, string-out convenience used by the CLI and replay reports."""
    return format_pattern(score(Word(guess), Word(answer)))

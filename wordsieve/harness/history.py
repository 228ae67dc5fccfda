"""
Caller-owned guess history.

The engine holds no session state; whoever drives a session (a UI, the
CLI, the replay harness) keeps one of these and hands `snapshot()` to the
filter. Entries are appended in play order and only the most recent one
can be taken back.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Tuple

from wordsieve.engine.model import Guess
from wordsieve.engine.validation import parse_guess

log = logging.getLogger(__name__)


class GuessHistory:
    def __init__(self, guesses=()):
        self._guesses: List[Guess] = []
        for g in guesses:
            self.append(g)

    def append(self, guess: Guess) -> None:
        if not isinstance(guess, Guess):
            raise TypeError(f"expected a Guess, got {type(guess).__name__}; use add() for raw input")
        self._guesses.append(guess)
        log.debug("guess %d: %s", len(self._guesses), guess)

    def add(self, raw: Any) -> Guess:
        """Validate untyped input through the boundary, then append it."""
        guess = parse_guess(raw)
        self.append(guess)
        return guess

    def pop(self) -> Guess:
        """Remove and return the most recent guess (IndexError when empty)."""
        if not self._guesses:
            raise IndexError("pop from empty guess history")
        return self._guesses.pop()

    def clear(self) -> None:
        self._guesses.clear()

    def snapshot(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    def __len__(self) -> int:
        return len(self._guesses)

    def __iter__(self) -> Iterator[Guess]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"GuessHistory({[str(g) for g in self._guesses]})"

"""
Input boundary: untyped guess data -> validated Guess values.

This is the only place untrusted input is accepted. Three shapes are
understood:

  1) a list of letter slots, as the front-end sends them
       [{"character": "h", "state": "absent"}, ...]
  2) a mapping wrapping that list
       {"letters": [...]}
  3) a compact (word, pattern) pair, or the string "word:pattern"
       ("happy", "-GG--")   /   "happy:-GG--"

Rejections (all recoverable, the caller should re-prompt):
  - InvalidLength           not exactly WORD_LENGTH slots / letters
  - InvalidCharacter        empty, multi-character or non-letter slot
  - UnknownStateNotAllowed  a slot still marked "unknown"
  - InvalidState            any other unrecognised state label

Labels are matched exactly; nothing silently falls back to "unknown".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

from .errors import (
    InvalidCharacter,
    InvalidLength,
    InvalidState,
    UnknownStateNotAllowed,
    WordsieveError,
)
from .model import WORD_LENGTH, Guess, Letter, LetterState, Word, _is_letter


@dataclass(frozen=True)
class ValidationResult:
    """Tagged outcome of validate_guess: exactly one of guess / error is set."""
    guess: Optional[Guess] = None
    error: Optional[WordsieveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _check_character(ch: Any, pos: int) -> str:
    if not isinstance(ch, str) or not _is_letter(ch):
        raise InvalidCharacter(f"position {pos}: expected a single letter, got {ch!r}")
    return ch.lower()


def _final_state(state: Any, pos: int) -> LetterState:
    if isinstance(state, LetterState):
        st = state
    elif isinstance(state, str):
        try:
            st = LetterState.from_label(state)
        except InvalidState:
            raise InvalidState(f"position {pos}: unrecognised state {state!r}") from None
    else:
        raise InvalidState(f"position {pos}: unrecognised state {state!r}")
    if not st.is_final:
        raise UnknownStateNotAllowed(f"position {pos}: state must be correct, misplaced or absent")
    return st


def _from_slots(slots: Any) -> Guess:
    if isinstance(slots, (str, bytes)) or not isinstance(slots, Iterable):
        raise InvalidLength(f"expected a list of {WORD_LENGTH} letters, got {type(slots).__name__}")
    slots = list(slots)
    if len(slots) != WORD_LENGTH:
        raise InvalidLength(f"word must have exactly {WORD_LENGTH} letters; got {len(slots)}")

    chars, states = [], []
    for pos, slot in enumerate(slots, start=1):
        if isinstance(slot, Letter):
            ch, st = slot.character, slot.state
        elif isinstance(slot, Mapping):
            ch, st = slot.get("character"), slot.get("state")
        else:
            raise InvalidCharacter(f"position {pos}: expected a letter entry, got {slot!r}")
        chars.append(_check_character(ch, pos))
        states.append(_final_state(st, pos))

    return Guess(Word("".join(chars)), tuple(states))


def _from_pair(word: str, pattern: str) -> Guess:
    if len(word) != WORD_LENGTH:
        raise InvalidLength(f"word must have exactly {WORD_LENGTH} letters; got {len(word)} ({word!r})")
    if len(pattern) != len(word):
        raise InvalidLength(f"pattern {pattern!r} does not cover the {WORD_LENGTH} letters of {word!r}")

    chars = [_check_character(ch, pos) for pos, ch in enumerate(word, start=1)]
    states = []
    for pos, sym in enumerate(pattern, start=1):
        try:
            st = LetterState.from_symbol(sym)
        except InvalidState:
            raise InvalidState(f"position {pos}: unrecognised pattern symbol {sym!r}") from None
        states.append(_final_state(st, pos))
    return Guess(Word("".join(chars)), tuple(states))


def parse_guess(raw: Any) -> Guess:
    """
    Validate and convert one guess in any accepted shape.

    Raises one of the boundary errors listed in the module docstring.
    """
    if isinstance(raw, Guess):
        return raw
    if isinstance(raw, str):
        word, sep, pattern = raw.partition(":")
        if not sep:
            raise InvalidLength(f"expected 'word:pattern', got {raw!r}")
        return _from_pair(word.strip(), pattern.strip())
    if isinstance(raw, Mapping):
        if "letters" not in raw:
            raise InvalidLength("guess has no 'letters' entry")
        return _from_slots(raw["letters"])
    if isinstance(raw, (tuple, list)) and len(raw) == 2 and all(isinstance(x, str) for x in raw):
        return _from_pair(raw[0], raw[1])
    return _from_slots(raw)


def validate_guess(raw: Any) -> ValidationResult:
    """
    Non-raising form of parse_guess.

    Returns ValidationResult(guess=...) on success, ValidationResult(error=...)
    otherwise; the error is one of the boundary error kinds.
    """
    try:
        return ValidationResult(guess=parse_guess(raw))
    except WordsieveError as e:
        return ValidationResult(error=e)


def parse_history(raws: Iterable[Any]) -> Tuple[Guess, ...]:
    """
    Validate every guess of a history; the first failure is re-raised with its
    1-based index in the message and the same error kind.
    """
    out = []
    for idx, raw in enumerate(raws, start=1):
        try:
            out.append(parse_guess(raw))
        except WordsieveError as e:
            raise type(e)(f"guess {idx}: {e}") from e
    return tuple(out)

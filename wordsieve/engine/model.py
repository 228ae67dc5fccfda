"""
Value types for letters, words and finalized guesses.

Conventions:
  - words are exactly WORD_LENGTH lowercase ASCII letters
  - a letter's knowledge state is one of LetterState; UNKNOWN only exists
    while the player is still marking a row and never appears in a Guess
  - every type here is immutable and hashable, so dictionaries and guess
    histories can be shared freely between threads

Pattern symbols (one per position) mirror the classic tile colours:
  'G' correct, 'Y' misplaced, '-' absent, '?' unknown
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import ascii_lowercase
from typing import Iterable, Iterator, Tuple

from .errors import InvalidLetter, InvalidState, InvalidWord, UnknownStateNotAllowed

WORD_LENGTH = 5
ALPHABET = frozenset(ascii_lowercase)


class LetterState(Enum):
    UNKNOWN = "unknown"
    CORRECT = "correct"
    MISPLACED = "misplaced"
    ABSENT = "absent"

    @property
    def symbol(self) -> str:
        return _STATE_SYMBOLS[self]

    @property
    def is_final(self) -> bool:
        return self is not LetterState.UNKNOWN

    @classmethod
    def from_label(cls, label: str) -> "LetterState":
        """
        Map an exact lowercase label ("correct", ...) to a state.

        Unrecognised labels raise InvalidState instead of defaulting to
        UNKNOWN.
        """
        try:
            return cls(label)
        except ValueError:
            raise InvalidState(f"unrecognised letter state: {label!r}") from None

    @classmethod
    def from_symbol(cls, symbol: str) -> "LetterState":
        try:
            return _SYMBOL_STATES[symbol.upper()]
        except (KeyError, AttributeError):
            raise InvalidState(f"unrecognised pattern symbol: {symbol!r}") from None


_STATE_SYMBOLS = {
    LetterState.CORRECT: "G",
    LetterState.MISPLACED: "Y",
    LetterState.ABSENT: "-",
    LetterState.UNKNOWN: "?",
}

# Input aliases: green/yellow/grey spellings people type on the command line.
_SYMBOL_STATES = {
    "G": LetterState.CORRECT,
    "Y": LetterState.MISPLACED,
    "-": LetterState.ABSENT,
    ".": LetterState.ABSENT,
    "_": LetterState.ABSENT,
    "B": LetterState.ABSENT,
    "X": LetterState.ABSENT,
    "?": LetterState.UNKNOWN,
}


def _is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch.lower() in ALPHABET


@dataclass(frozen=True)
class Letter:
    character: str
    state: LetterState = LetterState.UNKNOWN

    def __post_init__(self):
        if not isinstance(self.character, str) or not _is_letter(self.character):
            raise InvalidLetter(f"expected a single letter, got {self.character!r}")
        if not isinstance(self.state, LetterState):
            raise InvalidState(f"expected a LetterState, got {self.state!r}")
        object.__setattr__(self, "character", self.character.lower())

    @classmethod
    def parse(cls, character: str, state: str = "unknown") -> "Letter":
        return cls(character, LetterState.from_label(state))


@dataclass(frozen=True, order=True)
class Word:
    """
    A WORD_LENGTH-letter word, lowercased on construction.

    Behaves like a read-only sequence of characters and compares/sorts by
    its text, so it can be used directly as a dictionary entry.
    """
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise InvalidWord(f"expected a string, got {type(self.text).__name__}")
        if len(self.text) != WORD_LENGTH:
            raise InvalidWord(
                f"word must be exactly {WORD_LENGTH} letters; got {len(self.text)} ({self.text!r})"
            )
        if not all(_is_letter(ch) for ch in self.text):
            raise InvalidWord(f"word must contain only letters a-z: {self.text!r}")
        object.__setattr__(self, "text", self.text.lower())

    @classmethod
    def parse(cls, text: str) -> "Word":
        return cls(text)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __getitem__(self, i):
        return self.text[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self.text)

    def __contains__(self, ch) -> bool:
        return ch in self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Guess:
    """
    One finalized row of feedback: a word and one final state per position.
    """
    word: Word
    states: Tuple[LetterState, ...]

    def __post_init__(self):
        if not isinstance(self.word, Word):
            object.__setattr__(self, "word", Word(self.word))
        states = tuple(self.states)
        if len(states) != WORD_LENGTH:
            raise InvalidWord(f"guess needs {WORD_LENGTH} states; got {len(states)}")
        for i, st in enumerate(states):
            if not isinstance(st, LetterState):
                raise InvalidState(f"position {i + 1}: expected a LetterState, got {st!r}")
            if not st.is_final:
                raise UnknownStateNotAllowed(f"position {i + 1} has no feedback yet")
        object.__setattr__(self, "states", states)

    @classmethod
    def from_pattern(cls, word: str, pattern: str) -> "Guess":
        """Guess.from_pattern("happy", "-GGY-")"""
        return cls(Word(word), tuple(LetterState.from_symbol(ch) for ch in pattern))

    @classmethod
    def from_letters(cls, letters: Iterable[Letter]) -> "Guess":
        letters = list(letters)
        return cls(Word("".join(l.character for l in letters)), tuple(l.state for l in letters))

    @property
    def letters(self) -> Tuple[Letter, ...]:
        return tuple(Letter(ch, st) for ch, st in zip(self.word, self.states))

    @property
    def pattern(self) -> str:
        return "".join(st.symbol for st in self.states)

    def __str__(self) -> str:
        return f"{self.word}:{self.pattern}"

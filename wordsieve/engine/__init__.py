from typing import Any, Iterable, List, Optional

from .errors import (
    DictionaryUnavailable,
    InvalidCharacter,
    InvalidLength,
    InvalidLetter,
    InvalidState,
    InvalidWord,
    UnknownStateNotAllowed,
    WordsieveError,
)
from .model import WORD_LENGTH, Guess, Letter, LetterState, Word
from .scoring import format_pattern, parse_pattern, score, score_pattern
from .constraints import filter_candidates, filter_words, matches
from .validation import ValidationResult, parse_guess, parse_history, validate_guess


def filter_word_list(
        dictionary: Iterable[Word],
        raw_guesses: Iterable[Any],
        *,
        workers: Optional[int] = None,
) -> List[str]:
    """
    Entry point for callers holding untyped guess data.

    Validates every guess (boundary errors propagate), then returns the
    surviving dictionary words as strings, in dictionary order.
    """
    history = parse_history(raw_guesses)
    return [str(w) for w in filter_candidates(dictionary, history, workers=workers)]


__all__ = [
    "WORD_LENGTH", "Guess", "Letter", "LetterState", "Word",
    "score", "score_pattern", "format_pattern", "parse_pattern",
    "matches", "filter_candidates", "filter_words", "filter_word_list",
    "ValidationResult", "parse_guess", "parse_history", "validate_guess",
    "WordsieveError", "InvalidWord", "InvalidLetter", "InvalidState",
    "InvalidLength", "InvalidCharacter", "UnknownStateNotAllowed",
    "DictionaryUnavailable",
]

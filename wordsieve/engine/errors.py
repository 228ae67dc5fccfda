"""
Error kinds raised by the model constructors, the input boundary and the
dictionary loader.

Hierarchy:
  WordsieveError (ValueError)
    InvalidWord
      InvalidLength            boundary: wrong number of letters
    InvalidLetter
      InvalidCharacter         boundary: empty / multi-char / non-letter
    InvalidState
      UnknownStateNotAllowed   boundary: "unknown" on a finalized guess
    DictionaryUnavailable      startup only, fatal

Everything except DictionaryUnavailable is recoverable: the caller should
re-prompt for corrected input. The matcher and filter never raise.
"""

from __future__ import annotations


class WordsieveError(ValueError):
    """Base class for all wordsieve errors."""


class InvalidWord(WordsieveError):
    """Wrong length or non-alphabetic content."""


class InvalidLetter(WordsieveError):
    """A letter slot that is not exactly one alphabetic character."""


class InvalidState(WordsieveError):
    """Unrecognised or disallowed state label."""


class InvalidLength(InvalidWord):
    pass


class InvalidCharacter(InvalidLetter):
    pass


class UnknownStateNotAllowed(InvalidState):
    pass


class DictionaryUnavailable(WordsieveError, RuntimeError):
    """The word list could not be loaded; nothing can be filtered without it."""

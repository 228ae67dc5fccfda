"""
Candidate filtering given a guess history.

Given:
  - a dictionary of Words
  - a history of finalized Guesses (word + per-position feedback)

Return:
  - the dictionary entries that would have produced exactly the recorded
    feedback for EVERY guess, in dictionary order.

A candidate matches a guess iff re-scoring the guess word against the
candidate reproduces the declared states position by position. Containment
checks are not enough once letters repeat; see scoring.score.

Inputs are assumed validated (see validation.py); nothing here raises.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidWord
from .model import Guess, Word
from .scoring import score

log = logging.getLogger(__name__)

# Below this many candidates starting worker processes costs more than it saves.
MIN_PARALLEL_CANDIDATES = 2048


def matches(candidate: Word, guess: Guess) -> bool:
    """True iff `guess` played against `candidate` yields exactly `guess.states`."""
    return score(guess.word, candidate) == guess.states


def _consistent(candidate: Word, history: Sequence[Guess]) -> bool:
    return all(matches(candidate, g) for g in history)


def _scan(chunk: Sequence[Word], history: Sequence[Guess]) -> List[Word]:
    return [w for w in chunk if _consistent(w, history)]


def filter_candidates(
        dictionary: Iterable[Word],
        history: Iterable[Guess],
        *,
        workers: Optional[int] = None,
) -> List[Word]:
    """
    Keep only the words consistent with every guess in `history`.

    Args:
      dictionary : iterable of Words (not mutated)
      history    : iterable of finalized Guesses (snapshotted to a tuple)
      workers    : >1 splits the scan across worker processes; the result is
                   identical to the sequential scan, order included

    Returns:
      List[Word] in dictionary order. An empty history returns every word.
    """
    words = list(dictionary)
    history = tuple(history)

    if not history:
        return words

    if workers and workers > 1 and len(words) >= MIN_PARALLEL_CANDIDATES:
        size = -(-len(words) // workers)
        chunks = [words[i:i + size] for i in range(0, len(words), size)]
        log.debug("filtering %d words in %d chunks", len(words), len(chunks))
        with ProcessPoolExecutor(max_workers=workers) as pool:
            parts = pool.map(_scan, chunks, [history] * len(chunks))
            out = [w for part in parts for w in part]
    else:
        out = _scan(words, history)

    log.debug("%d of %d words survive %d guess(es)", len(out), len(words), len(history))
    return out


def filter_words(words: Iterable[str], history: Iterable[Guess]) -> List[str]:
    """
    String variant of filter_candidates for raw word lists.

    Entries that are not clean WORD_LENGTH-letter words are skipped rather
    than rejected, so a slightly dirty list still filters.
    """
    clean: List[Word] = []
    skipped = 0
    for w in words:
        try:
            clean.append(Word(w.strip()))
        except (InvalidWord, AttributeError):
            skipped += 1
    if skipped:
        log.debug("skipped %d malformed word list entries", skipped)
    return [str(w) for w in filter_candidates(clean, history)]

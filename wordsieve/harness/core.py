"""
Replay harness primitives.

- replay:       play a fixed sequence of guess words against a known secret,
                recording the feedback and how far each guess narrows the
                dictionary.
- replay_batch: run the same sequence against many secrets.

Useful for checking an opening sequence offline. These functions never
suggest guesses; the words to play are always supplied by the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Sequence

from wordsieve.engine import Guess, Word, filter_candidates, score
from .history import GuessHistory

log = logging.getLogger(__name__)


def replay(
        secret: Word | str,
        guesses: Sequence[Word | str],
        dictionary: Sequence[Word],
        *,
        stop_when_solved: bool = True,
) -> Dict:
    """
    Score each guess against `secret` and filter `dictionary` after each one.

    Args:
        secret:           the hidden word
        guesses:          guess words in play order
        dictionary:       candidate universe
        stop_when_solved: stop after the guess equal to `secret`

    Returns:
        dict with keys:
            secret (str), solved (bool), steps (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (list[int])
    """
    secret = secret if isinstance(secret, Word) else Word(secret)
    history = GuessHistory()
    remaining: List[int] = []
    candidates = list(dictionary)
    solved = False

    t0 = time.perf_counter()
    for g in guesses:
        word = g if isinstance(g, Word) else Word(g)
        guess = Guess(word, score(word, secret))
        history.append(guess)

        # Narrowing an already-narrowed list is equivalent to refiltering the
        # whole dictionary with the full history.
        candidates = filter_candidates(candidates, [guess])
        remaining.append(len(candidates))

        if word == secret:
            solved = True
            if stop_when_solved:
                break

    dt = (time.perf_counter() - t0) * 1000.0
    log.debug("replay %s: %s -> %s", secret, [str(g) for g in history], remaining)
    return {
        "secret": str(secret),
        "solved": solved,
        "steps": len(history),
        "time_ms": dt,
        "history": [(str(g.word), g.pattern) for g in history],
        "remaining": remaining,
    }


def replay_batch(
        secrets: Iterable[Word | str],
        guesses: Sequence[Word | str],
        dictionary: Sequence[Word],
        *,
        sample: int | None = None,
) -> List[Dict]:
    """
    Replay `guesses` against each secret. If `sample` is given only the first
    K secrets are used, to speed up quick checks.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]
    guesses = [g if isinstance(g, Word) else Word(g) for g in guesses]
    return [replay(s, guesses, dictionary) for s in pool]

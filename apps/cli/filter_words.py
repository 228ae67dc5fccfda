# apps/cli/filter_words.py
"""
CLI entry point for narrowing the dictionary.

This script:
  1) Loads the dictionary once (embedded list, --dictionary, or $WORDSIEVE_DICTIONARY).
  2) Reads guesses from WORD:PATTERN arguments and/or a JSON file.
  3) Validates every guess, filters, and prints the survivors (sorted).

Patterns use G = correct, Y = misplaced, - = absent ('.', '_', 'b', 'x' also
mean absent):

    python -m apps.cli.filter_words crane:-Y--G doubt:-----

JSON input is a list of guesses, each a list of {"character", "state"}
slots (or {"letters": [...]}), states "correct" / "misplaced" / "absent".

Exit status: 0 ok, 1 invalid guess input, 2 dictionary unavailable.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List

from wordsieve.datasets import load_dictionary
from wordsieve.engine import DictionaryUnavailable, WordsieveError, filter_word_list

log = logging.getLogger("wordsieve.cli")

DICTIONARY_ENV = "WORDSIEVE_DICTIONARY"


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_json_guesses(src: str) -> List[Any]:
    text = sys.stdin.read() if src == "-" else Path(src).read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("JSON input must be a list of guesses")
    return data


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordsieve - list the words consistent with your guesses")
    ap.add_argument("guesses", nargs="*", metavar="WORD:PATTERN",
                    help="a guess and its feedback, e.g. crane:-Y--G")
    ap.add_argument("--json", dest="json_src", metavar="FILE",
                    help="read guesses from a JSON file ('-' for stdin); applied before positional guesses")
    ap.add_argument("--dictionary", default=os.environ.get(DICTIONARY_ENV),
                    help=f"word list (.txt one per line, or .json array); default ${DICTIONARY_ENV} "
                         "or the embedded list")
    ap.add_argument("--workers", type=int, default=None,
                    help="filter with this many worker processes")
    ap.add_argument("--count", action="store_true", help="print only the number of survivors")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for info, -vv for debug logging")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # 1) Dictionary: fatal if missing
    try:
        dictionary = load_dictionary(args.dictionary)
    except DictionaryUnavailable as e:
        log.error("%s", e)
        return 2

    # 2) Collect raw guesses
    raw: List[Any] = []
    if args.json_src:
        try:
            raw.extend(_read_json_guesses(args.json_src))
        except (OSError, ValueError) as e:
            print(f"cannot read guesses from {args.json_src}: {e}", file=sys.stderr)
            return 1
    raw.extend(args.guesses)

    # 3) Validate + filter
    try:
        survivors = filter_word_list(dictionary, raw, workers=args.workers)
    except WordsieveError as e:
        print(f"invalid guess: {e}", file=sys.stderr)
        return 1

    log.info("%d of %d words remain after %d guess(es)", len(survivors), len(dictionary), len(raw))
    if args.count:
        print(len(survivors))
    else:
        for w in sorted(survivors):
            print(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# apps/cli/replay.py
"""
CLI for replaying a fixed guess sequence against many secrets.

This script:
  1) Validates and loads the dictionary (prints counts + SHA when it is a file).
  2) Plays the given guess words against every dictionary word (or a seeded
     sample) as the secret, filtering after each guess.
  3) Writes:
       - CSV:  per-secret feedback + survivors-left columns
       - JSON: manifest with config, word list report, summary numbers

    python -m apps.cli.replay crane doubt --sample 200 --outdir reports
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordsieve.datasets import load_dictionary, pretty_summary, validate_wordlist
from wordsieve.engine import DictionaryUnavailable, InvalidWord, Word
from wordsieve.harness import replay, write_csv, write_manifest
from wordsieve.harness.io import timestamp_id

from apps.cli.filter_words import DICTIONARY_ENV, configure_logging

log = logging.getLogger("wordsieve.cli")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordsieve - replay guess words against known secrets")
    ap.add_argument("guesses", nargs="+", metavar="WORD", help="guess words in play order")
    ap.add_argument("--dictionary", default=os.environ.get(DICTIONARY_ENV),
                    help="word list path (default: $WORDSIEVE_DICTIONARY or the embedded list)")
    ap.add_argument("--sample", type=int, help="replay only K secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    # 1) Dictionary
    rep = None
    if args.dictionary and Path(args.dictionary).suffix.lower() != ".json":
        rep = validate_wordlist(args.dictionary)
        print(pretty_summary(rep))
    try:
        dictionary = load_dictionary(args.dictionary)
    except DictionaryUnavailable as e:
        log.error("%s", e)
        return 2

    try:
        guesses = [Word.parse(g) for g in args.guesses]
    except InvalidWord as e:
        print(f"invalid guess: {e}", file=sys.stderr)
        return 1

    # 2) Choose secrets (deterministic sample by seed)
    cases = list(dictionary)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(cases, ncols=80, desc="Replaying", unit="word") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, secret in enumerate(iterator, 1):
        results.append(replay(secret, guesses, dictionary))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 3) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_steps=len(guesses))
    finals = [r["remaining"][-1] for r in results if r["remaining"]]
    manifest = {
        "run_id": run_id,
        "config": vars(args),
        "wordlist": rep,
        "dictionary_size": len(dictionary),
        "num_cases": len(results),
        "solved": sum(1 for r in results if r["solved"]),
        "mean_remaining": (sum(finals) / len(finals)) if finals else 0.0,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

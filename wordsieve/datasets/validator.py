"""
Word list validator for wordsieve.

What this module does:
- Check a dictionary file (one word per line) against the loader's rules:
  lowercase, a-z only, exactly WORD_LENGTH letters.
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordsieve.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordsieve/datasets/data/words_5.txt")
    print(pretty_summary(rep))

The loader itself is lenient (it skips bad entries); this report is the
strict view used before shipping or swapping a list.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordsieve.engine.model import WORD_LENGTH, ALPHABET


@dataclass
class WordlistReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must already be lowercase a-z
      - must have exactly WORD_LENGTH letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if len(w) == WORD_LENGTH and all(ch in ALPHABET for ch in w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns a JSON-serializable dict (see WordlistReport). `passed` is strict:
    the file exists, holds at least one word, and has no invalid or duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        return asdict(WordlistReport(path, False, 0, 0, 0, "", False,
                                     [f"word list not found: {path}"]))

    words, invalid = _load_and_check(p)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words_5.txt | words=1210 (uniq=1210, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Tuple

from wordsieve.engine.errors import DictionaryUnavailable, InvalidWord
from wordsieve.engine.model import Word

log = logging.getLogger(__name__)

EMBEDDED_WORDLIST = "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def _raw_entries(path: Path | str | None) -> Tuple[str, List[str]]:
    """Return (source label, raw entries) for a .txt / .json list or the embedded one."""
    if path is None:
        src = resources.files("wordsieve.datasets").joinpath("data", EMBEDDED_WORDLIST)
        return f"<embedded {EMBEDDED_WORDLIST}>", src.read_text(encoding="utf-8").splitlines()

    p = Path(path)
    if p.suffix.lower() == ".json":
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array of words, got {type(data).__name__}")
        return str(p), [str(x) for x in data]
    return str(p), read_lines(p)


def load_dictionary(path: Path | str | None = None) -> Tuple[Word, ...]:
    """
    Load the word list once at startup.

    Accepts a newline-separated .txt file, a JSON array (.json), or None for
    the list shipped with the package. Entries are stripped and lowercased;
    blanks are ignored, malformed entries skipped (and counted), duplicates
    dropped keeping the first occurrence.

    Raises DictionaryUnavailable if the source cannot be read or parsed, or
    holds no valid words.
    """
    try:
        source, raw = _raw_entries(path)
    except (OSError, ValueError) as e:
        raise DictionaryUnavailable(f"cannot load word list {path}: {e}") from e

    words: List[Word] = []
    seen = set()
    invalid = 0
    for entry in raw:
        entry = entry.strip()
        if not entry:
            continue
        try:
            w = Word.parse(entry)
        except InvalidWord:
            invalid += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)

    if invalid:
        log.warning("%s: skipped %d malformed entr%s", source, invalid, "y" if invalid == 1 else "ies")
    if not words:
        raise DictionaryUnavailable(f"word list {source} contains 0 valid words")

    log.info("loaded %d words from %s", len(words), source)
    return tuple(words)

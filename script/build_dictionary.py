"""
Build a dictionary file from a published word list page.

What it does:
- Downloads the page (HTML or plain text).
- Extracts visible text and pulls every standalone 5-letter alphabetic token.
- Lowercases, de-duplicates while preserving page order, and writes one word per line.

Usage:
    python -m script.build_dictionary --url https://example.org/five-letter-words \
        --out wordsieve/datasets/data/words_5.txt --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordsieve.datasets import pretty_summary, validate_wordlist, write_lines

WORD_RE = re.compile(r"\b([A-Za-z]{5})\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str) -> list[str]:
    return unique_preserve_order(m.group(1).lower() for m in WORD_RE.finditer(text))


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    else:
        text = r.text
    return extract_words(text)


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a 5-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="wordsieve/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping page order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")
    print(pretty_summary(validate_wordlist(args.out)))


if __name__ == "__main__":
    main()

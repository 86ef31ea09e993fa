"""
Download a plain-text spelling dictionary and write a clean five-letter list.

What it does:
- Downloads a newline-delimited word list (any case, any whitespace).
- Keeps only tokens that pass normalize_word (5 ASCII letters), lowercased.
- De-duplicates while preserving source order (optionally sorts), and writes
  one word per line.

Usage:
    python -m script.fetch_dictionary --url https://example.org/words.txt \
        --out english-dictionary.txt
    # or alphabetically sorted:
    python -m script.fetch_dictionary --url ... --sort --out english-dictionary.txt
"""

import argparse
import logging

import requests

from packages.datasets.io import write_lines
from packages.engine.validation import normalize_word

log = logging.getLogger(__name__)

# dwyl/english-words: one word per line, mixed case
URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = []
    for line in r.text.splitlines():
        w = normalize_word(line)
        if w is not None:
            words.append(w)
    log.info("Fetched %s five-letter words from %s", len(words), url)
    return unique_preserve_order(words)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Download a spelling dictionary and keep five-letter words.")
    ap.add_argument("--url", default=URL, help="plain-text word list URL")
    ap.add_argument("--out", default="english-dictionary.txt", help="output .txt file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep source order)")
    args = ap.parse_args(argv)

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    path = write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {path}")
    return path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()

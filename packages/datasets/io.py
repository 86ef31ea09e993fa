"""
Word-list loaders.

Two input formats are supported:
  - frequency list : tab-separated `<ignored>\t<word>\t<frequency>` lines
                     (e.g. a Leipzig news-corpus words file)
  - dictionary     : one word per line, any case, any surrounding whitespace

Every word goes through `normalize_word`; lines that fail are skipped
silently. A valid word with a non-integer frequency is fatal
(WordListFormatError), since there is no sensible default frequency.

Files are decoded as UTF-8 with undecodable bytes replaced, so stray bytes
only make a line fail validation.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from packages.engine.validation import normalize_word

log = logging.getLogger(__name__)

_FREQUENCY_RE = re.compile(r"[+-]?[0-9]+")


class WordListFormatError(ValueError):
    """A line of a word list could not be parsed."""

    def __init__(self, path: Path | str, lineno: int, line: str, reason: str):
        self.path = str(path)
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"{self.path}:{lineno}: {reason}: {line!r}")


def _open_lines(p: Path | str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) pairs with trailing CR/LF stripped.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, raw in enumerate(f, start=1):
            yield lineno, raw.rstrip("\r\n")


def parse_frequency(text: str) -> int:
    """
    Parse a frequency field: optional sign and ASCII digits, surrounding
    whitespace allowed. Raises ValueError for anything else, including
    forms int() would accept such as "1_000".
    """
    field = text.strip()
    if not _FREQUENCY_RE.fullmatch(field):
        raise ValueError(f"not an integer: {text!r}")
    return int(field)


def load_word_frequencies(p: Path | str) -> Tuple[List[str], List[int]]:
    """
    Load a tab-separated frequency list.

    Only the second (word) and third (frequency) fields are used. The word
    is validated first; frequency is parsed only for lines that pass.

    Returns:
      (words, freqs) as parallel lists in file order (duplicates kept).

    Raises:
      FileNotFoundError   : path missing
      WordListFormatError : a valid word whose frequency isn't an integer
    """
    words: List[str] = []
    freqs: List[int] = []
    skipped = 0

    for lineno, line in _open_lines(p):
        fields = line.split("\t")
        if len(fields) < 3:
            skipped += 1
            continue

        word = normalize_word(fields[1])
        if word is None:
            skipped += 1
            continue

        try:
            freq = parse_frequency(fields[2])
        except ValueError:
            raise WordListFormatError(p, lineno, line, "frequency is not an integer") from None

        words.append(word)
        freqs.append(freq)

    log.info("Loaded %s words from %s", len(words), p)
    log.debug("Skipped %s invalid lines in %s", skipped, p)
    return words, freqs


def load_dictionary(p: Path | str) -> List[str]:
    """
    Load a newline-delimited spelling dictionary.

    Returns the normalized words in file order (duplicates kept, so the
    count matches what was read).
    """
    words: List[str] = []
    skipped = 0
    for _, line in _open_lines(p):
        word = normalize_word(line)
        if word is None:
            skipped += 1
            continue
        words.append(word)

    log.info("Loaded %s dictionary words from %s", len(words), p)
    log.debug("Skipped %s invalid lines in %s", skipped, p)
    return words


def frequency_map(words: List[str], freqs: List[int]) -> Dict[str, int]:
    """
    Map word -> frequency. When a word repeats, the first occurrence wins.
    """
    out: Dict[str, int] = {}
    for w, f in zip(words, freqs):
        out.setdefault(w, f)
    return out


def write_lines(lines: List[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)

"""
Letter-frequency scoring for a single word.

Conventions:
  - Each DISTINCT letter counts once ("three" scores like "thre"), so words
    with doubled letters are not overweighted.
  - Letters are weighted by approximate English frequency (LETTER_SCORES).
  - Anything outside a-z contributes 0.

The ordered (weight, letters) table is precomputed into a 26-slot numpy
lookup array, so scoring is a direct index per letter instead of a scan.
`score_many` applies the same rule to a whole word list at once.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

# (weight, letters) buckets; disjoint, heaviest first.
LETTER_SCORES: Tuple[Tuple[int, str], ...] = (
    (12000, "e"),
    (9000, "t"),
    (8000, "ainos"),
    (6400, "h"),
    (6200, "r"),
    (4400, "d"),
    (4000, "l"),
    (3400, "u"),
    (3000, "cm"),
    (2500, "f"),
    (2000, "wy"),
    (1700, "gp"),
    (1600, "b"),
    (1200, "v"),
    (800, "k"),
    (500, "q"),
    (400, "jx"),
    (200, "z"),
)

ALPHABET_SIZE = 26


def _build_weights(table: Sequence[Tuple[int, str]]) -> np.ndarray:
    """Flatten the bucket table into weights[ord(ch) - ord('a')]."""
    weights = np.zeros(ALPHABET_SIZE, dtype=np.int64)
    seen = set()
    for weight, letters in table:
        for ch in letters:
            if ch in seen:
                continue  # first bucket wins
            seen.add(ch)
            weights[ord(ch) - ord("a")] = weight
    weights.setflags(write=False)
    return weights


WEIGHTS: np.ndarray = _build_weights(LETTER_SCORES)


def _letter_index(ch: str) -> int:
    """Index into WEIGHTS, or -1 for anything that isn't a-z."""
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    return -1


def score(word: str) -> int:
    """
    Sum the frequency weights of the distinct letters in `word`.

    Examples:
      score("abcde") == score("edcba")
      score("three") == score("thre")  # the second 'e' adds nothing
    """
    value = 0
    for ch in set(word):
        i = _letter_index(ch)
        if i >= 0:
            value += int(WEIGHTS[i])
    return value


def score_many(words: Sequence[str]) -> np.ndarray:
    """
    Vectorised `score` over a list of words.

    Builds a (len(words), 26) letter-presence matrix, so repeated letters
    collapse naturally, then takes its product with the weight vector.
    Returns an int64 array aligned with `words`.
    """
    presence = np.zeros((len(words), ALPHABET_SIZE), dtype=np.int64)
    for row, word in enumerate(words):
        for ch in word:
            i = _letter_index(ch)
            if i >= 0:
                presence[row, i] = 1
    return presence @ WEIGHTS

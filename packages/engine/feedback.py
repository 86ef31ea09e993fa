"""
Guess feedback and the constraints it implies.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)
  ('.', '_' and 'B' are accepted as gray when parsing user input.)

`feedback` produces the pattern a guess would receive against an answer.
`constraints_from_feedback` turns a (guess, pattern) pair into the
NotPresent / Present / Perfect constraints understood by `solve`.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List

from .constraints import Constraint, NotPresent, Perfect, Present
from .validation import WORD_LENGTH, normalize_word

_GRAY_ALIASES = {"-": "-", ".": "-", "_": "-", "B": "-"}


def feedback(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Two passes: greens first, then yellows capped by the answer's leftover
    letter counts, so duplicates are handled the way the game does.

    Examples:
      feedback("belle", "level") -> "-GYYY"
      feedback("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer must be the same length: {guess!r} vs {answer!r}")

    pattern = ["-"] * len(guess)
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def _normalize_pattern(pattern: str, n: int) -> str:
    out = []
    for ch in pattern.strip().upper():
        if ch in ("G", "Y"):
            out.append(ch)
        elif ch in _GRAY_ALIASES:
            out.append(_GRAY_ALIASES[ch])
        else:
            raise ValueError(f"bad pattern character {ch!r} in {pattern!r}; use G, Y or -")
    if len(out) != n:
        raise ValueError(f"pattern {pattern!r} must have {n} characters")
    return "".join(out)


def constraints_from_feedback(guess: str, pattern: str) -> List[Constraint]:
    """
    Translate one (guess, pattern) observation into constraints.

      - every green          -> Perfect(letter, i)
      - letter with any G/Y  -> Present(letter, positions where it was NOT
                                green), when such positions exist
      - letter that is gray
        everywhere           -> NotPresent(letter)

    Letter counts (e.g. "exactly one 'e'") are not expressible with these
    three kinds, so a gray next to a green/yellow copy only excludes its
    own position.
    """
    word = normalize_word(guess)
    if word is None:
        raise ValueError(f"guess must be {WORD_LENGTH} letters a-z; got {guess!r}")
    patt = _normalize_pattern(pattern, len(word))

    greens: List[Constraint] = []
    hits: Dict[str, int] = Counter()
    misses: Dict[str, List[int]] = defaultdict(list)
    order: List[str] = []

    for i, (ch, p) in enumerate(zip(word, patt)):
        if ch not in order:
            order.append(ch)
        if p == "G":
            greens.append(Perfect(ch, i))
            hits[ch] += 1
        else:
            if p == "Y":
                hits[ch] += 1
            misses[ch].append(i)

    out: List[Constraint] = list(greens)
    for ch in order:
        if hits[ch] == 0:
            out.append(NotPresent(ch))
        elif misses[ch]:
            out.append(Present(ch, frozenset(misses[ch])))
    return out


def parse_guess(text: str) -> List[Constraint]:
    """Parse 'GUESS:PATTERN' (e.g. 'crane:--Y-G') into constraints."""
    guess, sep, pattern = text.partition(":")
    if not sep:
        raise ValueError(f"expected GUESS:PATTERN, got {text!r}")
    return constraints_from_feedback(guess, pattern)

"""
Candidate filtering against letter constraints.

Three kinds of constraint describe what is known about the hidden word:
  - NotPresent(letter)                   : letter occurs nowhere
  - Present(letter, exclude_positions)   : letter occurs somewhere, but never
                                           at one of the excluded indices
  - Perfect(letter, position)            : letter sits exactly at `position`

Each kind carries only its own fields, so a Perfect without a position (or
a NotPresent with exclusions) cannot be built.

A word survives `solve` iff every constraint checks true against it.
Input order is preserved (stable filter).

Note on Present: a word fails if the letter sits at ANY excluded index,
even when it also occurs at an allowed index. "eerie" fails
Present('e', {0, 2, 4}) although its 'e' at index 3 would be acceptable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Union


def _clean_letter(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
        raise ValueError(f"constraint letter must be a single a-z character; got {letter!r}")
    return letter.lower()


def _clean_position(pos: int) -> int:
    pos = int(pos)
    if pos < 0:
        raise ValueError(f"constraint position must be >= 0; got {pos}")
    return pos


@dataclass(frozen=True)
class NotPresent:
    letter: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _clean_letter(self.letter))


@dataclass(frozen=True)
class Present:
    letter: str
    exclude_positions: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _clean_letter(self.letter))
        object.__setattr__(
            self, "exclude_positions",
            frozenset(_clean_position(p) for p in self.exclude_positions),
        )


@dataclass(frozen=True)
class Perfect:
    letter: str
    position: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", _clean_letter(self.letter))
        object.__setattr__(self, "position", _clean_position(self.position))


Constraint = Union[NotPresent, Present, Perfect]


def check(constraint: Constraint, word: str) -> bool:
    """
    True if `word` satisfies `constraint`.

    Out-of-range indices never raise: a Perfect position past the end of the
    word is a non-match, and an excluded index past the end cannot hold the
    letter so it never disqualifies.
    """
    if isinstance(constraint, NotPresent):
        return constraint.letter not in word

    if isinstance(constraint, Present):
        if constraint.letter not in word:
            return False
        for pos in constraint.exclude_positions:
            if pos < len(word) and word[pos] == constraint.letter:
                return False
        return True

    if isinstance(constraint, Perfect):
        pos = constraint.position
        return pos < len(word) and word[pos] == constraint.letter

    raise TypeError(f"unknown constraint type: {type(constraint).__name__}")


def solve(constraints: Iterable[Constraint], words: Iterable[str]) -> List[str]:
    """
    Keep only the words that satisfy ALL constraints.

    Args:
      constraints : constraints to apply (conjunction; order doesn't matter)
      words       : iterable of candidate words (any iterable, e.g. wrapped
                    in a progress bar)

    Returns:
      List[str] of legal words, order preserved as in `words`.
    """
    cs = list(constraints)
    out: List[str] = []

    for w in words:
        # all() short-circuits on the first failing constraint
        if all(check(c, w) for c in cs):
            out.append(w)

    return out


def _parse_positions(text: str) -> List[int]:
    positions: List[int] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit():
            raise ValueError(f"bad position {part!r}")
        positions.append(int(part))
    return positions


def parse_constraint(text: str) -> Constraint:
    """
    Parse the textual form used on the command line.

      absent:s          -> NotPresent('s')
      present:e:0,2,4   -> Present('e', {0, 2, 4})
      present:e         -> Present('e', {})
      perfect:l:4       -> Perfect('l', 4)

    Raises ValueError on anything else.
    """
    parts = [p.strip() for p in text.split(":")]
    kind = parts[0].lower()

    try:
        if kind == "absent" and len(parts) == 2:
            return NotPresent(parts[1])
        if kind == "present" and len(parts) in (2, 3):
            excl = _parse_positions(parts[2]) if len(parts) == 3 else []
            return Present(parts[1], frozenset(excl))
        if kind == "perfect" and len(parts) == 3:
            if not parts[2].isdigit():
                raise ValueError(f"bad position {parts[2]!r}")
            return Perfect(parts[1], int(parts[2]))
    except ValueError as e:
        raise ValueError(f"invalid constraint {text!r}: {e}") from e

    raise ValueError(
        f"invalid constraint {text!r}; expected absent:<l>, present:<l>[:<i>,...] or perfect:<l>:<i>"
    )

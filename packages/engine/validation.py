"""
Word normalization.

Both input lists go through the same gate. A raw token is accepted iff,
after trimming surrounding whitespace, it is:
  - exactly WORD_LENGTH characters long
  - ASCII alphabetic only (a-z / A-Z)

Accepted tokens are case-folded to lowercase. Rejected tokens are simply
dropped by callers; rejection is never an error.
"""

from typing import Optional

WORD_LENGTH = 5


def normalize_word(raw: str, N: int = WORD_LENGTH) -> Optional[str]:
    """
    Return the normalized word, or None if `raw` is not a clean N-letter token.

    Examples:
      normalize_word("  Apple ") -> "apple"
      normalize_word("12345")    -> None
      normalize_word("ab")       -> None
    """
    if not isinstance(raw, str):
        return None

    w = raw.strip()

    # Shape/characters check; isalpha() alone would admit accented letters
    if len(w) != N or not (w.isascii() and w.isalpha()):
        return None

    return w.lower()

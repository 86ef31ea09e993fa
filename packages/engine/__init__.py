from .scoring import score, score_many, LETTER_SCORES
from .constraints import (
    Constraint, NotPresent, Present, Perfect, check, solve, parse_constraint,
)
from .feedback import feedback, constraints_from_feedback, parse_guess
from .validation import normalize_word, WORD_LENGTH

__all__ = [
    "score", "score_many", "LETTER_SCORES",
    "Constraint", "NotPresent", "Present", "Perfect", "check", "solve", "parse_constraint",
    "feedback", "constraints_from_feedback", "parse_guess",
    "normalize_word", "WORD_LENGTH",
]

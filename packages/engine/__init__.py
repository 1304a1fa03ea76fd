from .scoring import (
    ABSENT, CORRECT, MISSING, PRESENT,
    Classification, Feedback, classify, evaluate, is_absent, length_note, score, to_pattern,
)
from .validation import validate_guess

__all__ = [
    "ABSENT", "CORRECT", "MISSING", "PRESENT", "Classification", "Feedback",
    "classify", "evaluate", "is_absent", "length_note", "score", "to_pattern",
    "validate_guess",
]

"""
Lightweight guess validation.

This module answers the question: "Can this guess be submitted right now?"
A guess is acceptable iff:
  - it is a string
  - it is non-empty and alphabetic only (after stripping whitespace)
  - it is no longer than the target length N (the letter pad stops at N;
    shorter guesses are allowed and come back with 'missing' positions)
  - it exists in the provided `allowed` collection, when one is given

The scorer itself accepts anything; these rules belong to the game layer.
"""

from typing import Iterable, Optional, Set


def validate_guess(word: str, N: int, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      N       : target word length
      allowed : optional iterable of permitted words (case-insensitive)
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if not w or len(w) > N or not w.isalpha():
        return False

    if allowed is None:
        return True

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set

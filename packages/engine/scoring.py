"""
Wordle-style letter feedback for a single (target, guess) pair.

Tags (one per output position):
  - 'correct'           : guess letter equals the target letter at that position
  - 'present-elsewhere' : letter is in the target at another, not-yet-consumed position
  - 'absent'            : letter has no remaining occurrence in the target
  - 'missing'           : the guess is shorter than the target here (absent-equivalent)

This implementation is:
  - length-tolerant (guess may be shorter, equal or longer than the target)
  - duplicate-safe (respects true letter multiplicities in the target)
  - case-insensitive
  - total and pure (never raises, no shared state)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and consumes them from a letter
     histogram of the target.
  2) Second pass, left to right, marks 'present-elsewhere' only while the
     letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Tuple

Classification = Literal["correct", "present-elsewhere", "absent", "missing"]

CORRECT: Classification = "correct"
PRESENT: Classification = "present-elsewhere"
ABSENT: Classification = "absent"
MISSING: Classification = "missing"

# Compact one-char rendering, used by reports and CSV exports
PATTERN_CHARS = {CORRECT: "G", PRESENT: "Y", ABSENT: "-", MISSING: "_"}


def is_absent(tag: str) -> bool:
    """'missing' counts as absent for every purpose except display."""
    return tag in (ABSENT, MISSING)


def classify(target: str, guess: str) -> List[Classification]:
    """
    Classify every position of `guess` against `target`.

    Returns:
      list of length max(len(target), len(guess)).

    Examples:
      classify("apple", "pplea") -> [Y, G, Y, Y, Y]
      classify("error", "roar")  -> [Y, Y, -, Y, _]
    """
    # One comparison unit per input character; lowering a whole string can
    # change its length ("İ" -> "i̇").
    t = [c.lower() for c in target]
    g = [c.lower() for c in guess]

    n_target = len(t)
    n_guess = len(g)
    marks: List[Optional[Classification]] = [None] * max(n_target, n_guess)

    available = Counter(t)

    # Pass 1: exact matches claim their letters first.
    for i, (gc, tc) in enumerate(zip(g, t)):
        if gc == tc:
            marks[i] = CORRECT
            available[gc] -= 1

    # Pass 2: everything else, strictly left to right.
    for i in range(len(marks)):
        if marks[i] is not None:
            continue
        if i >= n_guess:
            marks[i] = MISSING
        elif i >= n_target:
            # extra letters never spend the target's budget
            marks[i] = ABSENT
        elif available[g[i]] > 0:
            marks[i] = PRESENT
            available[g[i]] -= 1
        else:
            marks[i] = ABSENT

    return marks  # type: ignore[return-value]


def to_pattern(marks: Sequence[str]) -> str:
    """['correct', 'absent', 'missing'] -> 'G-_'"""
    return "".join(PATTERN_CHARS[m] for m in marks)


def score(guess: str, answer: str) -> str:
    """
    Pattern string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("flow", "flower") -> "GGGG__"
    """
    return to_pattern(classify(answer, guess))


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def length_note(target: str, guess: str) -> Optional[str]:
    """
    Human-readable note when the guess length differs from the target.
    Returns None when the lengths match.
    """
    diff = len(guess) - len(target)
    if diff == 0:
        return None
    if diff < 0:
        return f"{_plural(-diff, 'letter')} missing"
    return _plural(diff, "extra letter")


@dataclass(frozen=True)
class Feedback:
    """Everything a presentation layer needs to draw one guess row."""
    guess: str
    marks: Tuple[Classification, ...]
    pattern: str
    length_note: Optional[str]
    solved: bool


def evaluate(target: str, guess: str) -> Feedback:
    marks = tuple(classify(target, guess))
    solved = len(guess) == len(target) and all(m == CORRECT for m in marks)
    return Feedback(
        guess=guess,
        marks=marks,
        pattern=to_pattern(marks),
        length_note=length_note(target, guess),
        solved=solved,
    )

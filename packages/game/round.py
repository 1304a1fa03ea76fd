"""
One flashcard round as an explicit state machine.

    idle -> showing -> guessing -> resolved -> next-round

  - showing:    the word is on the card front; `tick()` counts down the
                display seconds, then the card flips.
  - guessing:   the player spells the word; each `submit()` is scored by the
                engine and appended to the history.
  - resolved:   solved, or out of attempts (the word is revealed). The card
                stays up for a few ticks.
  - next-round: terminal; the owner deals a new Round.

Time only moves when the owner calls `tick()`, so the machine is fully
deterministic and needs no timers of its own.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Union

from packages.datasets.deck import WordCard
from packages.engine import Feedback, evaluate, validate_guess

from .config import (
    DEFAULT_DISPLAY_SECONDS, MAX_ATTEMPTS, PENALTY_PERCENT, POINTS_PER_LETTER, RESOLVE_TICKS,
)
from .errors import InvalidGuess, InvalidTransition

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    SHOWING = "showing"
    GUESSING = "guessing"
    RESOLVED = "resolved"
    NEXT_ROUND = "next-round"


SOLVED = "solved"
FAILED = "failed"


def round_score(word_len: int, wrong_attempts: int) -> int:
    """
    Points for solving a word of `word_len` letters after `wrong_attempts` misses.

    base = 25 * len; each miss removes 20% of base; never negative.
      round_score(6, 0) -> 150
      round_score(6, 2) -> 90
    """
    base = POINTS_PER_LETTER * word_len
    return max(base * (100 - PENALTY_PERCENT * wrong_attempts) // 100, 0)


class Round:
    def __init__(
            self,
            card: Union[WordCard, str],
            *,
            display_seconds: int = DEFAULT_DISPLAY_SECONDS,
            max_attempts: int = MAX_ATTEMPTS,
            resolve_ticks: int = RESOLVE_TICKS,
    ):
        self.card = card if isinstance(card, WordCard) else WordCard(word=card)
        self.display_seconds = int(display_seconds)
        self.max_attempts = int(max_attempts)
        self.resolve_ticks = int(resolve_ticks)

        self.phase = Phase.IDLE
        self.countdown = 0
        self.history: List[Feedback] = []
        self.outcome: Optional[str] = None
        self.points = 0
        self.message = ""

    @property
    def word(self) -> str:
        return self.card.word

    @property
    def attempts_left(self) -> int:
        return max(self.max_attempts - len(self.history), 0)

    def _require(self, *phases: Phase) -> None:
        if self.phase not in phases:
            allowed = ", ".join(p.value for p in phases)
            raise InvalidTransition(f"round is {self.phase.value}; expected {allowed}")

    def _enter(self, phase: Phase) -> None:
        logger.debug("round %r: %s -> %s", self.word, self.phase.value, phase.value)
        self.phase = phase

    # ---- transitions ----

    def show(self) -> None:
        """Put the card face up and start the display countdown."""
        self._require(Phase.IDLE)
        self.countdown = self.display_seconds
        self._enter(Phase.SHOWING)

    def flip(self) -> None:
        """Hide the word and open the guessing phase right away."""
        self._require(Phase.SHOWING)
        self.countdown = 0
        self._enter(Phase.GUESSING)

    def tick(self) -> Phase:
        """Advance one second. Phases without a countdown ignore ticks."""
        if self.phase is Phase.SHOWING:
            if self.countdown <= 1:
                self.flip()
            else:
                self.countdown -= 1
        elif self.phase is Phase.RESOLVED:
            if self.countdown <= 1:
                self.countdown = 0
                self._enter(Phase.NEXT_ROUND)
            else:
                self.countdown -= 1
        return self.phase

    def submit(self, guess: str) -> Feedback:
        """
        Score one guess.

        Raises:
          InvalidTransition : not in the guessing phase
          InvalidGuess      : empty, non-alphabetic, or longer than the word
        """
        self._require(Phase.GUESSING)
        if not validate_guess(guess, len(self.word)):
            raise InvalidGuess(f"guess {guess!r} is not a 1..{len(self.word)} letter word")

        fb = evaluate(self.word, guess.strip())
        self.history.append(fb)

        if fb.solved:
            self.points = round_score(len(self.word), len(self.history) - 1)
            self._resolve(SOLVED)
        elif len(self.history) >= self.max_attempts:
            self.message = f'The correct word was "{self.word}".'
            self._resolve(FAILED)
        return fb

    def _resolve(self, outcome: str) -> None:
        self.outcome = outcome
        self.countdown = self.resolve_ticks
        logger.info("round %r %s after %d guess(es), +%d", self.word, outcome,
                    len(self.history), self.points)
        self._enter(Phase.RESOLVED)

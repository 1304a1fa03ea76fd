"""
Timed spelling session: a deck, a global clock, and a running total.

The session owns one Round at a time. Every `tick()` (one second):
  1) runs down the session clock; at zero the game is over,
  2) otherwise forwards the tick to the current round, and deals a fresh
     card as soon as that round reaches next-round.

Cards are drawn uniformly from the whole deck with the session's seeded RNG,
so a run with the same seed and the same inputs replays identically.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from packages.datasets.deck import WordCard
from packages.engine import Feedback

from .config import (
    DEFAULT_DISPLAY_SECONDS, DEFAULT_SESSION_MINUTES, DISPLAY_SECONDS_CHOICES, MAX_ATTEMPTS,
    SESSION_MINUTES_CHOICES,
)
from .errors import InvalidSettings, InvalidTransition
from .leaderboard import Leaderboard
from .round import Phase, Round, SOLVED

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSettings:
    display_seconds: Optional[int] = DEFAULT_DISPLAY_SECONDS
    session_minutes: Optional[int] = DEFAULT_SESSION_MINUTES

    def check(self) -> None:
        """Raise InvalidSettings unless both options are picked from the offered choices."""
        if self.display_seconds is None or self.session_minutes is None:
            raise InvalidSettings("Please select both display time and session duration.")
        if self.display_seconds not in DISPLAY_SECONDS_CHOICES:
            raise InvalidSettings(
                f"display time must be one of {DISPLAY_SECONDS_CHOICES}; got {self.display_seconds}")
        if self.session_minutes not in SESSION_MINUTES_CHOICES:
            raise InvalidSettings(
                f"session duration must be one of {SESSION_MINUTES_CHOICES}; got {self.session_minutes}")


class SpellingSession:
    def __init__(
            self,
            deck: Sequence[Union[WordCard, str]],
            settings: Optional[GameSettings] = None,
            *,
            leaderboard: Optional[Leaderboard] = None,
            seed: int | None = None,
            max_attempts: int = MAX_ATTEMPTS,
    ):
        cards = [c if isinstance(c, WordCard) else WordCard(word=c) for c in deck]
        if not cards:
            raise ValueError("deck is empty")
        self.deck: List[WordCard] = cards
        self.settings = settings or GameSettings()
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self.max_attempts = int(max_attempts)
        self.rng = random.Random(seed)
        self._clear()

    def _clear(self) -> None:
        self.started = False
        self.game_over = False
        self.score = 0
        self.time_left = 0
        self.message = ""
        self.awaiting_name = False
        self.round: Optional[Round] = None
        self.finished_rounds: List[Round] = []

    # ---- lifecycle ----

    def start(self) -> Round:
        """Validate settings, reset all counters and deal the first card."""
        self.settings.check()
        self._clear()
        self.time_left = self.settings.session_minutes * 60
        self.started = True
        logger.info("session started: %ss cards, %s min, %d words",
                    self.settings.display_seconds, self.settings.session_minutes, len(self.deck))
        return self._deal()

    def reset(self) -> None:
        """Back to the settings screen; the leaderboard is kept."""
        self._clear()

    def _deal(self) -> Round:
        card = self.rng.choice(self.deck)
        r = Round(card, display_seconds=self.settings.display_seconds, max_attempts=self.max_attempts)
        r.show()
        self.round = r
        return r

    def _end(self) -> None:
        self.time_left = 0
        self.game_over = True
        self.message = "Time's up! Game Over!"
        self.awaiting_name = self.leaderboard.qualifies(self.score)
        logger.info("session over: score=%d, rounds=%d, high score=%s",
                    self.score, len(self.finished_rounds), self.awaiting_name)

    # ---- clock + input ----

    def tick(self) -> None:
        if not self.started or self.game_over:
            return

        if self.time_left <= 1:
            self._end()
            return
        self.time_left -= 1

        if self.round.tick() is Phase.NEXT_ROUND:
            self.finished_rounds.append(self.round)
            self._deal()

    def submit(self, guess: str) -> Feedback:
        if not self.started:
            raise InvalidTransition("session has not started")
        if self.game_over:
            raise InvalidTransition("session is over")
        fb = self.round.submit(guess)
        if self.round.outcome == SOLVED:
            self.score += self.round.points
        return fb

    def record_high_score(self, name: str) -> None:
        if not self.game_over:
            raise InvalidTransition("high scores are recorded after the session ends")
        self.leaderboard.submit(name, self.score)
        self.awaiting_name = False

    def time_left_display(self) -> str:
        """Session clock as M:SS."""
        return f"{self.time_left // 60}:{self.time_left % 60:02d}"

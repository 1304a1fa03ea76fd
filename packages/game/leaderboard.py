from __future__ import annotations
import json
from dataclasses import dataclass
from typing import List

from .config import LEADERBOARD_SIZE


@dataclass(frozen=True)
class Entry:
    name: str
    score: int


class Leaderboard:
    """
    Top-N high-score table (N=5 by default), best first.

    Storage is the caller's business; `to_json` / `from_json` give it
    something to store.
    """

    def __init__(self, size: int = LEADERBOARD_SIZE):
        self.size = int(size)
        self.entries: List[Entry] = []

    def qualifies(self, score: int) -> bool:
        """
        A score makes the table while it has free slots, or when it strictly
        beats the current lowest entry.
        """
        if len(self.entries) < self.size:
            return True
        return score > min(e.score for e in self.entries)

    def submit(self, name: str, score: int) -> List[Entry]:
        """
        Insert a score and keep only the best `size` entries.
        Ties keep the earlier entry ahead (stable sort).
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("player name must not be empty")
        ranked = sorted(self.entries + [Entry(name, int(score))], key=lambda e: e.score, reverse=True)
        self.entries = ranked[: self.size]
        return list(self.entries)

    # ---- persistence ----
    def to_json(self) -> str:
        return json.dumps([{"name": e.name, "score": e.score} for e in self.entries])

    @staticmethod
    def from_json(s: str, size: int = LEADERBOARD_SIZE) -> "Leaderboard":
        board = Leaderboard(size=size)
        rows = json.loads(s) if s else []
        board.entries = sorted(
            (Entry(str(r["name"]), int(r["score"])) for r in rows),
            key=lambda e: e.score, reverse=True,
        )[:size]
        return board

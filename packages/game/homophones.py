"""
Homophone matching games.

MemoryGame: 4 pairs are dealt as 8 face-down cards in random order. The
player turns over two cards; a homophone pair is a match (+10, cards stay
up), anything else counts as an incorrect attempt and the two cards turn
back over once the hold countdown runs out. While a pair is being shown,
further flips are ignored.

MatchGame: 6 pairs laid out in two columns, first words on the left in deal
order, second words on the right shuffled. Selecting one item on each side
checks the pair; matched items are locked.

Like Round, both games only move on `tick()` and own a seeded RNG, so a
given seed always deals the same layout.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from packages.datasets.deck import HomophonePair

from .config import (
    MATCH_MESSAGE_TICKS, MATCH_PAIRS, MEMORY_MATCH_HOLD_TICKS, MEMORY_MISS_HOLD_TICKS,
    MEMORY_PAIRS, PAIR_POINTS,
)
from .errors import GameError

logger = logging.getLogger(__name__)

MEMORY_MATCH_MESSAGE = "Correct! These words sound the same but have different meanings!"
MEMORY_MISS_MESSAGE = "Not a match! These words sound different."
MEMORY_DONE_MESSAGE = "Congratulations! You've matched all the homophones!"
MATCH_FOUND_MESSAGE = "Match found!"
MATCH_MISS_MESSAGE = "Not a match."


def _pick(rng: random.Random, pairs: Sequence[HomophonePair], k: int) -> List[HomophonePair]:
    if not pairs:
        raise ValueError("no homophone pairs to deal")
    return rng.sample(list(pairs), min(k, len(pairs)))


# -----------------------------
# Memory (flip two cards)
# -----------------------------

@dataclass
class MemoryCard:
    id: str
    word: str
    tip: str
    pair: str           # the word this card matches
    is_flipped: bool = False
    is_matched: bool = False


class MemoryGame:
    def __init__(self, pairs: Sequence[HomophonePair], *, total_pairs: int = MEMORY_PAIRS,
                 seed: int | None = None):
        self.pairs = list(pairs)
        self.total_pairs = int(total_pairs)
        self.rng = random.Random(seed)
        self.reset()

    def reset(self) -> None:
        """Deal a fresh layout and zero the counters."""
        dealt = _pick(self.rng, self.pairs, self.total_pairs)
        cards: List[MemoryCard] = []
        for p in dealt:
            cards.append(MemoryCard(f"{p.word1}-1", p.word1, p.tip1, p.word2))
            cards.append(MemoryCard(f"{p.word2}-2", p.word2, p.tip2, p.word1))
        self.rng.shuffle(cards)

        self.cards = cards
        self.pair_count = len(dealt)
        self.flipped: List[MemoryCard] = []
        self.matched_pairs = 0
        self.score = 0
        self.attempts = 0
        self.incorrect_attempts = 0
        self.message = ""
        self.last_match: Optional[Tuple[MemoryCard, MemoryCard]] = None
        self.hold = 0

    @property
    def checking(self) -> bool:
        return len(self.flipped) == 2

    @property
    def complete(self) -> bool:
        return self.matched_pairs == self.pair_count

    def card(self, card_id: str) -> MemoryCard:
        for c in self.cards:
            if c.id == card_id:
                return c
        raise GameError(f"unknown card id: {card_id!r}")

    def flip(self, card_id: str) -> bool:
        """
        Turn a card face up. Returns False when the flip is ignored: a pair
        is still being shown, or the card is already up or matched.
        """
        c = self.card(card_id)
        if self.checking or c.is_flipped or c.is_matched:
            return False
        c.is_flipped = True
        self.flipped.append(c)
        if self.checking:
            self._check()
        return True

    def _check(self) -> None:
        a, b = self.flipped
        self.attempts += 1
        if a.word == b.pair or a.pair == b.word:
            a.is_matched = b.is_matched = True
            self.matched_pairs += 1
            self.score += PAIR_POINTS
            self.last_match = (a, b)
            self.message = MEMORY_MATCH_MESSAGE
            self.hold = MEMORY_MATCH_HOLD_TICKS
            logger.debug("memory match %s/%s (%d/%d)", a.word, b.word,
                         self.matched_pairs, self.pair_count)
        else:
            self.incorrect_attempts += 1
            self.message = MEMORY_MISS_MESSAGE
            self.hold = MEMORY_MISS_HOLD_TICKS

    def tick(self) -> None:
        if not self.checking:
            return
        if self.hold <= 1:
            self.settle()
        else:
            self.hold -= 1

    def settle(self) -> None:
        """End the hold now: unmatched cards turn back over, input reopens."""
        for c in self.flipped:
            if not c.is_matched:
                c.is_flipped = False
        self.flipped = []
        self.hold = 0
        self.message = MEMORY_DONE_MESSAGE if self.complete else ""


# -----------------------------
# Two-column match
# -----------------------------

@dataclass
class MatchItem:
    id: str
    word: str
    pair: str
    matched: bool = False


class MatchGame:
    def __init__(self, pairs: Sequence[HomophonePair], *, total_pairs: int = MATCH_PAIRS,
                 seed: int | None = None):
        self.pairs = list(pairs)
        self.total_pairs = int(total_pairs)
        self.rng = random.Random(seed)
        self.reset()

    def reset(self) -> None:
        dealt = _pick(self.rng, self.pairs, self.total_pairs)
        self.left = [MatchItem(f"left-{i}", p.word1, p.word2) for i, p in enumerate(dealt)]
        right = [MatchItem(f"right-{i}", p.word2, p.word1) for i, p in enumerate(dealt)]
        self.rng.shuffle(right)
        self.right = right

        self.selected_left: Optional[MatchItem] = None
        self.selected_right: Optional[MatchItem] = None
        self.connections: List[Tuple[str, str]] = []
        self.message = ""
        self.hold = 0

    @property
    def complete(self) -> bool:
        return all(item.matched for item in self.left)

    def _find(self, items: List[MatchItem], item_id: str) -> MatchItem:
        for item in items:
            if item.id == item_id:
                return item
        raise GameError(f"unknown item id: {item_id!r}")

    def select_left(self, item_id: str) -> Optional[bool]:
        return self._select(self._find(self.left, item_id), left=True)

    def select_right(self, item_id: str) -> Optional[bool]:
        return self._select(self._find(self.right, item_id), left=False)

    def _select(self, item: MatchItem, *, left: bool) -> Optional[bool]:
        """
        Returns None while waiting for the other column (or when a matched
        item is clicked), else whether the selected pair matched.
        """
        if item.matched:
            return None
        if left:
            self.selected_left = item
        else:
            self.selected_right = item
        if self.selected_left is None or self.selected_right is None:
            return None

        a, b = self.selected_left, self.selected_right
        self.selected_left = self.selected_right = None
        self.hold = MATCH_MESSAGE_TICKS

        if a.pair == b.word:
            a.matched = b.matched = True
            self.connections.append((a.id, b.id))
            self.message = MATCH_FOUND_MESSAGE
            return True
        self.message = MATCH_MISS_MESSAGE
        return False

    def tick(self) -> None:
        if self.hold <= 0:
            return
        self.hold -= 1
        if self.hold == 0:
            self.message = ""

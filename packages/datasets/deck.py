"""
Word decks: the cards a spelling session draws from, and the homophone
pairs the matching games deal.

Two on-disk shapes are accepted:
  - JSON: an array of objects  {"word": "flower", "tip": "...", "pattern": "..."}
  - text: one word per line, optionally followed by a TAB and a tip

Words are kept exactly as written (case included) so tips and patterns still
line up with them; comparison is case-insensitive downstream.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .io import read_lines


@dataclass(frozen=True)
class WordCard:
    word: str
    tip: str = ""
    pattern: str = ""   # syllable/chunk hint shown on the card front


def _card_from_obj(obj) -> Optional[WordCard]:
    if not isinstance(obj, dict):
        return None
    word = obj.get("word")
    if not isinstance(word, str) or not word.strip().isalpha():
        return None
    return WordCard(word=word.strip(), tip=str(obj.get("tip") or ""), pattern=str(obj.get("pattern") or ""))


def _card_from_line(line: str) -> Optional[WordCard]:
    word, _, tip = line.partition("\t")
    word = word.strip()
    if not word.isalpha():
        return None
    return WordCard(word=word, tip=tip.strip())


def parse_deck(path: Path | str) -> Tuple[List[WordCard], int]:
    """
    Load a deck and count the entries that could not be turned into a card.

    Returns:
      (cards, invalid_count)
    """
    p = Path(path)
    cards: List[WordCard] = []
    invalid = 0

    if p.suffix.lower() == ".json":
        raw = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"{p}: expected a JSON array of word objects")
        for obj in raw:
            card = _card_from_obj(obj)
            if card is None:
                invalid += 1
            else:
                cards.append(card)
        return cards, invalid

    for line in read_lines(p):
        if not line.strip():
            invalid += 1
            continue
        card = _card_from_line(line)
        if card is None:
            invalid += 1
        else:
            cards.append(card)
    return cards, invalid


def load_deck(path: Path | str) -> List[WordCard]:
    """Load a deck, silently dropping entries that aren't valid words."""
    cards, _ = parse_deck(path)
    return cards


@dataclass(frozen=True)
class HomophonePair:
    """Two words that sound alike, each with a tip telling them apart."""
    word1: str
    word2: str
    tip1: str = ""
    tip2: str = ""


def load_pairs(path: Path | str) -> List[HomophonePair]:
    """
    Load homophone pairs from a JSON array of {word1, word2, tip1?, tip2?}.
    Entries without two distinct words are dropped.
    """
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"{p}: expected a JSON array of pair objects")
    out: List[HomophonePair] = []
    for obj in raw:
        if not isinstance(obj, dict):
            continue
        w1, w2 = obj.get("word1"), obj.get("word2")
        if not isinstance(w1, str) or not isinstance(w2, str):
            continue
        w1, w2 = w1.strip(), w2.strip()
        if not w1 or not w2 or w1.lower() == w2.lower():
            continue
        out.append(HomophonePair(w1, w2, str(obj.get("tip1") or ""), str(obj.get("tip2") or "")))
    return out

import json
from pathlib import Path

import pytest
from packages.datasets import HomophonePair, load_pairs
from packages.game import GameError, MatchGame, MemoryGame

PAIRS = [
    HomophonePair("flower", "flour", "a bloom", "for baking"),
    HomophonePair("knight", "night", "in armour", "after dark"),
    HomophonePair("sea", "see", "salt water", "with your eyes"),
    HomophonePair("pair", "pear", "two of a kind", "a fruit"),
    HomophonePair("right", "write", "correct", "with a pen"),
    HomophonePair("hear", "here", "with your ears", "this place"),
    HomophonePair("bare", "bear", "uncovered", "the animal"),
]


def _partner(game: MemoryGame, card_id: str) -> str:
    c = game.card(card_id)
    return next(o.id for o in game.cards if o.word == c.pair)


def _stranger(game: MemoryGame, card_id: str) -> str:
    c = game.card(card_id)
    return next(o.id for o in game.cards if o.id != c.id and o.word != c.pair)


# --- memory game ---

def test_memory_deals_four_pairs_shuffled():
    g = MemoryGame(PAIRS, seed=3)
    assert len(g.cards) == 8 and g.pair_count == 4
    words = {c.word for c in g.cards}
    for c in g.cards:
        assert c.pair in words
    assert [c.id for c in MemoryGame(PAIRS, seed=3).cards] == [c.id for c in g.cards]


def test_memory_match_scores_and_locks():
    g = MemoryGame(PAIRS, seed=1)
    first = g.cards[0].id
    assert g.flip(first) is True
    assert g.flip(_partner(g, first)) is True
    assert g.score == 10 and g.matched_pairs == 1 and g.attempts == 1
    assert g.message.startswith("Correct!")
    assert g.last_match[0].id == first

    # input is closed while the pair is shown
    assert g.flip(g.cards[1].id) is False
    for _ in range(3):
        g.tick()
    assert not g.checking and g.message == ""
    assert g.card(first).is_flipped and g.card(first).is_matched
    assert g.flip(first) is False


def test_memory_miss_flips_back():
    g = MemoryGame(PAIRS, seed=1)
    first = g.cards[0].id
    other = _stranger(g, first)
    g.flip(first)
    g.flip(other)
    assert g.incorrect_attempts == 1 and g.score == 0
    assert g.message.startswith("Not a match!")
    g.tick()
    assert g.checking
    g.tick()
    assert not g.checking
    assert not g.card(first).is_flipped and not g.card(other).is_flipped


def test_memory_complete_after_all_pairs():
    g = MemoryGame(PAIRS, seed=5)
    while not g.complete:
        first = next(c.id for c in g.cards if not c.is_matched)
        g.flip(first)
        g.flip(_partner(g, first))
        g.settle()
    assert g.score == 40 and g.attempts == 4 and g.incorrect_attempts == 0
    assert g.message.startswith("Congratulations")


def test_memory_unknown_card_and_no_pairs():
    with pytest.raises(GameError):
        MemoryGame(PAIRS, seed=1).flip("nope")
    with pytest.raises(ValueError):
        MemoryGame([])


# --- two-column match ---

def test_match_layout():
    g = MatchGame(PAIRS, seed=2)
    assert len(g.left) == 6 and len(g.right) == 6
    assert [i.id for i in g.left] == [f"left-{n}" for n in range(6)]
    assert sorted(i.pair for i in g.right) == sorted(i.word for i in g.left)


def test_match_found_and_locked():
    g = MatchGame(PAIRS, seed=2)
    left = g.left[0]
    right = next(r for r in g.right if r.word == left.pair)
    assert g.select_left(left.id) is None
    assert g.select_right(right.id) is True
    assert left.matched and right.matched
    assert g.connections == [(left.id, right.id)]
    assert g.message == "Match found!"
    g.tick()
    assert g.message == ""
    # locked items ignore clicks
    assert g.select_left(left.id) is None
    assert g.selected_left is None


def test_match_miss_clears_selection():
    g = MatchGame(PAIRS, seed=2)
    left = g.left[0]
    wrong = next(r for r in g.right if r.word != left.pair)
    g.select_right(wrong.id)
    assert g.select_left(left.id) is False
    assert g.message == "Not a match."
    assert not left.matched and not wrong.matched
    assert g.selected_left is None and g.selected_right is None


def test_match_complete():
    g = MatchGame(PAIRS, seed=9)
    for left in g.left:
        right = next(r for r in g.right if r.word == left.pair)
        g.select_left(left.id)
        g.select_right(right.id)
    assert g.complete and len(g.connections) == 6
    with pytest.raises(GameError):
        g.select_right("right-99")


def test_load_pairs(tmp_path: Path):
    p = tmp_path / "homophones.json"
    p.write_text(json.dumps([
        {"word1": "flower", "word2": "flour", "tip1": "a bloom", "tip2": "for baking"},
        {"word1": "same", "word2": "Same"},
        {"word1": "sea"},
        "junk",
    ]), encoding="utf-8")
    assert load_pairs(p) == [HomophonePair("flower", "flour", "a bloom", "for baking")]

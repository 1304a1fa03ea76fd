import pytest
from packages.game import Leaderboard


def _full_board():
    b = Leaderboard()
    for name, sc in [("a", 50), ("b", 40), ("c", 30), ("d", 20), ("e", 10)]:
        b.submit(name, sc)
    return b


def test_empty_board_accepts_anything():
    assert Leaderboard().qualifies(0) is True


def test_full_board_needs_to_beat_the_lowest():
    b = _full_board()
    assert b.qualifies(10) is False
    assert b.qualifies(11) is True


def test_submit_keeps_top_five_sorted():
    b = _full_board()
    b.submit("f", 35)
    assert [e.name for e in b.entries] == ["a", "b", "f", "c", "d"]


def test_submit_rejects_blank_name():
    with pytest.raises(ValueError):
        Leaderboard().submit("   ", 10)


def test_json_roundtrip_preserves_order():
    b = _full_board()
    again = Leaderboard.from_json(b.to_json())
    assert again.entries == b.entries
    assert Leaderboard.from_json("").entries == []

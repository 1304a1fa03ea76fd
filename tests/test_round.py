import pytest
from packages.game import FAILED, SOLVED, InvalidGuess, InvalidTransition, Phase, Round, round_score


def _guessing(word="flower", **kw):
    r = Round(word, **kw)
    r.show()
    r.flip()
    return r


@pytest.mark.parametrize("word_len,wrong,expected", [
    (6, 0, 150),
    (6, 1, 120),
    (6, 2, 90),
    (3, 2, 45),
    (5, 5, 0),
    (5, 9, 0),
])
def test_round_score(word_len, wrong, expected):
    assert round_score(word_len, wrong) == expected


def test_showing_counts_down_then_flips():
    r = Round("flower", display_seconds=5)
    assert r.phase is Phase.IDLE
    r.show()
    assert r.phase is Phase.SHOWING and r.countdown == 5
    for _ in range(4):
        assert r.tick() is Phase.SHOWING
    assert r.countdown == 1
    assert r.tick() is Phase.GUESSING


def test_solved_round_scores_and_moves_on():
    r = _guessing("flower", resolve_ticks=3)
    fb = r.submit("flour")
    assert fb.solved is False and r.phase is Phase.GUESSING
    fb = r.submit("FLOWER")
    assert fb.solved is True
    assert r.phase is Phase.RESOLVED and r.outcome == SOLVED
    assert r.points == 120

    assert r.tick() is Phase.RESOLVED
    assert r.tick() is Phase.RESOLVED
    assert r.tick() is Phase.NEXT_ROUND
    # terminal: further ticks change nothing
    assert r.tick() is Phase.NEXT_ROUND


def test_out_of_attempts_reveals_word():
    r = _guessing("flower", max_attempts=3)
    for g in ("flour", "flowr", "flwer"):
        r.submit(g)
    assert r.phase is Phase.RESOLVED
    assert r.outcome == FAILED
    assert r.points == 0
    assert r.message == 'The correct word was "flower".'
    assert r.attempts_left == 0


def test_short_guess_is_scored_with_missing_cells():
    r = _guessing("flower")
    fb = r.submit("flo")
    assert fb.pattern == "GGG___"
    assert fb.length_note == "3 letters missing"
    assert r.attempts_left == 2


@pytest.mark.parametrize("bad", ["", "   ", "fl0wer", "flowers"])
def test_invalid_guess_does_not_use_an_attempt(bad):
    r = _guessing("flower")
    with pytest.raises(InvalidGuess):
        r.submit(bad)
    assert r.history == []


def test_wrong_phase_operations_raise():
    r = Round("flower")
    with pytest.raises(InvalidTransition):
        r.submit("flower")
    with pytest.raises(InvalidTransition):
        r.flip()
    r.show()
    with pytest.raises(InvalidTransition):
        r.show()
    with pytest.raises(InvalidTransition):
        r.submit("flower")
    assert r.tick() is Phase.SHOWING
    r.flip()
    r.submit("flower")
    with pytest.raises(InvalidTransition):
        r.submit("flower")

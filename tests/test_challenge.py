from datetime import datetime, timezone

import pytest
from packages.challenge import (
    CHALLENGE_DAYS, TaskTemplate, advance_day, complete_task, completion_rate, day_tasks,
    start_challenge, uncomplete_task,
)

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)

TEMPLATES = [
    TaskTemplate("read", "Read 10 pages", "daily", list(range(1, 29))),
    TaskTemplate("stretch", "Stretch", "daily", [1, 3, 5]),
    TaskTemplate("review", "Weekly review", "weekly", [1, 2, 3, 4]),
    TaskTemplate("letter", "Write a letter", "monthly", [1]),
]


def _progress_on(day):
    p = start_challenge("u1", "c1", "l1", now=T0)
    for _ in range(day - 1):
        p = advance_day(p)
    return p


def test_start_challenge():
    p = start_challenge("u1", "c1", "l1", now=T0)
    assert p.current_day == 1 and p.task_completions == {}
    assert p.start_date == T0 and len(p.id) == 9


def test_unknown_schedule_type_rejected():
    with pytest.raises(ValueError):
        TaskTemplate("x", "X", "yearly", [1])


def test_day_tasks_lists_by_schedule():
    p = _progress_on(1)
    assert [t.id for t in day_tasks(p, TEMPLATES)] == ["read", "stretch", "review", "letter"]
    assert [t.id for t in day_tasks(p, TEMPLATES, day=2)] == ["read", "review", "letter"]
    assert day_tasks(None, TEMPLATES) == []


def test_weekly_task_done_anywhere_in_the_week():
    p = complete_task(_progress_on(2), "review", notes="done early", now=T0)
    tasks = {t.id: t for t in day_tasks(p, TEMPLATES, day=5)}
    assert tasks["review"].completed is True
    assert tasks["review"].notes == "done early"
    # a day before the completion does not see it yet
    assert {t.id: t for t in day_tasks(p, TEMPLATES, day=1)}["review"].completed is False
    # next week starts fresh
    assert {t.id: t for t in day_tasks(p, TEMPLATES, day=8)}["review"].completed is False


def test_monthly_task_stays_done():
    p = complete_task(_progress_on(3), "letter", now=T0)
    assert {t.id: t for t in day_tasks(p, TEMPLATES, day=20)}["letter"].completed is True


def test_complete_is_immutable_and_uncomplete_removes():
    p = _progress_on(1)
    done = complete_task(p, "read", now=T0)
    assert p.task_completions == {}
    assert done.task_completions[1]["read"].completed_at == T0

    undone = uncomplete_task(done, "read")
    assert "read" not in undone.task_completions[1]
    assert "read" in done.task_completions[1]


def test_advance_day_caps_at_challenge_length():
    p = _progress_on(CHALLENGE_DAYS)
    assert p.current_day == CHALLENGE_DAYS
    assert advance_day(p) is p


def test_completion_rate():
    assert completion_rate(None, TEMPLATES) == 0.0
    assert completion_rate(_progress_on(1), []) == 0.0

    # day 1: read, stretch, review, letter -> all four done
    p = _progress_on(1)
    for tid in ("read", "stretch", "review", "letter"):
        p = complete_task(p, tid, now=T0)
    assert completion_rate(p, TEMPLATES) == 1.0

    # day 2 lists read, review, letter; nothing recorded on day 2
    p = advance_day(p)
    assert completion_rate(p, TEMPLATES) == pytest.approx(4 / 7)

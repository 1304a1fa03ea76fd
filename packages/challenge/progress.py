"""
Challenge progress operations.

Scheduling rules for a given day D:
  - daily:   listed when D is in the template's occurrences.
  - weekly:  listed when week ceil(D/7) is in the occurrences; counts as done
             if completed on any day of that week up to and including D.
  - monthly: listed every day when the occurrences include 1; counts as done
             if completed on any day from 1 to D.

Completion rate walks days 1..current_day and credits a listed task only if
a completion was recorded on that very day, so a weekly task finished once
counts once, not seven times.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from .models import (
    CHALLENGE_DAYS, DAYS_PER_WEEK, ChallengeProgress, DayTask, TaskCompletion, TaskTemplate,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def start_challenge(user_id: str, challenge_id: str, level_id: str,
                    *, now: datetime | None = None) -> ChallengeProgress:
    return ChallengeProgress(
        id=uuid.uuid4().hex[:9],
        user_id=user_id,
        challenge_id=challenge_id,
        level_id=level_id,
        start_date=now or _now(),
        current_day=1,
        task_completions={},
    )


def _done(progress: ChallengeProgress, day: int, template_id: str) -> Optional[TaskCompletion]:
    c = progress.task_completions.get(day, {}).get(template_id)
    return c if c is not None and c.completed else None


def _first_done(progress: ChallengeProgress, days: Iterable[int],
                template_id: str) -> Tuple[bool, Optional[TaskCompletion]]:
    for d in days:
        c = _done(progress, d, template_id)
        if c is not None:
            return True, c
    return False, None


def day_tasks(progress: Optional[ChallengeProgress], templates: Iterable[TaskTemplate],
              day: int | None = None) -> List[DayTask]:
    """
    Tasks listed on `day` (default: the current day), daily first, then
    weekly, then monthly. Returns [] when there is no progress.
    """
    if progress is None:
        return []

    templates = list(templates)
    target = day or progress.current_day
    week = -(-target // DAYS_PER_WEEK)  # ceil
    week_start = (week - 1) * DAYS_PER_WEEK + 1

    out: List[DayTask] = []

    for t in templates:
        if t.schedule_type == "daily" and target in t.occurrences:
            c = _done(progress, target, t.id)
            out.append(DayTask(t, c is not None,
                               c.completed_at if c else None, c.notes if c else None))

    week_days = range(week_start, target + 1)
    for t in templates:
        if t.schedule_type == "weekly" and week in t.occurrences:
            ok, c = _first_done(progress, week_days, t.id)
            out.append(DayTask(t, ok, c.completed_at if c else None, c.notes if c else None))

    month_days = range(1, target + 1)
    for t in templates:
        if t.schedule_type == "monthly" and 1 in t.occurrences:
            ok, c = _first_done(progress, month_days, t.id)
            out.append(DayTask(t, ok, c.completed_at if c else None, c.notes if c else None))

    return out


def complete_task(progress: ChallengeProgress, template_id: str, notes: str | None = None,
                  *, now: datetime | None = None) -> ChallengeProgress:
    """Mark a task done on the current day."""
    day = progress.current_day
    completions = dict(progress.task_completions)
    completions[day] = {
        **completions.get(day, {}),
        template_id: TaskCompletion(completed=True, completed_at=now or _now(), notes=notes),
    }
    return replace(progress, task_completions=completions)


def uncomplete_task(progress: ChallengeProgress, template_id: str) -> ChallengeProgress:
    """Drop the current day's completion for a task (other days are untouched)."""
    day = progress.current_day
    completions = dict(progress.task_completions)
    completions[day] = {k: v for k, v in completions.get(day, {}).items() if k != template_id}
    return replace(progress, task_completions=completions)


def advance_day(progress: ChallengeProgress) -> ChallengeProgress:
    if progress.current_day >= CHALLENGE_DAYS:
        return progress
    return replace(progress, current_day=progress.current_day + 1)


def completion_rate(progress: Optional[ChallengeProgress],
                    templates: Iterable[TaskTemplate]) -> float:
    """Share of listed tasks, over days 1..current_day, completed on the day listed."""
    if progress is None:
        return 0.0

    templates = list(templates)
    total = 0
    completed = 0
    for day in range(1, (progress.current_day or 1) + 1):
        listed = day_tasks(progress, templates, day)
        total += len(listed)
        completed += sum(1 for t in listed if _done(progress, day, t.id) is not None)

    return 0.0 if total == 0 else completed / total

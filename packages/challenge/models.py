"""
Data model for multi-day challenges.

Progress is immutable: every update in `progress.py` returns a new
ChallengeProgress, leaving the caller's copy untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Literal, Optional, Tuple

ScheduleType = Literal["daily", "weekly", "monthly"]

# Length of a challenge; also the last day `advance_day` will move to.
CHALLENGE_DAYS = 28
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class TaskTemplate:
    """
    A task definition.

    `occurrences` means days (1..28) for daily tasks, weeks (1..4) for weekly
    tasks; a monthly task is active when its occurrences include 1.
    """
    id: str
    name: str
    schedule_type: ScheduleType
    occurrences: Tuple[int, ...]
    details: str = ""
    content: str = ""
    level_id: str = ""

    def __post_init__(self):
        if self.schedule_type not in ("daily", "weekly", "monthly"):
            raise ValueError(f"unknown schedule type: {self.schedule_type!r}")
        object.__setattr__(self, "occurrences", tuple(int(o) for o in self.occurrences))


@dataclass(frozen=True)
class TaskCompletion:
    completed: bool = True
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None


# day -> template id -> completion
Completions = Dict[int, Dict[str, TaskCompletion]]


@dataclass(frozen=True)
class ChallengeProgress:
    id: str
    user_id: str
    challenge_id: str
    level_id: str
    start_date: datetime
    current_day: int = 1
    task_completions: Completions = field(default_factory=dict)


@dataclass(frozen=True)
class DayTask:
    """A template as seen on a given day, with its completion state."""
    template: TaskTemplate
    completed: bool
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None

    @property
    def id(self) -> str:
        return self.template.id

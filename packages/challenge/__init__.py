from .models import (
    CHALLENGE_DAYS, ChallengeProgress, DayTask, TaskCompletion, TaskTemplate,
)
from .progress import (
    advance_day, complete_task, completion_rate, day_tasks, start_challenge, uncomplete_task,
)

__all__ = [
    "CHALLENGE_DAYS", "ChallengeProgress", "DayTask", "TaskCompletion", "TaskTemplate",
    "advance_day", "complete_task", "completion_rate", "day_tasks", "start_challenge",
    "uncomplete_task",
]

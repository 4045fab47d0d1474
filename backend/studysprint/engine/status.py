"""Day status classification."""
from __future__ import annotations

from typing import Optional, Sequence

from studysprint.engine.types import DailyLog, DayStatus, Task


def compute_day_status(
    date: str,
    tasks: Sequence[Task],
    log: Optional[DailyLog],
    today: str,
) -> DayStatus:
    """Classify a plan day relative to ``today``.

    Past days are ``done`` only when they had at least one required task and
    every required task was completed. A past day with no required tasks and
    nothing completed is ``behind``.
    """
    if date > today:
        return DayStatus.FUTURE
    if date == today:
        return DayStatus.TODAY

    completed = set(log.completed_task_ids) if log else set()
    required = [task for task in tasks if task.required]
    all_required_done = all(task.id in completed for task in required)

    if all_required_done and required:
        return DayStatus.DONE
    if any(task.id in completed for task in tasks):
        return DayStatus.PARTIAL
    return DayStatus.BEHIND

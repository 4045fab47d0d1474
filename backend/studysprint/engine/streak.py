"""Consecutive-day streak calculation."""
from __future__ import annotations

from typing import Sequence

from studysprint.engine.dates import previous_date
from studysprint.engine.types import GeneratedDay, LogMap


def compute_streak(
    days: Sequence[GeneratedDay],
    logs: LogMap,
    min_tasks_per_day: int,
    today: str,
) -> int:
    """Count consecutive plan days, ending at or before ``today``, that met the threshold.

    The walk runs from the most recent day backwards. ``today`` falling short
    of the threshold does not end the walk (the day is still in progress), but
    any earlier day that falls short, or a missing calendar day once counting
    has started, does.
    """
    elapsed = sorted((day for day in days if day.date <= today), key=lambda day: day.date, reverse=True)

    streak = 0
    expected = today
    for day in elapsed:
        if day.date != expected and streak > 0:
            break

        log = logs.get(day.date)
        completed_count = len(log.completed_task_ids) if log else 0
        if completed_count >= min_tasks_per_day:
            streak += 1
            expected = previous_date(day.date)
        elif day.date != today:
            break

    return streak

"""Per-day progress summaries."""
from __future__ import annotations

import math
from typing import Iterable, Sequence

from studysprint.engine.types import DayProgress, Task


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (``round`` would round to even)."""
    return int(math.floor(value + 0.5))


def compute_day_progress(tasks: Sequence[Task], completed_task_ids: Iterable[str]) -> DayProgress:
    """Summarise how much of a day's planned work is complete.

    Ids in ``completed_task_ids`` that match no task in ``tasks`` are ignored;
    a log may hold ids of tasks planned for other days.
    """
    completed = set(completed_task_ids)

    minutes_planned = 0
    minutes_done = 0
    completed_tasks = 0
    required_tasks = 0
    completed_required = 0

    for task in tasks:
        minutes_planned += task.estimated_minutes
        is_done = task.id in completed
        if is_done:
            minutes_done += task.estimated_minutes
            completed_tasks += 1
        if task.required:
            required_tasks += 1
            if is_done:
                completed_required += 1

    percent = round_half_up(minutes_done / minutes_planned * 100) if minutes_planned > 0 else 0

    return DayProgress(
        minutes_planned=minutes_planned,
        minutes_done=minutes_done,
        percent=percent,
        total_tasks=len(tasks),
        completed_tasks=completed_tasks,
        required_tasks=required_tasks,
        completed_required_tasks=completed_required,
    )

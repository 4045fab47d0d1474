"""Experience points and levels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from studysprint.engine.types import GeneratedDay, LogMap, Task, completed_ids_for

XP_PER_TASK = 10
XP_BONUS_REQUIRED = 5
XP_BONUS_DAY_COMPLETE = 50
XP_PER_LEVEL = 500


@dataclass(frozen=True)
class LevelInfo:
    level: int
    xp_into_level: int
    xp_for_next_level: int


def compute_day_xp(tasks: Sequence[Task], completed_task_ids: Iterable[str]) -> int:
    completed = set(completed_task_ids)
    xp = 0
    required_count = 0
    required_done = 0

    for task in tasks:
        if task.required:
            required_count += 1
        if task.id not in completed:
            continue
        xp += XP_PER_TASK
        if task.required:
            xp += XP_BONUS_REQUIRED
            required_done += 1

    # Days without required work never earn the completion bonus.
    if required_count > 0 and required_done == required_count:
        xp += XP_BONUS_DAY_COMPLETE

    return xp


def compute_total_xp(days: Sequence[GeneratedDay], logs: LogMap) -> int:
    return sum(compute_day_xp(day.tasks, completed_ids_for(logs, day.date)) for day in days)


def level_for_xp(total_xp: int) -> LevelInfo:
    """Levels start at 1 and advance every ``XP_PER_LEVEL`` points."""
    xp = max(total_xp, 0)
    return LevelInfo(
        level=xp // XP_PER_LEVEL + 1,
        xp_into_level=xp % XP_PER_LEVEL,
        xp_for_next_level=XP_PER_LEVEL - xp % XP_PER_LEVEL,
    )

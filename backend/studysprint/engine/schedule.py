"""Behind-schedule detection and recovery ordering."""
from __future__ import annotations

from typing import List, Sequence

from studysprint.engine.types import BehindStatus, GeneratedDay, LogMap, PendingTask, completed_ids_for


def compute_behind_status(days: Sequence[GeneratedDay], logs: LogMap, today: str) -> BehindStatus:
    """Collect required tasks left incomplete on days strictly before ``today``."""
    pending: List[PendingTask] = []

    for day in days:
        if day.date >= today:
            continue
        completed = completed_ids_for(logs, day.date)
        for task in day.tasks:
            if task.required and task.id not in completed:
                pending.append(PendingTask(day_index=day.day_index, date=day.date, task=task))

    pending.sort(key=lambda item: (item.day_index, item.task.order))

    return BehindStatus(
        is_behind=bool(pending),
        pending_required_count=len(pending),
        pending_list=pending,
    )


def generate_recovery_plan(status: BehindStatus) -> List[PendingTask]:
    """Order overdue work as quick wins first, oldest debt breaking ties.

    Only a sort: no time budget is applied and future tasks are not mixed in.
    """
    return sorted(
        status.pending_list,
        key=lambda item: (
            0 if item.task.required else 1,
            item.task.estimated_minutes,
            item.day_index,
        ),
    )

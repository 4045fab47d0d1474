"""Resolve stored plan days into dated, scored ``GeneratedDay`` snapshots."""
from __future__ import annotations

from typing import List, Sequence

from studysprint.engine.dates import add_days
from studysprint.engine.progress import compute_day_progress
from studysprint.engine.status import compute_day_status
from studysprint.engine.types import GeneratedDay, LogMap, PlanDaySnapshot, completed_ids_for
from studysprint.engine.xp import compute_day_xp


def build_generated_days(
    start_date: str,
    plan_days: Sequence[PlanDaySnapshot],
    logs: LogMap,
    today: str,
) -> List[GeneratedDay]:
    generated: List[GeneratedDay] = []
    for plan_day in sorted(plan_days, key=lambda item: item.day_index):
        date = add_days(start_date, plan_day.day_index - 1)
        tasks = tuple(sorted(plan_day.tasks, key=lambda task: task.order))
        completed = completed_ids_for(logs, date)

        generated.append(
            GeneratedDay(
                day_index=plan_day.day_index,
                date=date,
                tasks=tasks,
                day_id=plan_day.day_id,
                title=plan_day.title,
                theme=plan_day.theme,
                status=compute_day_status(date, tasks, logs.get(date), today),
                progress=compute_day_progress(tasks, completed),
                xp=compute_day_xp(tasks, completed),
            )
        )
    return generated

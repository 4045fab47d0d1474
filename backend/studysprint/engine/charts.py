"""Time series for the progress, burndown and daily charts."""
from __future__ import annotations

from typing import List, Sequence

from studysprint.engine.progress import compute_day_progress, round_half_up
from studysprint.engine.types import (
    BurndownPoint,
    ChartsSeries,
    DailyPoint,
    GeneratedDay,
    LogMap,
    ProgressPoint,
    completed_ids_for,
)


def compute_charts_series(days: Sequence[GeneratedDay], logs: LogMap, today: str) -> ChartsSeries:
    """Build one point per plan day, in ``day_index`` order, for each chart.

    ``target`` and ``ideal`` are rounded from the exact linear reference every
    day instead of accumulating a rounded daily increment.
    """
    ordered = sorted(days, key=lambda day: day.day_index)
    total_minutes = sum(task.estimated_minutes for day in ordered for task in day.tasks)
    total_days = len(ordered)

    progress: List[ProgressPoint] = []
    burndown: List[BurndownPoint] = []
    daily: List[DailyPoint] = []
    if total_days == 0:
        return ChartsSeries(progress=progress, burndown=burndown, daily=daily)

    ideal_per_day = total_minutes / total_days
    cumulative = 0
    remaining = total_minutes

    for i, day in enumerate(ordered):
        summary = compute_day_progress(day.tasks, completed_ids_for(logs, day.date))
        cumulative += summary.minutes_done
        remaining -= summary.minutes_done
        label = f"Day {day.day_index}"
        log = logs.get(day.date)

        progress.append(
            ProgressPoint(
                date=day.date,
                day_index=day.day_index,
                label=label,
                cumulative=cumulative,
                target=round_half_up(ideal_per_day * (i + 1)),
            )
        )
        burndown.append(
            BurndownPoint(
                date=day.date,
                day_index=day.day_index,
                label=label,
                remaining=remaining,
                ideal=round_half_up(total_minutes - ideal_per_day * (i + 1)),
            )
        )
        daily.append(
            DailyPoint(
                date=day.date,
                day_index=day.day_index,
                label=label,
                planned=summary.minutes_planned,
                completed=summary.minutes_done,
                hours_spent=log.hours_spent if log else 0,
            )
        )

    return ChartsSeries(progress=progress, burndown=burndown, daily=daily)

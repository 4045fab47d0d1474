"""Convert ORM rows and engine values into response schemas."""
from __future__ import annotations

from typing import List, Optional

from studysprint import engine
from studysprint.api.schemas.dashboard import (
    BehindStatusPayload,
    BurndownChartPoint,
    DailyChartPoint,
    PendingTaskPayload,
    ProgressChartPoint,
)
from studysprint.api.schemas.day import DayResponse, DayWithTasksResponse
from studysprint.api.schemas.generated import DayProgressPayload, GeneratedDayPayload, GeneratedTask
from studysprint.api.schemas.log import DailyLogResponse
from studysprint.api.schemas.plan import PlanResponse
from studysprint.api.schemas.task import TaskResponse
from studysprint.db.models.daily_log import DailyLog
from studysprint.db.models.plan import Plan
from studysprint.db.models.plan_day import PlanDay
from studysprint.db.models.task import Task


def serialize_plan(plan: Plan, day_count: int) -> PlanResponse:
    return PlanResponse(
        id=plan.id,
        name=plan.name,
        is_active=bool(plan.is_active),
        day_count=day_count,
        created_at=plan.created_at,
        updated_at=plan.updated_at,
    )


def serialize_task(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        plan_day_id=task.plan_day_id,
        title=task.title,
        description=task.description,
        category=task.category,
        estimated_minutes=task.estimated_minutes,
        required=bool(task.required),
        tags=list(task.tags or []),
        order=task.sort_order,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def serialize_day(day: PlanDay) -> DayResponse:
    return DayResponse(
        id=day.id,
        plan_id=day.plan_id,
        day_index=day.day_index,
        title=day.title,
        theme=day.theme,
        created_at=day.created_at,
        updated_at=day.updated_at,
    )


def serialize_day_with_tasks(day: PlanDay, tasks: List[Task]) -> DayWithTasksResponse:
    return DayWithTasksResponse(
        **serialize_day(day).model_dump(),
        tasks=[serialize_task(task) for task in tasks],
    )


def serialize_log(log: Optional[DailyLog], date: str) -> DailyLogResponse:
    """Serialize a stored log, or the empty structure for a date with no log."""
    if log is None:
        return DailyLogResponse(
            id=None,
            date=date,
            completed_task_ids=[],
            hours_spent=0,
            pipeline_applications=0,
            pipeline_messages=0,
            reflection_text="",
            finalized_at=None,
            created_at=None,
            updated_at=None,
        )
    return DailyLogResponse(
        id=log.id,
        date=log.date,
        completed_task_ids=list(log.completed_task_ids or []),
        hours_spent=log.hours_spent,
        pipeline_applications=log.pipeline_applications,
        pipeline_messages=log.pipeline_messages,
        reflection_text=log.reflection_text or "",
        finalized_at=log.finalized_at,
        created_at=log.created_at,
        updated_at=log.updated_at,
    )


def engine_task_payload(task: engine.Task) -> GeneratedTask:
    return GeneratedTask(
        id=task.id,
        title=task.title,
        description=task.description,
        category=task.category,
        estimated_minutes=task.estimated_minutes,
        required=task.required,
        tags=list(task.tags),
        order=task.order,
    )


def progress_payload(progress: engine.DayProgress) -> DayProgressPayload:
    return DayProgressPayload(
        minutes_planned=progress.minutes_planned,
        minutes_done=progress.minutes_done,
        percent=progress.percent,
        total_tasks=progress.total_tasks,
        completed_tasks=progress.completed_tasks,
        required_tasks=progress.required_tasks,
        completed_required_tasks=progress.completed_required_tasks,
    )


def generated_day_payload(day: engine.GeneratedDay) -> GeneratedDayPayload:
    return GeneratedDayPayload(
        day_id=day.day_id,
        day_index=day.day_index,
        date=day.date,
        title=day.title,
        theme=day.theme,
        tasks=[engine_task_payload(task) for task in day.tasks],
        status=day.status.value,
        progress=progress_payload(day.progress),
        xp=day.xp,
    )


def pending_payload(item: engine.PendingTask) -> PendingTaskPayload:
    return PendingTaskPayload(day_index=item.day_index, date=item.date, task=engine_task_payload(item.task))


def behind_payload(status: engine.BehindStatus) -> BehindStatusPayload:
    return BehindStatusPayload(
        is_behind=status.is_behind,
        pending_required_count=status.pending_required_count,
        pending_list=[pending_payload(item) for item in status.pending_list],
    )


def charts_payload(series: engine.ChartsSeries) -> dict:
    return {
        "progress": [ProgressChartPoint(**vars(point)) for point in series.progress],
        "burndown": [BurndownChartPoint(**vars(point)) for point in series.burndown],
        "daily": [DailyChartPoint(**vars(point)) for point in series.daily],
    }

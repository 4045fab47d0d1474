"""Load stored plans and logs into engine snapshots."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import asc
from sqlalchemy.orm import Session

from studysprint import engine
from studysprint.db.models.daily_log import DailyLog
from studysprint.db.models.plan import Plan
from studysprint.db.models.plan_day import PlanDay
from studysprint.db.models.task import Task
from studysprint.db.models.user_settings import UserSettings
from studysprint.engine.dates import today_in_timezone
from studysprint.services.user_service import get_or_create_settings


@dataclass
class ActivePlanView:
    plan: Plan
    settings: UserSettings
    today: str
    days: List[engine.GeneratedDay]
    logs: Dict[str, engine.DailyLog]


def to_engine_task(task: Task) -> engine.Task:
    return engine.Task(
        id=str(task.id),
        title=task.title,
        category=task.category,
        estimated_minutes=task.estimated_minutes,
        required=bool(task.required),
        order=task.sort_order or 0,
        description=task.description,
        tags=tuple(task.tags or ()),
    )


def to_engine_log(log: DailyLog) -> engine.DailyLog:
    return engine.DailyLog(
        date=log.date,
        completed_task_ids=tuple(log.completed_task_ids or ()),
        hours_spent=float(log.hours_spent or 0),
        pipeline_applications=log.pipeline_applications or 0,
        pipeline_messages=log.pipeline_messages or 0,
        reflection_text=log.reflection_text or "",
        finalized_at=log.finalized_at,
    )


def load_log_map(db: Session, user_id: UUID) -> Dict[str, engine.DailyLog]:
    """Index every log the user has by its date."""
    logs = db.query(DailyLog).filter(DailyLog.user_id == user_id).all()
    return {log.date: to_engine_log(log) for log in logs}


def load_plan_days(db: Session, plan_id: UUID) -> List[engine.PlanDaySnapshot]:
    days = (
        db.query(PlanDay)
        .filter(PlanDay.plan_id == plan_id)
        .order_by(asc(PlanDay.day_index))
        .all()
    )
    day_ids = [day.id for day in days]
    tasks_by_day: Dict[UUID, List[Task]] = {day_id: [] for day_id in day_ids}
    if day_ids:
        tasks = (
            db.query(Task)
            .filter(Task.plan_day_id.in_(day_ids))
            .order_by(asc(Task.sort_order), asc(Task.created_at))
            .all()
        )
        for task in tasks:
            tasks_by_day[task.plan_day_id].append(task)

    return [
        engine.PlanDaySnapshot(
            day_index=day.day_index,
            tasks=tuple(to_engine_task(task) for task in tasks_by_day[day.id]),
            day_id=str(day.id),
            title=day.title,
            theme=day.theme,
        )
        for day in days
    ]


def get_active_plan(db: Session, user_id: UUID) -> Optional[Plan]:
    return (
        db.query(Plan)
        .filter(Plan.user_id == user_id, Plan.is_active.is_(True))
        .order_by(Plan.updated_at.desc())
        .first()
    )


def load_active_plan_view(db: Session, user_id: UUID, today: Optional[str] = None) -> Optional[ActivePlanView]:
    """Build the dated view of the user's active plan, or ``None`` when no plan is active.

    ``today`` defaults to the current date in the user's configured timezone.
    """
    plan = get_active_plan(db, user_id)
    if plan is None:
        return None

    user_settings = get_or_create_settings(db, user_id)
    resolved_today = today or today_in_timezone(user_settings.timezone)
    logs = load_log_map(db, user_id)
    days = engine.build_generated_days(
        user_settings.start_date,
        load_plan_days(db, plan.id),
        logs,
        resolved_today,
    )
    return ActivePlanView(plan=plan, settings=user_settings, today=resolved_today, days=days, logs=logs)

"""Plan, day and task editing helpers shared by the routes and the importer."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import asc, func
from sqlalchemy.orm import Session

from studysprint.db.models.plan import Plan
from studysprint.db.models.plan_day import PlanDay
from studysprint.db.models.task import Task

logger = logging.getLogger(__name__)


class ReorderError(ValueError):
    """Raised when a reorder request does not name exactly the parent's children."""


def get_owned_plan(db: Session, plan_id: UUID, user_id: UUID) -> Optional[Plan]:
    return db.query(Plan).filter(Plan.id == plan_id, Plan.user_id == user_id).one_or_none()


def get_owned_day(db: Session, day_id: UUID, user_id: UUID) -> Optional[PlanDay]:
    return (
        db.query(PlanDay)
        .join(Plan, Plan.id == PlanDay.plan_id)
        .filter(PlanDay.id == day_id, Plan.user_id == user_id)
        .one_or_none()
    )


def get_owned_task(db: Session, task_id: UUID, user_id: UUID) -> Optional[Task]:
    return (
        db.query(Task)
        .join(PlanDay, PlanDay.id == Task.plan_day_id)
        .join(Plan, Plan.id == PlanDay.plan_id)
        .filter(Task.id == task_id, Plan.user_id == user_id)
        .one_or_none()
    )


def count_days(db: Session, plan_ids: Sequence[UUID]) -> Dict[UUID, int]:
    if not plan_ids:
        return {}
    rows = (
        db.query(PlanDay.plan_id, func.count(PlanDay.id))
        .filter(PlanDay.plan_id.in_(list(plan_ids)))
        .group_by(PlanDay.plan_id)
        .all()
    )
    return {plan_id: count for plan_id, count in rows}


def list_days(db: Session, plan_id: UUID) -> List[PlanDay]:
    return db.query(PlanDay).filter(PlanDay.plan_id == plan_id).order_by(asc(PlanDay.day_index)).all()


def list_tasks(db: Session, day_id: UUID) -> List[Task]:
    return (
        db.query(Task)
        .filter(Task.plan_day_id == day_id)
        .order_by(asc(Task.sort_order), asc(Task.created_at))
        .all()
    )


def next_day_index(db: Session, plan_id: UUID) -> int:
    current = db.query(func.max(PlanDay.day_index)).filter(PlanDay.plan_id == plan_id).scalar()
    return (current or 0) + 1


def next_task_order(db: Session, day_id: UUID) -> int:
    current = db.query(func.max(Task.sort_order)).filter(Task.plan_day_id == day_id).scalar()
    return 0 if current is None else current + 1


def activate_plan(db: Session, plan: Plan) -> None:
    """Make ``plan`` the user's only active plan."""
    (
        db.query(Plan)
        .filter(Plan.user_id == plan.user_id, Plan.id != plan.id, Plan.is_active.is_(True))
        .update({Plan.is_active: False}, synchronize_session=False)
    )
    plan.is_active = True


def delete_day_and_reindex(db: Session, day: PlanDay) -> None:
    """Delete ``day`` and shift later days down so indexes stay contiguous."""
    plan_id = day.plan_id
    deleted_index = day.day_index
    for task in list_tasks(db, day.id):
        db.delete(task)
    db.flush()
    db.delete(day)
    db.flush()
    (
        db.query(PlanDay)
        .filter(PlanDay.plan_id == plan_id, PlanDay.day_index > deleted_index)
        .update({PlanDay.day_index: PlanDay.day_index - 1}, synchronize_session=False)
    )


def reorder_days(db: Session, plan_id: UUID, ordered_ids: Sequence[UUID]) -> None:
    days = {day.id: day for day in list_days(db, plan_id)}
    _check_reorder(days.keys(), ordered_ids)
    for position, day_id in enumerate(ordered_ids, start=1):
        days[day_id].day_index = position


def reorder_tasks(db: Session, day_id: UUID, ordered_ids: Sequence[UUID]) -> None:
    tasks = {task.id: task for task in list_tasks(db, day_id)}
    _check_reorder(tasks.keys(), ordered_ids)
    for position, task_id in enumerate(ordered_ids):
        tasks[task_id].sort_order = position


def _check_reorder(existing, ordered_ids: Sequence[UUID]) -> None:
    if len(set(ordered_ids)) != len(ordered_ids):
        raise ReorderError("ordered_ids contains duplicates")
    if set(ordered_ids) != set(existing):
        raise ReorderError("ordered_ids must list every item exactly once")


def copy_task(task: Task, plan_day_id: UUID) -> Task:
    return Task(
        plan_day_id=plan_day_id,
        title=task.title,
        description=task.description,
        category=task.category,
        estimated_minutes=task.estimated_minutes,
        required=task.required,
        tags=list(task.tags or []),
        sort_order=task.sort_order,
    )


def duplicate_plan(db: Session, plan: Plan) -> Plan:
    """Copy a plan with all of its days and tasks; the copy starts inactive."""
    copy = Plan(user_id=plan.user_id, name=f"{plan.name} (copy)", is_active=False)
    db.add(copy)
    db.flush()

    for day in list_days(db, plan.id):
        new_day = PlanDay(plan_id=copy.id, day_index=day.day_index, title=day.title, theme=day.theme)
        db.add(new_day)
        db.flush()
        for task in list_tasks(db, day.id):
            db.add(copy_task(task, new_day.id))

    logger.info("Duplicated plan %s into %s", plan.id, copy.id)
    return copy


def delete_plan(db: Session, plan: Plan) -> None:
    # No relationships are mapped, so children are flushed first.
    days = list_days(db, plan.id)
    for day in days:
        for task in list_tasks(db, day.id):
            db.delete(task)
    db.flush()
    for day in days:
        db.delete(day)
    db.flush()
    db.delete(plan)

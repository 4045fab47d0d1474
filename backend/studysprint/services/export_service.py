"""Export, import and reset of a user's plans, logs and settings."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID

from sqlalchemy import asc
from sqlalchemy.orm import Session

from studysprint.api.schemas.export import ExportDocument
from studysprint.core.config import settings as app_settings
from studysprint.db.models.daily_log import DailyLog
from studysprint.db.models.plan import Plan
from studysprint.db.models.plan_day import PlanDay
from studysprint.db.models.task import Task
from studysprint.services.plan_service import delete_plan, list_days, list_tasks
from studysprint.services.user_service import get_or_create_settings, restore_default_settings

logger = logging.getLogger(__name__)


@dataclass
class ImportCounts:
    plans: int = 0
    days: int = 0
    tasks: int = 0
    logs: int = 0


def export_user_data(db: Session, user_id: UUID) -> Dict[str, Any]:
    user_settings = get_or_create_settings(db, user_id)
    plans = db.query(Plan).filter(Plan.user_id == user_id).order_by(asc(Plan.created_at)).all()
    logs = db.query(DailyLog).filter(DailyLog.user_id == user_id).order_by(asc(DailyLog.date)).all()

    return {
        "version": app_settings.export_version,
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "settings": {
            "start_date": user_settings.start_date,
            "timezone": user_settings.timezone,
            "reminder_time": user_settings.reminder_time,
            "weekly_goal_applications": user_settings.weekly_goal_applications,
            "weekly_goal_messages": user_settings.weekly_goal_messages,
            "streak_rule_min_tasks": user_settings.streak_rule_min_tasks,
        },
        "plans": [
            {
                "name": plan.name,
                "is_active": bool(plan.is_active),
                "days": [
                    {
                        "day_index": day.day_index,
                        "title": day.title,
                        "theme": day.theme,
                        "tasks": [
                            {
                                "id": str(task.id),
                                "title": task.title,
                                "description": task.description,
                                "category": task.category,
                                "estimated_minutes": task.estimated_minutes,
                                "required": bool(task.required),
                                "tags": list(task.tags or []),
                                "order": task.sort_order,
                            }
                            for task in list_tasks(db, day.id)
                        ],
                    }
                    for day in list_days(db, plan.id)
                ],
            }
            for plan in plans
        ],
        "logs": [
            {
                "date": log.date,
                "completed_task_ids": list(log.completed_task_ids or []),
                "hours_spent": log.hours_spent,
                "pipeline_applications": log.pipeline_applications,
                "pipeline_messages": log.pipeline_messages,
                "reflection_text": log.reflection_text,
                "finalized_at": log.finalized_at.isoformat() if log.finalized_at else None,
            }
            for log in logs
        ],
    }


def clear_user_data(db: Session, user_id: UUID) -> None:
    """Delete every plan (with days and tasks) and every log owned by the user."""
    for plan in db.query(Plan).filter(Plan.user_id == user_id).all():
        delete_plan(db, plan)
    db.query(DailyLog).filter(DailyLog.user_id == user_id).delete(synchronize_session=False)
    db.flush()


def import_user_data(db: Session, user_id: UUID, document: ExportDocument) -> ImportCounts:
    """Replace the user's plans and logs with the contents of ``document``.

    Tasks receive new ids; completed-task references in imported logs are
    rewritten to the new ids so progress survives the round trip.
    """
    counts = ImportCounts()
    clear_user_data(db, user_id)

    if document.settings is not None:
        user_settings = get_or_create_settings(db, user_id)
        for field, value in document.settings.model_dump().items():
            setattr(user_settings, field, value)

    id_map: Dict[str, str] = {}
    active_seen = False
    for exported_plan in document.plans:
        # At most one plan may be active; the first one flagged wins.
        is_active = exported_plan.is_active and not active_seen
        active_seen = active_seen or is_active
        plan = Plan(user_id=user_id, name=exported_plan.name, is_active=is_active)
        db.add(plan)
        db.flush()
        counts.plans += 1

        for exported_day in exported_plan.days:
            day = PlanDay(
                plan_id=plan.id,
                day_index=exported_day.day_index,
                title=exported_day.title,
                theme=exported_day.theme,
            )
            db.add(day)
            db.flush()
            counts.days += 1

            for exported_task in exported_day.tasks:
                task = Task(
                    plan_day_id=day.id,
                    title=exported_task.title,
                    description=exported_task.description,
                    category=exported_task.category,
                    estimated_minutes=exported_task.estimated_minutes,
                    required=exported_task.required,
                    tags=list(exported_task.tags),
                    sort_order=exported_task.order,
                )
                db.add(task)
                db.flush()
                if exported_task.id:
                    id_map[exported_task.id] = str(task.id)
                counts.tasks += 1

    for exported_log in document.logs:
        db.add(
            DailyLog(
                user_id=user_id,
                date=exported_log.date,
                completed_task_ids=[id_map.get(task_id, task_id) for task_id in exported_log.completed_task_ids],
                hours_spent=exported_log.hours_spent,
                pipeline_applications=exported_log.pipeline_applications,
                pipeline_messages=exported_log.pipeline_messages,
                reflection_text=exported_log.reflection_text,
                finalized_at=exported_log.finalized_at,
            )
        )
        counts.logs += 1

    logger.info(
        "Imported %s plans, %s days, %s tasks, %s logs for user %s",
        counts.plans,
        counts.days,
        counts.tasks,
        counts.logs,
        user_id,
    )
    return counts


def reset_user_data(db: Session, user_id: UUID) -> None:
    clear_user_data(db, user_id)
    restore_default_settings(get_or_create_settings(db, user_id))
    logger.info("Reset data for user %s", user_id)

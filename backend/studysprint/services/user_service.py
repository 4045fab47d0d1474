"""Helpers for working with users and their settings."""
from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studysprint.core.config import settings as app_settings
from studysprint.db.models.user import User
from studysprint.db.models.user_settings import UserSettings
from studysprint.engine.dates import today_in_timezone

logger = logging.getLogger(__name__)


def get_or_create_user(db: Session, user_id: UUID) -> User:
    """Fetch an existing user or create a new row safely."""
    user = db.get(User, user_id)
    if user:
        return user

    user = User(id=user_id, name="Local User")
    db.add(user)
    try:
        db.flush()
        logger.info("Created user %s", user_id)
        return user
    except IntegrityError:
        db.rollback()
        existing = db.get(User, user_id)
        if existing:
            return existing
        raise


def default_settings(user_id: UUID) -> UserSettings:
    timezone_name = app_settings.default_timezone
    return UserSettings(
        user_id=user_id,
        start_date=today_in_timezone(timezone_name),
        timezone=timezone_name,
        reminder_time=app_settings.default_reminder_time,
        weekly_goal_applications=10,
        weekly_goal_messages=20,
        streak_rule_min_tasks=app_settings.default_streak_min_tasks,
    )


def get_or_create_settings(db: Session, user_id: UUID) -> UserSettings:
    """Return the user's settings row, creating defaults (plan starts today) if absent."""
    existing = db.query(UserSettings).filter(UserSettings.user_id == user_id).one_or_none()
    if existing:
        return existing

    user_settings = default_settings(user_id)
    db.add(user_settings)
    try:
        db.flush()
        return user_settings
    except IntegrityError:
        db.rollback()
        existing = db.query(UserSettings).filter(UserSettings.user_id == user_id).one_or_none()
        if existing:
            return existing
        raise


def restore_default_settings(user_settings: UserSettings) -> None:
    """Reset the editable fields while keeping the plan start date."""
    defaults = default_settings(user_settings.user_id)
    user_settings.timezone = defaults.timezone
    user_settings.reminder_time = defaults.reminder_time
    user_settings.weekly_goal_applications = defaults.weekly_goal_applications
    user_settings.weekly_goal_messages = defaults.weekly_goal_messages
    user_settings.streak_rule_min_tasks = defaults.streak_rule_min_tasks

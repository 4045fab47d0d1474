"""Per-user settings ORM model."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func, text as sa_text

from studysprint.db.base import Base
from studysprint.db.types import GUID


class UserSettings(Base):
    __tablename__ = "settings"

    id = Column(GUID(), primary_key=True, default=uuid4)
    user_id = Column(
        GUID(),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    # Calendar dates are stored as YYYY-MM-DD strings, matching the engine.
    start_date = Column(String(length=10), nullable=False)
    timezone = Column(String(length=64), nullable=False)
    reminder_time = Column(String(length=5), nullable=False)
    weekly_goal_applications = Column(Integer, nullable=False, server_default=sa_text("10"))
    weekly_goal_messages = Column(Integer, nullable=False, server_default=sa_text("20"))
    streak_rule_min_tasks = Column(Integer, nullable=False, server_default=sa_text("1"))
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

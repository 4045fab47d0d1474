"""Task ORM model."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text, func, text as sa_text

from studysprint.db.base import Base
from studysprint.db.types import GUID, StringList


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (Index("ix_tasks_plan_day_id", "plan_day_id"),)

    id = Column(GUID(), primary_key=True, default=uuid4)
    plan_day_id = Column(
        GUID(),
        ForeignKey("plan_days.id", ondelete="CASCADE"),
        nullable=False,
    )
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(length=50), nullable=False)
    estimated_minutes = Column(Integer, nullable=False)
    required = Column(Boolean, nullable=False, server_default=sa_text("false"))
    tags = Column(StringList, nullable=False, default=list)
    # Column named "order" but attribute renamed to avoid clashing with the SQL keyword in queries.
    sort_order = Column("order", Integer, nullable=False, server_default=sa_text("0"))
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

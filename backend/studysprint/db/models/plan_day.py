"""Plan day ORM model."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text, func

from studysprint.db.base import Base
from studysprint.db.types import GUID


class PlanDay(Base):
    __tablename__ = "plan_days"
    __table_args__ = (Index("ix_plan_days_plan_id", "plan_id"),)

    id = Column(GUID(), primary_key=True, default=uuid4)
    plan_id = Column(GUID(), ForeignKey("plans.id", ondelete="CASCADE"), nullable=False)
    # 1-based; the calendar date is start_date + day_index - 1.
    day_index = Column(Integer, nullable=False)
    title = Column(Text, nullable=False)
    theme = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

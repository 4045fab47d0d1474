"""Daily log ORM model."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
    text as sa_text,
)

from studysprint.db.base import Base
from studysprint.db.types import GUID, StringList


class DailyLog(Base):
    __tablename__ = "daily_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_logs_user_date"),
        Index("ix_daily_logs_user_id", "user_id"),
    )

    id = Column(GUID(), primary_key=True, default=uuid4)
    user_id = Column(GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = Column(String(length=10), nullable=False)
    # Flat list: ids may belong to tasks planned on other dates.
    completed_task_ids = Column(StringList, nullable=False, default=list)
    hours_spent = Column(Float, nullable=False, server_default=sa_text("0"))
    pipeline_applications = Column(Integer, nullable=False, server_default=sa_text("0"))
    pipeline_messages = Column(Integer, nullable=False, server_default=sa_text("0"))
    reflection_text = Column(Text, nullable=False, server_default=sa_text("''"))
    finalized_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

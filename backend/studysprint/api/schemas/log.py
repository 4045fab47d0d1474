"""Schemas for daily logs."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class DailyLogResponse(BaseModel):
    id: Optional[UUID]
    date: str
    completed_task_ids: List[str]
    hours_spent: float
    pipeline_applications: int
    pipeline_messages: int
    reflection_text: str
    finalized_at: Optional[datetime]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class DailyLogUpdateRequest(BaseModel):
    completed_task_ids: Optional[List[str]] = None
    hours_spent: Optional[float] = Field(default=None, ge=0, le=24)
    pipeline_applications: Optional[int] = Field(default=None, ge=0)
    pipeline_messages: Optional[int] = Field(default=None, ge=0)
    reflection_text: Optional[str] = Field(default=None, max_length=5000)
    finalized_at: Optional[datetime] = None

"""Schemas for plan days."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from studysprint.api.schemas.task import TaskResponse


class DayCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    theme: Optional[str] = Field(default=None, max_length=100)


class DayUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    theme: Optional[str] = Field(default=None, max_length=100)


class DayResponse(BaseModel):
    id: UUID
    plan_id: UUID
    day_index: int
    title: str
    theme: Optional[str]
    created_at: datetime
    updated_at: datetime


class DayWithTasksResponse(DayResponse):
    tasks: List[TaskResponse]

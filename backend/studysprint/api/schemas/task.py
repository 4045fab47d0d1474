"""Schemas for plan tasks."""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from studysprint.engine.types import TASK_CATEGORIES

TaskCategory = Literal[TASK_CATEGORIES]  # type: ignore[valid-type]


class TaskCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=2000)
    category: TaskCategory
    estimated_minutes: int = Field(..., ge=1, le=480)
    required: bool = False
    tags: List[str] = Field(default_factory=list, max_length=20)


class TaskUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=2000)
    category: Optional[TaskCategory] = None
    estimated_minutes: Optional[int] = Field(default=None, ge=1, le=480)
    required: Optional[bool] = None
    tags: Optional[List[str]] = Field(default=None, max_length=20)


class TaskResponse(BaseModel):
    id: UUID
    plan_day_id: UUID
    title: str
    description: Optional[str]
    category: str
    estimated_minutes: int
    required: bool
    tags: List[str]
    order: int
    created_at: datetime
    updated_at: datetime

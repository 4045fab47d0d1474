"""Schemas for the dated view of the active plan."""
from __future__ import annotations

from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel


class GeneratedTask(BaseModel):
    id: str
    title: str
    description: Optional[str]
    category: str
    estimated_minutes: int
    required: bool
    tags: List[str]
    order: int


class DayProgressPayload(BaseModel):
    minutes_planned: int
    minutes_done: int
    percent: int
    total_tasks: int
    completed_tasks: int
    required_tasks: int
    completed_required_tasks: int


class GeneratedDayPayload(BaseModel):
    day_id: Optional[str]
    day_index: int
    date: str
    title: str
    theme: Optional[str]
    tasks: List[GeneratedTask]
    status: Literal["future", "today", "done", "partial", "behind"]
    progress: DayProgressPayload
    xp: int


class PlanRef(BaseModel):
    id: UUID
    name: str


class PlanSettingsPayload(BaseModel):
    start_date: str
    timezone: str
    reminder_time: str
    weekly_goal_applications: int
    weekly_goal_messages: int
    streak_rule_min_tasks: int


class GeneratedPlanResponse(BaseModel):
    plan: PlanRef
    settings: PlanSettingsPayload
    days: List[GeneratedDayPayload]
    today: str
    request_id: str

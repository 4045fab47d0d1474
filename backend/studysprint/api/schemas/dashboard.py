"""Schemas for dashboard and chart endpoints."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from studysprint.api.schemas.generated import DayProgressPayload, GeneratedTask, PlanRef


class PendingTaskPayload(BaseModel):
    day_index: int
    date: str
    task: GeneratedTask


class BehindStatusPayload(BaseModel):
    is_behind: bool
    pending_required_count: int
    pending_list: List[PendingTaskPayload]


class LevelPayload(BaseModel):
    level: int
    xp_into_level: int
    xp_for_next_level: int


class TodayPayload(BaseModel):
    day_index: int
    date: str
    title: str
    progress: DayProgressPayload
    xp: int


class WeeklyPipelinePayload(BaseModel):
    week_start: str
    week_end: str
    applications: int
    messages: int
    goal_applications: int
    goal_messages: int


class DashboardResponse(BaseModel):
    plan: PlanRef
    today: str
    behind: BehindStatusPayload
    recovery_plan: List[PendingTaskPayload]
    streak: int
    total_xp: int
    level: LevelPayload
    today_day: Optional[TodayPayload]
    days_done: int
    total_days: int
    pipeline: WeeklyPipelinePayload
    request_id: str


class ChartPoint(BaseModel):
    date: str
    day_index: int
    label: str


class ProgressChartPoint(ChartPoint):
    cumulative: int
    target: int


class BurndownChartPoint(ChartPoint):
    remaining: int
    ideal: int


class DailyChartPoint(ChartPoint):
    planned: int
    completed: int
    hours_spent: float


class ChartsResponse(BaseModel):
    plan: PlanRef
    today: str
    progress: List[ProgressChartPoint]
    burndown: List[BurndownChartPoint]
    daily: List[DailyChartPoint]
    request_id: str

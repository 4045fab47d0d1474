"""Schemas for data export and import."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from studysprint.api.schemas.common import DateStr, TimeStr
from studysprint.api.schemas.task import TaskCategory


class ExportedSettings(BaseModel):
    start_date: DateStr
    timezone: str
    reminder_time: TimeStr
    weekly_goal_applications: int = Field(ge=0)
    weekly_goal_messages: int = Field(ge=0)
    streak_rule_min_tasks: int = Field(ge=1)


class ExportedTask(BaseModel):
    id: Optional[str] = None
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    category: TaskCategory
    estimated_minutes: int = Field(..., ge=1, le=480)
    required: bool = False
    tags: List[str] = Field(default_factory=list)
    order: int = Field(default=0, ge=0)


class ExportedDay(BaseModel):
    day_index: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    theme: Optional[str] = None
    tasks: List[ExportedTask] = Field(default_factory=list)


class ExportedPlan(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    is_active: bool = False
    days: List[ExportedDay] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_day_indexes(self) -> "ExportedPlan":
        indexes = [day.day_index for day in self.days]
        if len(indexes) != len(set(indexes)):
            raise ValueError(f"plan {self.name!r} has duplicate day_index values")
        return self


class ExportedLog(BaseModel):
    date: DateStr
    completed_task_ids: List[str] = Field(default_factory=list)
    hours_spent: float = Field(default=0, ge=0)
    pipeline_applications: int = Field(default=0, ge=0)
    pipeline_messages: int = Field(default=0, ge=0)
    reflection_text: str = ""
    finalized_at: Optional[datetime] = None


class ExportDocument(BaseModel):
    version: str
    exported_at: datetime
    settings: Optional[ExportedSettings] = None
    plans: List[ExportedPlan] = Field(default_factory=list)
    logs: List[ExportedLog] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_log_dates(self) -> "ExportDocument":
        dates = [log.date for log in self.logs]
        if len(dates) != len(set(dates)):
            raise ValueError("logs contain duplicate dates")
        return self


class ImportResponse(BaseModel):
    plans_imported: int
    days_imported: int
    tasks_imported: int
    logs_imported: int
    request_id: str


class ResetResponse(BaseModel):
    success: bool
    message: str
    request_id: str

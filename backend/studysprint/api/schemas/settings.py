"""Schemas for user settings."""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from studysprint.api.schemas.common import DateStr, TimeStr


class SettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    start_date: str
    timezone: str
    reminder_time: str
    weekly_goal_applications: int
    weekly_goal_messages: int
    streak_rule_min_tasks: int
    created_at: datetime
    updated_at: datetime


class SettingsUpdateRequest(BaseModel):
    start_date: Optional[DateStr] = None
    timezone: Optional[str] = Field(default=None, min_length=1)
    reminder_time: Optional[TimeStr] = None
    weekly_goal_applications: Optional[int] = Field(default=None, ge=0)
    weekly_goal_messages: Optional[int] = Field(default=None, ge=0)
    streak_rule_min_tasks: Optional[int] = Field(default=None, ge=1)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value

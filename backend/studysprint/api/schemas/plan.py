"""Schemas for plans."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class PlanCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def trim_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("name must not be blank")
        return cleaned


class PlanUpdateRequest(PlanCreateRequest):
    pass


class PlanResponse(BaseModel):
    id: UUID
    name: str
    is_active: bool
    day_count: int
    created_at: datetime
    updated_at: datetime

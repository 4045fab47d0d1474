"""Field types shared by request and response schemas."""
from __future__ import annotations

from typing import Annotated, List
from uuid import UUID

from pydantic import AfterValidator, BaseModel, Field

from studysprint.engine.dates import format_date, parse_date

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def check_calendar_date(value: str) -> str:
    """Reject strings shaped like a date that name no real day, e.g. ``2024-02-30``."""
    try:
        valid = format_date(parse_date(value)) == value
    except ValueError:
        valid = False
    if not valid:
        raise ValueError(f"{value!r} is not a valid calendar date")
    return value


DateStr = Annotated[
    str,
    Field(pattern=DATE_PATTERN, description="Calendar date, YYYY-MM-DD"),
    AfterValidator(check_calendar_date),
]
TimeStr = Annotated[str, Field(pattern=TIME_PATTERN, description="Local time, HH:MM (24h)")]


class ReorderRequest(BaseModel):
    ordered_ids: List[UUID] = Field(..., min_length=1)


class SuccessResponse(BaseModel):
    success: bool = True

"""Value types consumed and produced by the progress engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Mapping, Optional, Tuple

TASK_CATEGORIES: Tuple[str, ...] = (
    "Frontend",
    "Backend",
    "SQL/DB",
    "Redis/Caching",
    "System Design",
    "Writing",
    "Pipeline",
    "Review",
    "Other",
)


class DayStatus(str, Enum):
    FUTURE = "future"
    TODAY = "today"
    DONE = "done"
    PARTIAL = "partial"
    BEHIND = "behind"


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    category: str
    estimated_minutes: int
    required: bool = False
    order: int = 0
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DailyLog:
    """One user-reported record per calendar date.

    ``completed_task_ids`` is a flat collection of task ids. It may reference
    tasks planned for other dates when overdue work is caught up later.
    """

    date: str
    completed_task_ids: Tuple[str, ...] = ()
    hours_spent: float = 0.0
    pipeline_applications: int = 0
    pipeline_messages: int = 0
    reflection_text: str = ""
    finalized_at: Optional[datetime] = None


@dataclass(frozen=True)
class DayProgress:
    minutes_planned: int = 0
    minutes_done: int = 0
    percent: int = 0
    total_tasks: int = 0
    completed_tasks: int = 0
    required_tasks: int = 0
    completed_required_tasks: int = 0


@dataclass(frozen=True)
class GeneratedDay:
    day_index: int
    date: str
    tasks: Tuple[Task, ...] = ()
    day_id: Optional[str] = None
    title: str = ""
    theme: Optional[str] = None
    status: DayStatus = DayStatus.FUTURE
    progress: DayProgress = field(default_factory=DayProgress)
    xp: int = 0


@dataclass(frozen=True)
class PlanDaySnapshot:
    """A stored plan day before its calendar date has been resolved."""

    day_index: int
    tasks: Tuple[Task, ...] = ()
    day_id: Optional[str] = None
    title: str = ""
    theme: Optional[str] = None


@dataclass(frozen=True)
class PendingTask:
    day_index: int
    date: str
    task: Task


@dataclass(frozen=True)
class BehindStatus:
    is_behind: bool
    pending_required_count: int
    pending_list: List[PendingTask] = field(default_factory=list)


@dataclass(frozen=True)
class ProgressPoint:
    date: str
    day_index: int
    label: str
    cumulative: int
    target: int


@dataclass(frozen=True)
class BurndownPoint:
    date: str
    day_index: int
    label: str
    remaining: int
    ideal: int


@dataclass(frozen=True)
class DailyPoint:
    date: str
    day_index: int
    label: str
    planned: int
    completed: int
    hours_spent: float


@dataclass(frozen=True)
class ChartsSeries:
    progress: List[ProgressPoint] = field(default_factory=list)
    burndown: List[BurndownPoint] = field(default_factory=list)
    daily: List[DailyPoint] = field(default_factory=list)


LogMap = Mapping[str, DailyLog]


def completed_ids_for(logs: LogMap, date: str) -> frozenset[str]:
    """Return the completed-id set logged for ``date`` (empty when no log exists)."""
    log = logs.get(date)
    if log is None:
        return frozenset()
    return frozenset(log.completed_task_ids)

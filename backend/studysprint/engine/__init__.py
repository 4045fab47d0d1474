"""Pure progress, streak, XP and chart calculations over plan snapshots."""

from studysprint.engine.charts import compute_charts_series
from studysprint.engine.dates import add_days, compare_dates, format_date, parse_date
from studysprint.engine.generate import build_generated_days
from studysprint.engine.progress import compute_day_progress
from studysprint.engine.schedule import compute_behind_status, generate_recovery_plan
from studysprint.engine.status import compute_day_status
from studysprint.engine.streak import compute_streak
from studysprint.engine.types import (
    BehindStatus,
    ChartsSeries,
    DailyLog,
    DayProgress,
    DayStatus,
    GeneratedDay,
    PendingTask,
    PlanDaySnapshot,
    Task,
)
from studysprint.engine.xp import compute_day_xp, compute_total_xp, level_for_xp

__all__ = [
    "BehindStatus",
    "ChartsSeries",
    "DailyLog",
    "DayProgress",
    "DayStatus",
    "GeneratedDay",
    "PendingTask",
    "PlanDaySnapshot",
    "Task",
    "add_days",
    "build_generated_days",
    "compare_dates",
    "compute_behind_status",
    "compute_charts_series",
    "compute_day_progress",
    "compute_day_status",
    "compute_day_xp",
    "compute_streak",
    "compute_total_xp",
    "format_date",
    "generate_recovery_plan",
    "level_for_xp",
    "parse_date",
]

"""Aggregation helpers for dashboard endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional

from studysprint import engine
from studysprint.engine.dates import format_date, parse_date
from studysprint.engine.xp import LevelInfo
from studysprint.services.plan_snapshot import ActivePlanView


@dataclass
class WeeklyPipeline:
    week_start: str
    week_end: str
    applications: int
    messages: int
    goal_applications: int
    goal_messages: int


@dataclass
class DashboardSummary:
    today: str
    behind: engine.BehindStatus
    recovery_plan: List[engine.PendingTask]
    streak: int
    total_xp: int
    level: LevelInfo
    today_day: Optional[engine.GeneratedDay]
    days_done: int
    total_days: int
    pipeline: WeeklyPipeline


def _week_window(today: str) -> tuple[str, str]:
    current = parse_date(today)
    start = current - timedelta(days=current.weekday())
    return format_date(start), format_date(start + timedelta(days=6))


def _weekly_pipeline(view: ActivePlanView) -> WeeklyPipeline:
    start, end = _week_window(view.today)
    week_logs = [log for date, log in view.logs.items() if start <= date <= end]
    return WeeklyPipeline(
        week_start=start,
        week_end=end,
        applications=sum(log.pipeline_applications for log in week_logs),
        messages=sum(log.pipeline_messages for log in week_logs),
        goal_applications=view.settings.weekly_goal_applications,
        goal_messages=view.settings.weekly_goal_messages,
    )


def get_dashboard_data(view: ActivePlanView) -> DashboardSummary:
    behind = engine.compute_behind_status(view.days, view.logs, view.today)
    recovery = engine.generate_recovery_plan(behind) if behind.is_behind else []
    total_xp = engine.compute_total_xp(view.days, view.logs)
    today_day = next((day for day in view.days if day.date == view.today), None)

    return DashboardSummary(
        today=view.today,
        behind=behind,
        recovery_plan=recovery,
        streak=engine.compute_streak(
            view.days,
            view.logs,
            view.settings.streak_rule_min_tasks,
            view.today,
        ),
        total_xp=total_xp,
        level=engine.level_for_xp(total_xp),
        today_day=today_day,
        days_done=sum(1 for day in view.days if day.status == engine.DayStatus.DONE),
        total_days=len(view.days),
        pipeline=_weekly_pipeline(view),
    )

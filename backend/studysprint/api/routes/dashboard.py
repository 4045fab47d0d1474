"""Dashboard and chart API routes."""
from __future__ import annotations

from time import perf_counter
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from studysprint import engine
from studysprint.api.schemas.dashboard import (
    ChartsResponse,
    DashboardResponse,
    LevelPayload,
    TodayPayload,
    WeeklyPipelinePayload,
)
from studysprint.api.schemas.generated import PlanRef
from studysprint.api.serializers import behind_payload, charts_payload, pending_payload, progress_payload
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.observability.metrics import log_latency, log_metric
from studysprint.observability.tracing import trace
from studysprint.services.dashboard_service import get_dashboard_data
from studysprint.services.plan_snapshot import load_active_plan_view

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse, tags=["dashboard"])
def get_dashboard(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DashboardResponse:
    request_id = getattr(http_request.state, "request_id", None)
    start = perf_counter()

    with trace(
        "dashboard.get",
        metadata={"route": "/dashboard"},
        user_id=str(user_id),
        request_id=request_id,
    ):
        view = load_active_plan_view(db, user_id)
        if view is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active plan found")
        summary = get_dashboard_data(view)

    metric_metadata = {"user_id": str(user_id)}
    log_metric("dashboard.get.success", 1, metadata=metric_metadata)
    log_metric("dashboard.get.pending_required", summary.behind.pending_required_count, metadata=metric_metadata)
    log_metric("dashboard.get.streak", summary.streak, metadata=metric_metadata)
    log_latency("dashboard.get", start, metadata=metric_metadata)

    today_day = summary.today_day
    return DashboardResponse(
        plan=PlanRef(id=view.plan.id, name=view.plan.name),
        today=summary.today,
        behind=behind_payload(summary.behind),
        recovery_plan=[pending_payload(item) for item in summary.recovery_plan],
        streak=summary.streak,
        total_xp=summary.total_xp,
        level=LevelPayload(
            level=summary.level.level,
            xp_into_level=summary.level.xp_into_level,
            xp_for_next_level=summary.level.xp_for_next_level,
        ),
        today_day=(
            TodayPayload(
                day_index=today_day.day_index,
                date=today_day.date,
                title=today_day.title,
                progress=progress_payload(today_day.progress),
                xp=today_day.xp,
            )
            if today_day
            else None
        ),
        days_done=summary.days_done,
        total_days=summary.total_days,
        pipeline=WeeklyPipelinePayload(**vars(summary.pipeline)),
        request_id=request_id or "",
    )


@router.get("/charts", response_model=ChartsResponse, tags=["dashboard"])
def get_charts(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ChartsResponse:
    """Cumulative progress, burndown and per-day series for the active plan."""
    request_id = getattr(http_request.state, "request_id", None)
    start = perf_counter()

    with trace("charts.get", metadata={"route": "/charts"}, user_id=str(user_id), request_id=request_id):
        view = load_active_plan_view(db, user_id)
        if view is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active plan found")
        series = engine.compute_charts_series(view.days, view.logs, view.today)

    log_latency("charts.get", start, metadata={"user_id": str(user_id)})
    return ChartsResponse(
        plan=PlanRef(id=view.plan.id, name=view.plan.name),
        today=view.today,
        request_id=request_id or "",
        **charts_payload(series),
    )

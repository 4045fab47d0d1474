"""Dated view of the active plan."""
from __future__ import annotations

from time import perf_counter
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from studysprint.api.schemas.generated import GeneratedPlanResponse, PlanRef, PlanSettingsPayload
from studysprint.api.serializers import generated_day_payload
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.observability.metrics import log_latency, log_metric
from studysprint.observability.tracing import trace
from studysprint.services.plan_snapshot import load_active_plan_view

router = APIRouter()


@router.get("/plan/active/generated", response_model=GeneratedPlanResponse, tags=["plans"])
def get_active_generated(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> GeneratedPlanResponse:
    """Resolve each day of the active plan to a date with status, progress and XP."""
    request_id = getattr(http_request.state, "request_id", None)
    start = perf_counter()

    with trace(
        "plan.generated",
        metadata={"route": "/plan/active/generated"},
        user_id=str(user_id),
        request_id=request_id,
    ):
        view = load_active_plan_view(db, user_id)
        if view is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active plan found")

    log_metric("plan.generated.days", len(view.days), metadata={"user_id": str(user_id)})
    log_latency("plan.generated", start, metadata={"user_id": str(user_id)})

    return GeneratedPlanResponse(
        plan=PlanRef(id=view.plan.id, name=view.plan.name),
        settings=PlanSettingsPayload(
            start_date=view.settings.start_date,
            timezone=view.settings.timezone,
            reminder_time=view.settings.reminder_time,
            weekly_goal_applications=view.settings.weekly_goal_applications,
            weekly_goal_messages=view.settings.weekly_goal_messages,
            streak_rule_min_tasks=view.settings.streak_rule_min_tasks,
        ),
        days=[generated_day_payload(day) for day in view.days],
        today=view.today,
        request_id=request_id or "",
    )

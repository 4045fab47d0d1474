"""Plan day API routes."""
from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from studysprint.api.schemas.common import ReorderRequest, SuccessResponse
from studysprint.api.schemas.day import DayCreateRequest, DayResponse, DayUpdateRequest, DayWithTasksResponse
from studysprint.api.serializers import serialize_day, serialize_day_with_tasks
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.db.models.plan import Plan
from studysprint.db.models.plan_day import PlanDay
from studysprint.observability.metrics import log_metric
from studysprint.observability.tracing import trace
from studysprint.services.plan_service import (
    ReorderError,
    delete_day_and_reindex,
    get_owned_day,
    get_owned_plan,
    list_days,
    list_tasks,
    next_day_index,
    reorder_days,
)

router = APIRouter()


@router.get("/plans/{plan_id}/days", response_model=List[DayWithTasksResponse], tags=["days"])
def list_plan_days(
    plan_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> List[DayWithTasksResponse]:
    """List a plan's days in order, each with its ordered tasks."""
    _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "day.list",
        metadata={"route": f"/plans/{plan_id}/days", "plan_id": str(plan_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        days = list_days(db, plan_id)
        result = [serialize_day_with_tasks(day, list_tasks(db, day.id)) for day in days]

    log_metric("day.list.count", len(result), metadata={"plan_id": str(plan_id)})
    return result


@router.post(
    "/plans/{plan_id}/days",
    response_model=DayResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["days"],
)
def create_day(
    plan_id: UUID,
    payload: DayCreateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DayResponse:
    """Append a day after the plan's current last day."""
    _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "day.create",
        metadata={"route": f"/plans/{plan_id}/days", "plan_id": str(plan_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        day = PlanDay(
            plan_id=plan_id,
            day_index=next_day_index(db, plan_id),
            title=payload.title,
            theme=payload.theme,
        )
        db.add(day)
        _commit(db)
        db.refresh(day)

    log_metric("day.create.success", 1, metadata={"plan_id": str(plan_id), "day_index": day.day_index})
    return serialize_day(day)


@router.put("/days/{day_id}", response_model=DayResponse, tags=["days"])
def update_day(
    day_id: UUID,
    payload: DayUpdateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DayResponse:
    day = _require_day(db, day_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("title") is None:
        changes.pop("title", None)

    with trace(
        "day.update",
        metadata={"route": f"/days/{day_id}", "day_id": str(day_id), "fields": sorted(changes)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        for field, value in changes.items():
            setattr(day, field, value)
        _commit(db)
        db.refresh(day)

    log_metric("day.update.success", 1, metadata={"day_id": str(day_id)})
    return serialize_day(day)


@router.delete("/days/{day_id}", response_model=SuccessResponse, tags=["days"])
def delete_day(
    day_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Delete a day and its tasks; later days move up one index."""
    day = _require_day(db, day_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "day.delete",
        metadata={"route": f"/days/{day_id}", "day_id": str(day_id), "day_index": day.day_index},
        user_id=str(user_id),
        request_id=request_id,
    ):
        try:
            delete_day_and_reindex(db, day)
            db.commit()
        except Exception:
            db.rollback()
            raise

    log_metric("day.delete.success", 1, metadata={"day_id": str(day_id)})
    return SuccessResponse()


@router.post("/plans/{plan_id}/days/reorder", response_model=SuccessResponse, tags=["days"])
def reorder_plan_days(
    plan_id: UUID,
    payload: ReorderRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Renumber days 1..n in the order given."""
    _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "day.reorder",
        metadata={"route": f"/plans/{plan_id}/days/reorder", "plan_id": str(plan_id), "count": len(payload.ordered_ids)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        try:
            reorder_days(db, plan_id, payload.ordered_ids)
        except ReorderError as exc:
            db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        _commit(db)

    log_metric("day.reorder.success", 1, metadata={"plan_id": str(plan_id)})
    return SuccessResponse()


def _require_plan(db: Session, plan_id: UUID, user_id: UUID) -> Plan:
    plan = get_owned_plan(db, plan_id, user_id)
    if not plan:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    return plan


def _require_day(db: Session, day_id: UUID, user_id: UUID) -> PlanDay:
    day = get_owned_day(db, day_id, user_id)
    if not day:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Day not found")
    return day


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

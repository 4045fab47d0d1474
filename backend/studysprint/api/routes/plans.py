"""Plan API routes."""
from __future__ import annotations

from time import perf_counter
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studysprint.api.schemas.common import SuccessResponse
from studysprint.api.schemas.plan import PlanCreateRequest, PlanResponse, PlanUpdateRequest
from studysprint.api.serializers import serialize_plan
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.db.models.plan import Plan
from studysprint.observability.metrics import log_latency, log_metric
from studysprint.observability.tracing import trace
from studysprint.services.plan_service import (
    activate_plan,
    count_days,
    delete_plan,
    duplicate_plan,
    get_owned_plan,
)

router = APIRouter()


@router.get("/plans", response_model=List[PlanResponse], tags=["plans"])
def list_plans(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> List[PlanResponse]:
    """List the user's plans, newest first, with their day counts."""
    request_id = getattr(http_request.state, "request_id", None)
    with trace("plan.list", metadata={"route": "/plans"}, user_id=str(user_id), request_id=request_id):
        plans = db.query(Plan).filter(Plan.user_id == user_id).order_by(desc(Plan.created_at)).all()
        day_counts = count_days(db, [plan.id for plan in plans])

    log_metric("plan.list.count", len(plans), metadata={"user_id": str(user_id)})
    return [serialize_plan(plan, day_counts.get(plan.id, 0)) for plan in plans]


@router.post("/plans", response_model=PlanResponse, status_code=status.HTTP_201_CREATED, tags=["plans"])
def create_plan(
    payload: PlanCreateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanResponse:
    request_id = getattr(http_request.state, "request_id", None)
    start = perf_counter()

    with trace("plan.create", metadata={"route": "/plans"}, user_id=str(user_id), request_id=request_id):
        plan = Plan(user_id=user_id, name=payload.name, is_active=False)
        db.add(plan)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to save plan",
            ) from exc
        db.refresh(plan)

    log_metric("plan.create.success", 1, metadata={"user_id": str(user_id)})
    log_latency("plan.create", start, metadata={"user_id": str(user_id)})
    return serialize_plan(plan, 0)


@router.put("/plans/{plan_id}", response_model=PlanResponse, tags=["plans"])
def update_plan(
    plan_id: UUID,
    payload: PlanUpdateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanResponse:
    plan = _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "plan.update",
        metadata={"route": f"/plans/{plan_id}", "plan_id": str(plan_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        plan.name = payload.name
        _commit(db)
        db.refresh(plan)

    log_metric("plan.update.success", 1, metadata={"plan_id": str(plan_id)})
    return serialize_plan(plan, count_days(db, [plan.id]).get(plan.id, 0))


@router.delete("/plans/{plan_id}", response_model=SuccessResponse, tags=["plans"])
def delete_plan_endpoint(
    plan_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Delete a plan together with its days and tasks. Daily logs are kept."""
    plan = _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "plan.delete",
        metadata={"route": f"/plans/{plan_id}", "plan_id": str(plan_id), "was_active": bool(plan.is_active)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        delete_plan(db, plan)
        _commit(db)

    log_metric("plan.delete.success", 1, metadata={"plan_id": str(plan_id)})
    return SuccessResponse()


@router.post("/plans/{plan_id}/set-active", response_model=PlanResponse, tags=["plans"])
def set_active_plan(
    plan_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanResponse:
    plan = _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "plan.set_active",
        metadata={"route": f"/plans/{plan_id}/set-active", "plan_id": str(plan_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        activate_plan(db, plan)
        _commit(db)
        db.refresh(plan)

    log_metric("plan.set_active.success", 1, metadata={"plan_id": str(plan_id)})
    return serialize_plan(plan, count_days(db, [plan.id]).get(plan.id, 0))


@router.post(
    "/plans/{plan_id}/duplicate",
    response_model=PlanResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["plans"],
)
def duplicate_plan_endpoint(
    plan_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanResponse:
    plan = _require_plan(db, plan_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)
    start = perf_counter()

    with trace(
        "plan.duplicate",
        metadata={"route": f"/plans/{plan_id}/duplicate", "plan_id": str(plan_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        try:
            copy = duplicate_plan(db, plan)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(copy)

    log_metric("plan.duplicate.success", 1, metadata={"plan_id": str(plan_id)})
    log_latency("plan.duplicate", start, metadata={"plan_id": str(plan_id)})
    return serialize_plan(copy, count_days(db, [copy.id]).get(copy.id, 0))


def _require_plan(db: Session, plan_id: UUID, user_id: UUID) -> Plan:
    plan = get_owned_plan(db, plan_id, user_id)
    if not plan:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    return plan


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

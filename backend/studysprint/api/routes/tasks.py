"""Task API routes."""
from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from studysprint.api.schemas.common import ReorderRequest, SuccessResponse
from studysprint.api.schemas.task import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from studysprint.api.serializers import serialize_task
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.db.models.plan_day import PlanDay
from studysprint.db.models.task import Task
from studysprint.observability.metrics import log_metric
from studysprint.observability.tracing import trace
from studysprint.services.plan_service import (
    ReorderError,
    get_owned_day,
    get_owned_task,
    list_tasks,
    next_task_order,
    reorder_tasks,
)

router = APIRouter()


@router.get("/days/{day_id}/tasks", response_model=List[TaskResponse], tags=["tasks"])
def list_day_tasks(
    day_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> List[TaskResponse]:
    _require_day(db, day_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "task.list",
        metadata={"route": f"/days/{day_id}/tasks", "day_id": str(day_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        tasks = list_tasks(db, day_id)

    log_metric("task.list.count", len(tasks), metadata={"day_id": str(day_id)})
    return [serialize_task(task) for task in tasks]


@router.post(
    "/days/{day_id}/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["tasks"],
)
def create_task(
    day_id: UUID,
    payload: TaskCreateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> TaskResponse:
    """Append a task at the end of the day's task list."""
    _require_day(db, day_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "task.create",
        metadata={
            "route": f"/days/{day_id}/tasks",
            "day_id": str(day_id),
            "category": payload.category,
            "required": payload.required,
        },
        user_id=str(user_id),
        request_id=request_id,
    ):
        task = Task(
            plan_day_id=day_id,
            title=payload.title.strip(),
            description=payload.description,
            category=payload.category,
            estimated_minutes=payload.estimated_minutes,
            required=payload.required,
            tags=[tag.strip() for tag in payload.tags if tag.strip()],
            sort_order=next_task_order(db, day_id),
        )
        db.add(task)
        _commit(db)
        db.refresh(task)

    log_metric("task.create.success", 1, metadata={"day_id": str(day_id)})
    log_metric("task.create.estimated_minutes", task.estimated_minutes, metadata={"day_id": str(day_id)})
    return serialize_task(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse, tags=["tasks"])
def update_task(
    task_id: UUID,
    payload: TaskUpdateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> TaskResponse:
    """Apply a partial update; omitted fields keep their values."""
    task = _require_task(db, task_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)
    changes = payload.model_dump(exclude_unset=True)
    # Only description may be cleared explicitly.
    changes = {field: value for field, value in changes.items() if value is not None or field == "description"}

    with trace(
        "task.update",
        metadata={"route": f"/tasks/{task_id}", "task_id": str(task_id), "fields": sorted(changes)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        for field, value in changes.items():
            setattr(task, field, value)
        _commit(db)
        db.refresh(task)

    log_metric("task.update.success", 1, metadata={"task_id": str(task_id)})
    return serialize_task(task)


@router.delete("/tasks/{task_id}", response_model=SuccessResponse, tags=["tasks"])
def delete_task(
    task_id: UUID,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    task = _require_task(db, task_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "task.delete",
        metadata={"route": f"/tasks/{task_id}", "task_id": str(task_id)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        db.delete(task)
        _commit(db)

    log_metric("task.delete.success", 1, metadata={"task_id": str(task_id)})
    return SuccessResponse()


@router.post("/days/{day_id}/tasks/reorder", response_model=SuccessResponse, tags=["tasks"])
def reorder_day_tasks(
    day_id: UUID,
    payload: ReorderRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Renumber a day's tasks 0..n-1 in the order given."""
    _require_day(db, day_id, user_id)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "task.reorder",
        metadata={"route": f"/days/{day_id}/tasks/reorder", "day_id": str(day_id), "count": len(payload.ordered_ids)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        try:
            reorder_tasks(db, day_id, payload.ordered_ids)
        except ReorderError as exc:
            db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        _commit(db)

    log_metric("task.reorder.success", 1, metadata={"day_id": str(day_id)})
    return SuccessResponse()


def _require_day(db: Session, day_id: UUID, user_id: UUID) -> PlanDay:
    day = get_owned_day(db, day_id, user_id)
    if not day:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Day not found")
    return day


def _require_task(db: Session, task_id: UUID, user_id: UUID) -> Task:
    task = get_owned_task(db, task_id, user_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

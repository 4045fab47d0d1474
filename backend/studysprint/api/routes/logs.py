"""Daily log API routes."""
from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status
from sqlalchemy import asc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studysprint.api.schemas.common import DATE_PATTERN, check_calendar_date
from studysprint.api.schemas.log import DailyLogResponse, DailyLogUpdateRequest
from studysprint.api.serializers import serialize_log
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.db.models.daily_log import DailyLog
from studysprint.observability.metrics import log_metric
from studysprint.observability.tracing import trace

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/logs", response_model=List[DailyLogResponse], tags=["logs"])
def list_logs(
    http_request: Request,
    from_: Optional[str] = Query(default=None, alias="from", pattern=DATE_PATTERN),
    to: Optional[str] = Query(default=None, pattern=DATE_PATTERN),
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> List[DailyLogResponse]:
    """List logs in ascending date order, optionally bounded (inclusive) by ``from``/``to``."""
    _require_calendar_dates(from_, to)
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "log.list",
        metadata={"route": "/logs", "from": from_, "to": to},
        user_id=str(user_id),
        request_id=request_id,
    ):
        query = db.query(DailyLog).filter(DailyLog.user_id == user_id)
        if from_:
            query = query.filter(DailyLog.date >= from_)
        if to:
            query = query.filter(DailyLog.date <= to)
        logs = query.order_by(asc(DailyLog.date)).all()

    log_metric("log.list.count", len(logs), metadata={"user_id": str(user_id)})
    return [serialize_log(log, log.date) for log in logs]


@router.get("/logs/{date}", response_model=DailyLogResponse, tags=["logs"])
def get_log(
    http_request: Request,
    date: str = Path(..., pattern=DATE_PATTERN),
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DailyLogResponse:
    """Return the log for ``date``; dates without a log get an empty record."""
    _require_calendar_dates(date)
    request_id = getattr(http_request.state, "request_id", None)
    with trace("log.get", metadata={"route": f"/logs/{date}", "date": date}, user_id=str(user_id), request_id=request_id):
        log = _find_log(db, user_id, date)
    return serialize_log(log, date)


@router.put("/logs/{date}", response_model=DailyLogResponse, tags=["logs"])
def upsert_log(
    payload: DailyLogUpdateRequest,
    http_request: Request,
    date: str = Path(..., pattern=DATE_PATTERN),
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DailyLogResponse:
    """Create or partially update the log for ``date``.

    A finalized log only accepts a request that clears ``finalized_at``.
    """
    _require_calendar_dates(date)
    request_id = getattr(http_request.state, "request_id", None)
    changes = payload.model_dump(exclude_unset=True)
    if "completed_task_ids" in changes:
        # Keep first occurrence order, drop duplicates.
        changes["completed_task_ids"] = list(dict.fromkeys(changes["completed_task_ids"] or []))
    for field in ("hours_spent", "pipeline_applications", "pipeline_messages", "reflection_text"):
        if field in changes and changes[field] is None:
            changes.pop(field)

    created = False
    with trace(
        "log.upsert",
        metadata={"route": f"/logs/{date}", "date": date, "fields": sorted(changes)},
        user_id=str(user_id),
        request_id=request_id,
    ):
        log = _find_log(db, user_id, date)
        if log and log.finalized_at is not None and changes.get("finalized_at", log.finalized_at) is not None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Log is finalized")

        if log is None:
            created = True
            log = DailyLog(
                user_id=user_id,
                date=date,
                completed_task_ids=[],
                hours_spent=0,
                pipeline_applications=0,
                pipeline_messages=0,
                reflection_text="",
            )
            db.add(log)

        for field, value in changes.items():
            setattr(log, field, value)

        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("Concurrent log write for %s: %s", date, exc)
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Log was modified concurrently") from exc
        except Exception:
            db.rollback()
            raise
        db.refresh(log)

    log_metric("log.upsert.success", 1, metadata={"user_id": str(user_id), "created": created})
    log_metric(
        "log.upsert.completed_tasks",
        len(log.completed_task_ids or []),
        metadata={"user_id": str(user_id), "date": date},
    )
    return serialize_log(log, date)


def _find_log(db: Session, user_id: UUID, date: str) -> DailyLog | None:
    return db.query(DailyLog).filter(DailyLog.user_id == user_id, DailyLog.date == date).one_or_none()


def _require_calendar_dates(*values: Optional[str]) -> None:
    for value in values:
        if value is None:
            continue
        try:
            check_calendar_date(value)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

"""Export, import and reset API routes."""
from __future__ import annotations

from time import perf_counter
from typing import Any, Dict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studysprint.api.schemas.export import ExportDocument, ImportResponse, ResetResponse
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.observability.metrics import log_latency, log_metric
from studysprint.observability.tracing import trace
from studysprint.services.export_service import export_user_data, import_user_data, reset_user_data

router = APIRouter()


@router.get("/export", tags=["export"])
def export_data(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    request_id = getattr(http_request.state, "request_id", None)
    with trace("export.get", metadata={"route": "/export"}, user_id=str(user_id), request_id=request_id):
        document = export_user_data(db, user_id)

    log_metric("export.plans", len(document["plans"]), metadata={"user_id": str(user_id)})
    log_metric("export.logs", len(document["logs"]), metadata={"user_id": str(user_id)})
    return document


@router.post("/import", response_model=ImportResponse, tags=["export"])
def import_data(
    payload: ExportDocument,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ImportResponse:
    """Replace all plans and logs with the contents of an export document."""
    request_id = getattr(http_request.state, "request_id", None)
    start = perf_counter()
    success = False

    try:
        with trace(
            "import.post",
            metadata={"route": "/import", "version": payload.version, "plans": len(payload.plans), "logs": len(payload.logs)},
            user_id=str(user_id),
            request_id=request_id,
        ):
            try:
                counts = import_user_data(db, user_id, payload)
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Import data is inconsistent") from exc
            except Exception:
                db.rollback()
                raise
            success = True
    finally:
        log_metric("import.success", 1 if success else 0, metadata={"user_id": str(user_id)})
        log_latency("import", start, metadata={"user_id": str(user_id)})

    return ImportResponse(
        plans_imported=counts.plans,
        days_imported=counts.days,
        tasks_imported=counts.tasks,
        logs_imported=counts.logs,
        request_id=request_id or "",
    )


@router.post("/reset", response_model=ResetResponse, tags=["export"])
def reset_data(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ResetResponse:
    """Delete all plans and logs and restore default settings."""
    request_id = getattr(http_request.state, "request_id", None)
    with trace("reset.post", metadata={"route": "/reset"}, user_id=str(user_id), request_id=request_id):
        try:
            reset_user_data(db, user_id)
            db.commit()
        except Exception:
            db.rollback()
            raise

    log_metric("reset.success", 1, metadata={"user_id": str(user_id)})
    return ResetResponse(success=True, message="Data reset successfully", request_id=request_id or "")

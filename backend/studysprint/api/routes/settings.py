"""Settings API routes."""
from __future__ import annotations

from time import perf_counter
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from studysprint.api.schemas.settings import SettingsResponse, SettingsUpdateRequest
from studysprint.core.auth import get_current_user_id
from studysprint.db.deps import get_db
from studysprint.observability.metrics import log_latency, log_metric
from studysprint.observability.tracing import trace
from studysprint.services.user_service import get_or_create_settings

router = APIRouter()


@router.get("/settings", response_model=SettingsResponse, tags=["settings"])
def get_settings_endpoint(
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SettingsResponse:
    request_id = getattr(http_request.state, "request_id", None)
    with trace("settings.get", metadata={"route": "/settings"}, user_id=str(user_id), request_id=request_id):
        user_settings = get_or_create_settings(db, user_id)
        return SettingsResponse.model_validate(user_settings)


@router.put("/settings", response_model=SettingsResponse, tags=["settings"])
def update_settings_endpoint(
    payload: SettingsUpdateRequest,
    http_request: Request,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SettingsResponse:
    """Apply a partial settings update."""
    request_id = getattr(http_request.state, "request_id", None)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    start = perf_counter()

    try:
        with trace(
            "settings.update",
            metadata={"route": "/settings", "fields": sorted(changes)},
            user_id=str(user_id),
            request_id=request_id,
        ):
            user_settings = get_or_create_settings(db, user_id)
            for field, value in changes.items():
                setattr(user_settings, field, value)
            db.commit()
            db.refresh(user_settings)
    except Exception:
        db.rollback()
        raise

    log_metric("settings.update.success", 1, metadata={"user_id": str(user_id), "fields": len(changes)})
    log_latency("settings.update", start, metadata={"user_id": str(user_id)})
    return SettingsResponse.model_validate(user_settings)

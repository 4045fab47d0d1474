"""Request authentication.

There is no real authentication yet: every request acts as the single local
user configured by ``LOCAL_USER_ID``. Routes depend on
``get_current_user_id`` so a token-based implementation can replace it
without touching them.
"""
from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.orm import Session

from studysprint.core.config import settings
from studysprint.db.deps import get_db
from studysprint.services.user_service import get_or_create_settings, get_or_create_user


def get_current_user_id(db: Session = Depends(get_db)) -> UUID:
    user_id = settings.local_user_id
    get_or_create_user(db, user_id)
    get_or_create_settings(db, user_id)
    db.commit()
    return user_id

from sqlalchemy import UniqueConstraint, text

from studysprint.db.base import Base
from studysprint.db import models  # noqa: F401  ensure models are loaded


def test_metadata_contains_core_tables() -> None:
    table_names = set(Base.metadata.tables.keys())
    expected = {
        "users",
        "settings",
        "plans",
        "plan_days",
        "tasks",
        "daily_logs",
    }

    assert expected.issubset(table_names)


def test_daily_logs_unique_per_user_and_date() -> None:
    table = Base.metadata.tables["daily_logs"]
    unique_columns = [
        sorted(column.name for column in constraint.columns)
        for constraint in table.constraints
        if isinstance(constraint, UniqueConstraint)
    ]

    assert ["date", "user_id"] in unique_columns


def test_task_order_column_name() -> None:
    assert "order" in Base.metadata.tables["tasks"].columns


def test_task_category_schema_matches_engine_categories() -> None:
    from typing import get_args

    from studysprint.api.schemas.task import TaskCategory
    from studysprint.engine.types import TASK_CATEGORIES

    assert get_args(TaskCategory) == TASK_CATEGORIES


def test_all_digit_uuid_round_trips_on_sqlite(client) -> None:
    from uuid import UUID

    from studysprint.db.models.user import User

    _, SessionLocal = client
    user_id = UUID("00000000-0000-0000-0000-000000000002")
    with SessionLocal() as db:
        db.add(User(id=user_id))
        db.commit()

    with SessionLocal() as db:
        stored = db.query(User).filter(User.id == user_id).one()
        raw = db.execute(text("SELECT id FROM users WHERE id = :id"), {"id": str(user_id)}).scalar_one()

    assert stored.id == user_id
    assert raw == str(user_id)


def test_uuid_columns_store_text_on_sqlite() -> None:
    from sqlalchemy.dialects import sqlite

    column = Base.metadata.tables["users"].columns["id"]
    assert column.type.compile(dialect=sqlite.dialect()) == "VARCHAR(36)"

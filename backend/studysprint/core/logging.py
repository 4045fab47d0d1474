"""Centralized logging configuration."""
from __future__ import annotations

import logging
from logging.config import dictConfig

from studysprint.core.context import get_request_id, get_user_id


class RequestContextFilter(logging.Filter):
    """Stamp log records with the request id and acting user."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - minimal logic
        record.request_id = get_request_id() or "-"
        record.user_id = get_user_id() or "-"
        return True


def configure_logging(*, log_level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure application logging once at startup.

    ``sql_echo`` raises ``sqlalchemy.engine`` to INFO so statements are logged
    through the same handler instead of SQLAlchemy's own echo stream.
    """
    if getattr(configure_logging, "_configured", False):
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(user_id)s | %(message)s",
                }
            },
            "filters": {
                "request_context": {
                    "()": "studysprint.core.logging.RequestContextFilter",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": log_level,
                    "filters": ["request_context"],
                }
            },
            "loggers": {
                "sqlalchemy.engine": {"level": "INFO" if sql_echo else "WARNING"},
                "uvicorn.access": {"level": "WARNING"},
            },
            "root": {
                "handlers": ["console"],
                "level": log_level,
            },
        }
    )

    logging.getLogger(__name__).debug("Logging configured at %s (sql_echo=%s)", log_level, sql_echo)
    setattr(configure_logging, "_configured", True)

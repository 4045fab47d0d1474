"""Database utilities and models."""

from studysprint.db.base import Base
from studysprint.db import models  # noqa: F401  (imported for side effects)

__all__ = ["Base"]

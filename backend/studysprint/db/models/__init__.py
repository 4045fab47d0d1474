"""ORM models exposed for metadata discovery."""
from studysprint.db.models.daily_log import DailyLog
from studysprint.db.models.plan import Plan
from studysprint.db.models.plan_day import PlanDay
from studysprint.db.models.task import Task
from studysprint.db.models.user import User
from studysprint.db.models.user_settings import UserSettings

__all__ = [
    "DailyLog",
    "Plan",
    "PlanDay",
    "Task",
    "User",
    "UserSettings",
]

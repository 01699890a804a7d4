"""ORM models - import all so Base.metadata is complete for migrations."""

from ironlog.models.coach import CoachMessage, CoachThread
from ironlog.models.user import AuthToken, User, UserPreference
from ironlog.models.workout import WorkoutSession

__all__ = [
    "AuthToken",
    "CoachMessage",
    "CoachThread",
    "User",
    "UserPreference",
    "WorkoutSession",
]

"""Workout session, exercise log and set schemas.

Numeric set fields use ``None`` as the unset marker. Clients send blanks
(``""``), strings or booleans for fields the user never filled in; those are
turned into unset instead of being parsed, so a malformed field contributes
nothing to analytics rather than a guessed number.
"""

import datetime as dt
import math
import uuid
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
    model_validator,
)

from ironlog.core.constants import CARDIO_GROUP, DEFAULT_SESSION_NAME, MAX_SESSION_DURATION_MINUTES
from ironlog.core.timeutils import ensure_utc, noon_utc, utcnow
from ironlog.services.workout_timer import elapsed_seconds, session_duration_minutes


def _unset_unless_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


UnsetOrFloat = Annotated[NonNegativeFloat | None, BeforeValidator(_unset_unless_number)]
UnsetOrInt = Annotated[NonNegativeInt | None, BeforeValidator(_unset_unless_number)]


def numeric_or_zero(value: float | None) -> float:
    """Unset counts as zero in every sum."""
    return 0 if value is None else value


def _new_id() -> str:
    return uuid.uuid4().hex


class WorkoutSet(BaseModel):
    """One effort: weight x reps for strength work, duration/distance/incline for cardio."""

    id: str = Field(default_factory=_new_id)
    reps: UnsetOrInt = None
    weight: UnsetOrFloat = None
    rpe: UnsetOrFloat = None
    completed: bool = False
    distance: UnsetOrFloat = None
    duration_minutes: UnsetOrFloat = None
    incline: UnsetOrFloat = None

    def is_loggable(self, cardio: bool) -> bool:
        if cardio:
            return any(v is not None for v in (self.duration_minutes, self.distance, self.incline))
        return self.weight is not None and self.reps is not None


class ExerciseLog(BaseModel):
    id: str = Field(default_factory=_new_id)
    exercise_id: str = ""
    name: str = Field(..., min_length=1, max_length=255)
    muscle_group: str | None = None
    notes: str = ""
    sets: list[WorkoutSet] = []

    @property
    def is_cardio(self) -> bool:
        return self.muscle_group == CARDIO_GROUP


class WorkoutSessionBase(BaseModel):
    name: str = Field(DEFAULT_SESSION_NAME, max_length=255)
    exercises: list[ExerciseLog] = []


class WorkoutSession(WorkoutSessionBase):
    """A stored session as the analytics layer and API clients see it."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    date: dt.datetime
    duration_minutes: int = Field(1, ge=1, le=MAX_SESSION_DURATION_MINUTES)

    @field_validator("date")
    @classmethod
    def _utc(cls, value: dt.datetime) -> dt.datetime:
        return ensure_utc(value)

    @property
    def day(self) -> dt.date:
        """Calendar day in UTC; time of day is ignored for streaks and reminders."""
        return self.date.date()


class WorkoutSessionCreate(WorkoutSessionBase):
    """Payload for create and full-replacement update.

    ``on_date`` logs a session for a past day (saved at noon UTC). ``started_at``
    is the workout timer anchor; when ``duration_minutes`` is omitted it is
    derived from the time elapsed since the anchor.
    """

    on_date: dt.date | None = None
    started_at: dt.datetime | None = None
    date: dt.datetime | None = None
    duration_minutes: int | None = Field(None, ge=1)

    @field_validator("exercises")
    @classmethod
    def _drop_empty_exercises(cls, exercises: list[ExerciseLog]) -> list[ExerciseLog]:
        return [ex for ex in exercises if ex.sets]

    @model_validator(mode="after")
    def _completed_sets_are_loggable(self) -> "WorkoutSessionCreate":
        for ex in self.exercises:
            for s in ex.sets:
                if s.completed and not s.is_loggable(ex.is_cardio):
                    needed = "duration, distance or incline" if ex.is_cardio else "weight and reps"
                    raise ValueError(f"Completed set on {ex.name} needs {needed}")
        return self

    def resolved_date(
        self,
        now: dt.datetime | None = None,
        current: dt.datetime | None = None,
    ) -> dt.datetime:
        """Explicit day or date wins; an edit without one keeps ``current``; else now."""
        if self.on_date is not None:
            return noon_utc(self.on_date)
        if self.date is not None:
            return ensure_utc(self.date)
        if current is not None:
            return ensure_utc(current)
        return now or utcnow()

    def resolved_duration(self, now: dt.datetime | None = None, current: int | None = None) -> int:
        if self.duration_minutes is not None:
            return min(MAX_SESSION_DURATION_MINUTES, self.duration_minutes)
        if self.started_at is None:
            return current if current is not None else 1
        return session_duration_minutes(elapsed_seconds(self.started_at, now or utcnow()))


class SessionSaveResult(BaseModel):
    """A saved session plus the PR and milestone messages it earned."""

    session: WorkoutSession
    celebrations: list[str] = []

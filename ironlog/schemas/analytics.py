"""Derived analytics values. Recomputed from history on every request, never stored."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from ironlog.core.enums import TrendStatus


class GroupVolume(BaseModel):
    group: str
    volume: int


class ExerciseVolume(BaseModel):
    name: str
    volume: int


class SessionVolume(BaseModel):
    session_id: UUID
    date: datetime
    volume: float


class VolumeComparison(BaseModel):
    this_week: float
    last_week: float
    change_pct: float | None = None  # None when last week had no volume


class TrendPoint(BaseModel):
    date: datetime
    max_weight: float
    volume: float
    one_rm: int


class ExerciseProgress(BaseModel):
    name: str
    trend: TrendStatus
    best_one_rm: int
    points: list[TrendPoint]


class LoadSuggestion(BaseModel):
    weight: float
    reps: int


class PreviousExercise(BaseModel):
    """Most recent log of an exercise, shown while logging the same exercise again."""

    session_id: UUID
    session_date: datetime
    name: str
    muscle_group: str | None = None
    sets: list[dict]


class PersonalRecord(BaseModel):
    name: str
    one_rm: int


class StreakSummary(BaseModel):
    current_streak: int
    longest_streak: int
    last_workout_date: date | None = None


class CardioExerciseTotal(BaseModel):
    name: str
    minutes: float
    distance: float


class CardioSummary(BaseModel):
    total_minutes: float = 0
    total_distance: float = 0
    top: list[CardioExerciseTotal] = []


class WeeklyReport(BaseModel):
    start: datetime
    end: datetime
    total_sessions: int = 0
    total_volume: float = 0
    avg_duration: float = 0
    top_exercises: list[ExerciseVolume] = []
    group_volume: list[GroupVolume] = []
    highlights: list[str] = []
    cardio: CardioSummary = CardioSummary()


class DashboardSummary(BaseModel):
    streak: int
    total_volume: float
    weekly: VolumeComparison
    group_volume: list[GroupVolume]
    imbalance: str | None = None
    alerts: list[str]
    personal_records: list[PersonalRecord]

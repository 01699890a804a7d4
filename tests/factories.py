"""Builders for workout histories used across the test suite."""

from datetime import datetime, timedelta, timezone

from ironlog.schemas.session import ExerciseLog, WorkoutSession, WorkoutSet

# Wednesday afternoon; every relative date in the tests hangs off this instant
REF = datetime(2026, 3, 18, 15, 0, tzinfo=timezone.utc)


def strength(name, *sets, group="Chest"):
    """strength("Bench", (100, 8), (100, 6)) -> ExerciseLog with weight x reps sets."""
    return ExerciseLog(
        name=name,
        muscle_group=group,
        sets=[WorkoutSet(weight=w, reps=r, completed=True) for w, r in sets],
    )


def cardio(name, *sets):
    """cardio("Treadmill Run", {"duration_minutes": 20, "distance": 3})"""
    return ExerciseLog(
        name=name,
        muscle_group="Cardio",
        sets=[WorkoutSet(completed=True, **fields) for fields in sets],
    )


def session(days_ago, *exercises, name="Workout", duration=45, ref=REF):
    return WorkoutSession(
        date=ref - timedelta(days=days_ago),
        name=name,
        duration_minutes=duration,
        exercises=list(exercises),
    )

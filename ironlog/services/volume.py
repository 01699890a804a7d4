"""Training volume (weight x reps) per set, session, exercise and muscle group."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from ironlog.core.constants import CARDIO_GROUP, DEFAULT_GROUP, VOLUME_DROP_RATIO, VOLUME_WINDOW_DAYS
from ironlog.core.rounding import round_int
from ironlog.core.timeutils import ensure_utc, utcnow
from ironlog.schemas.analytics import ExerciseVolume, GroupVolume, SessionVolume, VolumeComparison
from ironlog.schemas.session import ExerciseLog, WorkoutSession, WorkoutSet, numeric_or_zero


def set_volume(s: WorkoutSet) -> float:
    return numeric_or_zero(s.weight) * numeric_or_zero(s.reps)


def exercise_volume(exercise: ExerciseLog) -> float:
    return sum(set_volume(s) for s in exercise.sets)


def session_volume(session: WorkoutSession) -> float:
    """Strength volume of a session. Cardio sets carry no weight/reps, so they add 0."""
    return sum(exercise_volume(ex) for ex in session.exercises)


def sessions_since(history: Iterable[WorkoutSession], start: datetime) -> list[WorkoutSession]:
    start = ensure_utc(start)
    return [s for s in history if s.date >= start]


def weekly_muscle_group_volume(
    history: Iterable[WorkoutSession],
    window_days: int = VOLUME_WINDOW_DAYS,
    reference: datetime | None = None,
) -> list[GroupVolume]:
    """
    Volume per muscle group for sessions on or after ``reference - window_days``.
    Cardio is excluded and empty groups are omitted; an empty list means no
    strength work in the window (render an empty state, not zero bars).
    """
    reference = ensure_utc(reference or utcnow())
    totals: dict[str, float] = {}
    for session in sessions_since(history, reference - timedelta(days=window_days)):
        for ex in session.exercises:
            group = ex.muscle_group or DEFAULT_GROUP
            if group == CARDIO_GROUP:
                continue
            totals[group] = totals.get(group, 0) + exercise_volume(ex)

    # sorted() is stable, so equal groups keep first-seen order
    rows = [GroupVolume(group=g, volume=round_int(v)) for g, v in totals.items()]
    return sorted((r for r in rows if r.volume > 0), key=lambda r: r.volume, reverse=True)


def weekly_volume_comparison(
    history: Iterable[WorkoutSession],
    window_days: int = VOLUME_WINDOW_DAYS,
    reference: datetime | None = None,
) -> VolumeComparison:
    """Total volume in the current window vs the window immediately before it."""
    reference = ensure_utc(reference or utcnow())
    # Rolling windows of exactly window_days; the old client dashboard started at now-6d and now-13d
    start_this = reference - timedelta(days=window_days)
    start_last = start_this - timedelta(days=window_days)
    this_week = 0.0
    last_week = 0.0
    for session in history:
        if session.date >= start_this:
            this_week += session_volume(session)
        elif session.date >= start_last:
            last_week += session_volume(session)

    change_pct = None
    if last_week > 0:
        change_pct = round(100 * (this_week - last_week) / last_week, 1)
    return VolumeComparison(this_week=this_week, last_week=last_week, change_pct=change_pct)


def volume_drop_alert(comparison: VolumeComparison) -> str | None:
    """Warn when this week's volume fell more than 10% below last week's."""
    last, this = comparison.last_week, comparison.this_week
    if last > 0 and this < last * VOLUME_DROP_RATIO:
        return f"Volume is down {round_int(100 * (last - this) / last)}% vs last week."
    return None


def exercise_volume_totals(history: Iterable[WorkoutSession], since: datetime) -> list[ExerciseVolume]:
    totals: dict[str, float] = {}
    for session in sessions_since(history, since):
        for ex in session.exercises:
            vol = exercise_volume(ex)
            if vol <= 0:
                continue
            totals[ex.name] = totals.get(ex.name, 0) + vol
    rows = [ExerciseVolume(name=n, volume=round_int(v)) for n, v in totals.items()]
    return sorted(rows, key=lambda r: r.volume, reverse=True)


def session_volumes(history: Iterable[WorkoutSession]) -> list[SessionVolume]:
    """Per-session volume, oldest first (chart series)."""
    ordered = sorted(history, key=lambda s: s.date)
    return [SessionVolume(session_id=s.id, date=s.date, volume=session_volume(s)) for s in ordered]


def total_volume(history: Iterable[WorkoutSession]) -> float:
    return sum(session_volume(s) for s in history)

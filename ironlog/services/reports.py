"""Dashboard, weekly report and coach views built from the analytics primitives."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, time, timedelta

from ironlog.core.constants import CARDIO_GROUP, MAX_DASHBOARD_ALERTS
from ironlog.core.timeutils import ensure_utc, utcnow
from ironlog.schemas.analytics import (
    CardioExerciseTotal,
    CardioSummary,
    DashboardSummary,
    ExerciseProgress,
    WeeklyReport,
)
from ironlog.schemas.session import WorkoutSession, numeric_or_zero
from ironlog.services.pr_detection import personal_records
from ironlog.services.streak import training_streak
from ironlog.services.trends import classify_trend, detect_imbalance, detect_stalls, exercise_points
from ironlog.services.volume import (
    exercise_volume_totals,
    session_volume,
    sessions_since,
    total_volume,
    volume_drop_alert,
    weekly_muscle_group_volume,
    weekly_volume_comparison,
)

# Coach insight thresholds (days between the two most recent sessions)
ON_A_ROLL_MAX_GAP_DAYS = 2
COMEBACK_MIN_GAP_DAYS = 7
INSIGHTS_MIN_SESSIONS = 3


def _newest_first(history: Iterable[WorkoutSession]) -> list[WorkoutSession]:
    return sorted(history, key=lambda s: s.date, reverse=True)


def dashboard_alerts(
    history: Iterable[WorkoutSession],
    reference: datetime | None = None,
    unit: str = "lbs",
) -> list[str]:
    """Volume drop first, then stalled lifts; at most four."""
    history = list(history)
    alerts = detect_stalls(history, unit=unit)
    drop = volume_drop_alert(weekly_volume_comparison(history, reference=reference))
    if drop:
        alerts.insert(0, drop)
    return alerts[:MAX_DASHBOARD_ALERTS]


def dashboard_summary(
    history: Iterable[WorkoutSession],
    reference: datetime | None = None,
    unit: str = "lbs",
) -> DashboardSummary:
    history = list(history)
    reference = ensure_utc(reference or utcnow())
    groups = weekly_muscle_group_volume(history, reference=reference)
    return DashboardSummary(
        streak=training_streak(history, today=reference.date()),
        total_volume=total_volume(history),
        weekly=weekly_volume_comparison(history, reference=reference),
        group_volume=groups,
        imbalance=detect_imbalance(groups),
        alerts=dashboard_alerts(history, reference=reference, unit=unit),
        personal_records=personal_records(history),
    )


def exercise_progress(history: Iterable[WorkoutSession]) -> list[ExerciseProgress]:
    """Trend and chart series for every lifted exercise, alphabetical."""
    rows = []
    for name, points in sorted(exercise_points(history).items()):
        rows.append(
            ExerciseProgress(
                name=name,
                trend=classify_trend(points),
                best_one_rm=max(p.one_rm for p in points),
                points=points,
            )
        )
    return rows


def _cardio_summary(sessions: list[WorkoutSession]) -> CardioSummary:
    by_exercise: dict[str, list[float]] = {}
    for session in sessions:
        for ex in session.exercises:
            if ex.muscle_group != CARDIO_GROUP:
                continue
            totals = by_exercise.setdefault(ex.name, [0.0, 0.0])
            for s in ex.sets:
                totals[0] += numeric_or_zero(s.duration_minutes)
                totals[1] += numeric_or_zero(s.distance)

    top = sorted(
        (CardioExerciseTotal(name=n, minutes=m, distance=d) for n, (m, d) in by_exercise.items()),
        key=lambda c: (c.minutes, c.distance),
        reverse=True,
    )
    return CardioSummary(
        total_minutes=sum(c.minutes for c in top),
        total_distance=sum(c.distance for c in top),
        top=top[:3],
    )


def weekly_report(
    history: Iterable[WorkoutSession],
    reference: datetime | None = None,
    window_days: int = 7,
) -> WeeklyReport:
    """
    Summary of the last ``window_days`` calendar days including today
    (window starts at midnight UTC, ``window_days - 1`` days back).
    """
    end = ensure_utc(reference or utcnow())
    start = datetime.combine(end.date() - timedelta(days=window_days - 1), time.min, tzinfo=end.tzinfo)
    week = sessions_since(history, start)
    if not week:
        return WeeklyReport(start=start, end=end)

    top_exercises = exercise_volume_totals(week, start)
    groups = weekly_muscle_group_volume(week, window_days=window_days, reference=end)

    highlights: list[str] = []
    if len(week) >= 3:
        highlights.append("Great frequency this week")
    if top_exercises:
        highlights.append(f"Highest volume: {top_exercises[0].name}")
    if len(groups) >= 2:
        top, low = groups[0], groups[-1]
        if top.volume > low.volume * 2 and low.volume > 0:
            highlights.append(f"Volume imbalance: {top.group} is >2x {low.group}.")

    return WeeklyReport(
        start=start,
        end=end,
        total_sessions=len(week),
        total_volume=sum(session_volume(s) for s in week),
        avg_duration=sum(s.duration_minutes for s in week) / len(week),
        top_exercises=top_exercises[:3],
        group_volume=groups,
        highlights=highlights,
        cardio=_cardio_summary(week),
    )


def coach_insights(history: Iterable[WorkoutSession]) -> list[str]:
    """Short observations shown next to the coach chat."""
    recent = _newest_first(history)
    if not recent:
        return ["Start logging workouts to unlock personalized training insights."]

    insights: list[str] = []
    if len(recent) > INSIGHTS_MIN_SESSIONS:
        last, before = recent[0], recent[1]
        gap_days = (last.date - before.date).days
        if gap_days <= ON_A_ROLL_MAX_GAP_DAYS:
            insights.append("You're on a roll! Consistency is key to hypertrophy.")
        elif gap_days > COMEBACK_MIN_GAP_DAYS:
            insights.append("It's been over a week since your last session. Let's get back on track.")

        last_sets = sum(len(ex.sets) for ex in last.exercises)
        before_sets = sum(len(ex.sets) for ex in before.exercises)
        if last_sets < before_sets:
            insights.append(
                f"Your volume dropped last session ({last_sets} sets vs {before_sets}). "
                "Ensure you're recovering well."
            )
    return insights


def coach_context(history: Iterable[WorkoutSession]) -> str:
    """One-line summary of the latest session, prepended to every coach prompt."""
    recent = _newest_first(history)
    if not recent:
        return "User has no recent workout history."
    last = recent[0]
    focus = ", ".join(ex.name for ex in last.exercises)
    return f"Last workout was {last.name} on {last.date:%m/%d/%Y}. Focus: {focus}."

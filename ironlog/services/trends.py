"""Per-exercise trend classification, plateau (stall) and muscle imbalance detection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ironlog.core.constants import (
    IMBALANCE_RATIO,
    PLATEAU_SESSIONS_THRESHOLD,
    TREND_PROGRESS_RATIO,
    TREND_REGRESS_RATIO,
    TREND_WEIGHT_FACTOR,
)
from ironlog.core.enums import TrendStatus
from ironlog.core.rounding import round_int
from ironlog.schemas.analytics import GroupVolume, TrendPoint
from ironlog.schemas.session import ExerciseLog, WorkoutSession, numeric_or_zero
from ironlog.services.pr_detection import estimate_one_rep_max
from ironlog.services.volume import exercise_volume


def _is_working_set(weight: float | None, reps: int | None) -> bool:
    return numeric_or_zero(weight) > 0 and numeric_or_zero(reps) > 0


def _has_lifting_data(exercise: ExerciseLog) -> bool:
    return any(_is_working_set(s.weight, s.reps) for s in exercise.sets)


def _trend_point(session: WorkoutSession, exercise: ExerciseLog) -> TrendPoint:
    max_weight = max(numeric_or_zero(s.weight) for s in exercise.sets)
    one_rm = max(
        # Zero-weight or zero-rep sets estimate nothing
        round_int(estimate_one_rep_max(s.weight, s.reps)) if _is_working_set(s.weight, s.reps) else 0
        for s in exercise.sets
    )
    return TrendPoint(date=session.date, max_weight=max_weight, volume=exercise_volume(exercise), one_rm=one_rm)


def exercise_points(history: Iterable[WorkoutSession]) -> dict[str, list[TrendPoint]]:
    """One point per session per exercise name, oldest first. Cardio/empty entries are skipped."""
    points: dict[str, list[TrendPoint]] = {}
    for session in history:
        for ex in session.exercises:
            if not _has_lifting_data(ex):
                continue
            points.setdefault(ex.name, []).append(_trend_point(session, ex))
    for series in points.values():
        series.sort(key=lambda p: p.date)
    return points


def _score(point: TrendPoint) -> float:
    return point.max_weight * TREND_WEIGHT_FACTOR + point.volume


def classify_trend(points: Sequence[TrendPoint]) -> TrendStatus:
    """Compare the last two points (ordered by date) with a +/-2% dead band."""
    if len(points) < 2:
        return TrendStatus.MAINTAINING
    last, prev = _score(points[-1]), _score(points[-2])
    if last > prev * TREND_PROGRESS_RATIO:
        return TrendStatus.PROGRESSING
    if last < prev * TREND_REGRESS_RATIO:
        return TrendStatus.REGRESSING
    return TrendStatus.MAINTAINING


def best_working_weights(history: Iterable[WorkoutSession]) -> dict[str, list[float]]:
    """Best weight per session per exercise name, most recent session first."""
    weights: dict[str, list[float]] = {}
    for session in sorted(history, key=lambda s: s.date, reverse=True):
        for ex in session.exercises:
            best = max(
                (numeric_or_zero(s.weight) for s in ex.sets if _is_working_set(s.weight, s.reps)),
                default=0,
            )
            if best <= 0:
                continue
            weights.setdefault(ex.name, []).append(best)
    return weights


def detect_stalls(history: Iterable[WorkoutSession], unit: str = "lbs") -> list[str]:
    """
    Flag exercises whose best weight has not gone up over the last three sessions.
    a, b, c are the most recent, second and third most recent bests; the check
    is a <= b <= c exactly.
    """
    messages: list[str] = []
    for name, weights in best_working_weights(history).items():
        if len(weights) < PLATEAU_SESSIONS_THRESHOLD:
            continue
        a, b, c = weights[:PLATEAU_SESSIONS_THRESHOLD]
        if a <= b <= c:
            messages.append(
                f"{name} has stalled for {PLATEAU_SESSIONS_THRESHOLD} sessions. Add 5 {unit} or a rep next time."
            )
    return messages


def detect_imbalance(group_volumes: Sequence[GroupVolume]) -> str | None:
    """Top vs bottom group of a volume list sorted descending."""
    if len(group_volumes) < 2:
        return None
    top, low = group_volumes[0], group_volumes[-1]
    if top.volume > low.volume * IMBALANCE_RATIO and low.volume > 0:
        return f"{top.group} volume is >2x {low.group}. Consider adding sets for {low.group}."
    return None

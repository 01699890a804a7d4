"""Next-session load suggestion and previous-session lookup for an exercise."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from ironlog.core.catalog import catalog_group
from ironlog.core.constants import (
    CARDIO_GROUP,
    HEAVY_INCREMENT,
    HEAVY_LOAD_THRESHOLD,
    LIGHT_INCREMENT,
    MIN_REPS_AFTER_PLATEAU,
    MIN_REPS_SINGLE_SESSION,
    TARGET_REPS,
)
from ironlog.core.rounding import round_half_up
from ironlog.schemas.analytics import LoadSuggestion, PreviousExercise
from ironlog.schemas.session import ExerciseLog, WorkoutSession, numeric_or_zero


def _find_exercise(session: WorkoutSession, name: str) -> ExerciseLog | None:
    return next((ex for ex in session.exercises if ex.name == name), None)


def _recent_sessions_with(history: Iterable[WorkoutSession], name: str, limit: int) -> list[WorkoutSession]:
    ordered = sorted(history, key=lambda s: s.date, reverse=True)
    return [s for s in ordered if _find_exercise(s, name) is not None][:limit]


def best_set(exercise: ExerciseLog) -> LoadSuggestion | None:
    """Heaviest set, ties broken by more reps. None when nothing was lifted."""
    best_weight, best_reps = 0.0, 0
    for s in exercise.sets:
        w, r = numeric_or_zero(s.weight), int(numeric_or_zero(s.reps))
        if w > best_weight or (w == best_weight and r > best_reps):
            best_weight, best_reps = w, r
    if best_weight <= 0:
        return None
    return LoadSuggestion(weight=best_weight, reps=best_reps)


def _is_cardio(name: str, history: list[WorkoutSession], muscle_group: str | None) -> bool:
    if muscle_group is not None:
        return muscle_group == CARDIO_GROUP
    if catalog_group(name) == CARDIO_GROUP:
        return True
    return any(ex.is_cardio for s in history for ex in s.exercises if ex.name == name)


def suggest_next_load(
    name: str,
    history: Iterable[WorkoutSession],
    muscle_group: str | None = None,
) -> LoadSuggestion | None:
    """
    Suggest weight and reps for the next set of ``name`` from its last two sessions.

    - Cardio exercises and exercises never lifted before get no suggestion.
    - Increment is 5 at 50+ on the last best set, else 2.5.
    - With two sessions, bump only when the last best did not beat the one
      before and reached 6+ reps; with one session, bump at 8+ reps.
    - Reps are at least 8.
    """
    history = list(history)
    if _is_cardio(name, history, muscle_group):
        return None
    recent = _recent_sessions_with(history, name, limit=2)
    if not recent:
        return None
    last = best_set(_find_exercise(recent[0], name))
    if last is None:
        return None
    prev = best_set(_find_exercise(recent[1], name)) if len(recent) > 1 else None

    increment = HEAVY_INCREMENT if last.weight >= HEAVY_LOAD_THRESHOLD else LIGHT_INCREMENT
    weight = last.weight
    if prev is not None:
        if last.weight <= prev.weight and last.reps >= MIN_REPS_AFTER_PLATEAU:
            weight = last.weight + increment
    elif last.reps >= MIN_REPS_SINGLE_SESSION:
        weight = last.weight + increment

    reps = max(TARGET_REPS, last.reps or TARGET_REPS)
    return LoadSuggestion(weight=round_half_up(weight, 1), reps=reps)


def previous_exercise_log(
    name: str,
    history: Iterable[WorkoutSession],
    exclude_session_id: UUID | None = None,
) -> PreviousExercise | None:
    """Most recent logged exercise with this name, optionally skipping the session being edited."""
    candidates = [s for s in history if s.id != exclude_session_id]
    recent = _recent_sessions_with(candidates, name, limit=1)
    if not recent:
        return None
    session = recent[0]
    ex = _find_exercise(session, name)
    return PreviousExercise(
        session_id=session.id,
        session_date=session.date,
        name=ex.name,
        muscle_group=ex.muscle_group,
        sets=[s.model_dump() for s in ex.sets],
    )

"""PR detection: flag an exercise as a PR if its estimated 1RM beats every earlier session."""

from __future__ import annotations

from collections.abc import Iterable

from ironlog.core.constants import KEY_LIFTS, MILESTONE_THRESHOLDS
from ironlog.core.rounding import round_int
from ironlog.schemas.analytics import PersonalRecord
from ironlog.schemas.session import ExerciseLog, WorkoutSession, numeric_or_zero


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """
    Epley estimate: weight * (1 + reps / 30), rounded half up.
    A single rep is already a max, so it is returned unchanged (not rounded).
    """
    if reps == 1:
        return weight
    return round_int(weight * (1 + reps / 30))


def best_one_rep_max(exercise: ExerciseLog) -> float:
    """Best estimate over the exercise's sets; unset weight or reps count as 0."""
    return max(
        (estimate_one_rep_max(numeric_or_zero(s.weight), numeric_or_zero(s.reps)) for s in exercise.sets),
        default=0,
    )


def best_one_rep_max_by_name(history: Iterable[WorkoutSession]) -> dict[str, float]:
    bests: dict[str, float] = {}
    for session in history:
        for ex in session.exercises:
            best = best_one_rep_max(ex)
            if best > bests.get(ex.name, 0):
                bests[ex.name] = best
    return bests


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def detect_prs_on_save(
    saved: WorkoutSession,
    prior_history: Iterable[WorkoutSession],
    unit: str = "lbs",
) -> list[str]:
    """
    One message per exercise in ``saved`` whose best estimated 1RM exceeds the
    best ever recorded for the same name in ``prior_history`` (0 if never seen).
    ``prior_history`` must not contain ``saved`` itself.
    """
    historical = best_one_rep_max_by_name(prior_history)
    messages: list[str] = []
    for ex in saved.exercises:
        session_best = best_one_rep_max(ex)
        if session_best > 0 and session_best > historical.get(ex.name, 0):
            messages.append(f"New PR on {ex.name}: est {_format_number(session_best)} {unit} 1RM!")
    return messages


def detect_milestone(total_sessions: int) -> str | None:
    """Message when the total after a save lands exactly on a milestone."""
    if total_sessions in MILESTONE_THRESHOLDS:
        return f"Milestone: {total_sessions} workouts logged!"
    return None


def personal_records(
    history: Iterable[WorkoutSession],
    lifts: Iterable[str] = KEY_LIFTS,
) -> list[PersonalRecord]:
    """Best estimated 1RM for each key lift that appears in history, in ``lifts`` order."""
    wanted = tuple(lifts)
    bests: dict[str, float] = {}
    for session in history:
        for ex in session.exercises:
            if ex.name not in wanted:
                continue
            # Only sets with both fields count toward the board
            best = max(
                (estimate_one_rep_max(s.weight, s.reps) for s in ex.sets if s.weight is not None and s.reps is not None),
                default=0,
            )
            if ex.name not in bests or best > bests[ex.name]:
                bests[ex.name] = best
    return [PersonalRecord(name=name, one_rm=round_int(bests[name])) for name in wanted if name in bests]

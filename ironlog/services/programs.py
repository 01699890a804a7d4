"""Program presets: turn a program day into a prefilled session draft."""

from __future__ import annotations

from ironlog.core.catalog import PROGRAMS, find_exercise
from ironlog.core.constants import PRESET_REPS
from ironlog.schemas.session import ExerciseLog, WorkoutSet


def format_day_name(label: str) -> str:
    """'Upper (Monday)' -> 'Upper Day'; labels already naming a day are kept."""
    cleaned = label.split("(")[0].strip()
    if not cleaned:
        return label
    return cleaned if "day" in cleaned.lower() else f"{cleaned} Day"


def _exercise_id(name: str) -> str:
    entry = find_exercise(name)
    if entry:
        return entry["id"]
    return "-".join(name.lower().split())


def build_preset(day: dict) -> list[ExerciseLog]:
    """One uncompleted set per exercise at the program weight."""
    return [
        ExerciseLog(
            id=f"{day['id']}-{idx}",
            exercise_id=_exercise_id(ex["name"]),
            name=ex["name"],
            muscle_group=ex["muscle_group"],
            sets=[WorkoutSet(id=f"{day['id']}-{idx}-set1", reps=PRESET_REPS, weight=ex["weight"])],
        )
        for idx, ex in enumerate(day["exercises"])
    ]


def suggest_program_day(weekday: str) -> tuple[dict, dict] | None:
    """
    Best (program, day) for a weekday name such as 'monday'.
    Labels naming the weekday score 2; an Upper day on Monday scores 1 more.
    Rest days are never suggested. None when nothing matches.
    """
    weekday = weekday.lower()
    best: tuple[int, dict, dict] | None = None
    for program in PROGRAMS:
        for day in program["days"]:
            if day["rest"]:
                continue
            label = day["label"].lower()
            score = (2 if weekday in label else 0) + (1 if "upper" in label and "mon" in weekday else 0)
            if score > 0 and (best is None or score > best[0]):
                best = (score, program, day)
    if best is None:
        return None
    return best[1], best[2]

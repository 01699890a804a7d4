"""Training programs and prefilled session drafts."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ironlog.core.catalog import PROGRAMS, get_program, get_program_day
from ironlog.core.timeutils import utcnow
from ironlog.schemas.catalog import Program, SessionDraft
from ironlog.services.programs import build_preset, format_day_name, suggest_program_day

router = APIRouter()


def _draft(program_id: str, day: dict) -> SessionDraft:
    return SessionDraft(
        program_id=program_id,
        day_id=day["id"],
        name=format_day_name(day["label"]),
        exercises=build_preset(day),
    )


@router.get("", response_model=list[Program])
async def list_programs():
    return list(PROGRAMS)


@router.get("/suggested", response_model=SessionDraft | None)
async def suggested_day(weekday: str | None = None):
    """Program day whose label names the weekday (default: today, UTC). Null when none match."""
    weekday = weekday or utcnow().strftime("%A")
    match = suggest_program_day(weekday)
    if match is None:
        return None
    program, day = match
    return _draft(program["id"], day)


@router.get("/{program_id}", response_model=Program)
async def get_one_program(program_id: str):
    program = get_program(program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    return program


@router.get("/{program_id}/days/{day_id}/draft", response_model=SessionDraft)
async def get_day_draft(program_id: str, day_id: str):
    """Exercises for the day, one set of 10 reps at the program weight each."""
    day = get_program_day(program_id, day_id)
    if not day:
        raise HTTPException(status_code=404, detail="Program day not found")
    if day["rest"]:
        raise HTTPException(status_code=400, detail="Rest day has no exercises")
    return _draft(program_id, day)

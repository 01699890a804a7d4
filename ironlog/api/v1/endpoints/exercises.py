"""Exercise catalog (static, no DB)."""

from fastapi import APIRouter, HTTPException

from ironlog.core.catalog import MUSCLE_GROUPS, find_exercise, search_exercises
from ironlog.schemas.catalog import ExerciseDef

router = APIRouter()


@router.get("", response_model=list[ExerciseDef])
async def list_exercises(q: str = "", group: str = "All"):
    """Catalog exercises matching a name substring, optionally limited to one muscle group."""
    if group not in MUSCLE_GROUPS:
        raise HTTPException(status_code=404, detail="Unknown muscle group")
    return search_exercises(q, group)


@router.get("/muscle-groups", response_model=list[str])
async def list_muscle_groups():
    return list(MUSCLE_GROUPS)


@router.get("/lookup", response_model=ExerciseDef)
async def lookup_exercise(name: str):
    entry = find_exercise(name)
    if not entry:
        raise HTTPException(status_code=404, detail="Exercise not in catalog")
    return entry

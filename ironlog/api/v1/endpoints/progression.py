"""Next-set suggestion and last-time lookup for an exercise (progressive overload)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import require_user_id
from ironlog.api.v1.endpoints.sessions import load_history
from ironlog.db.session import get_db
from ironlog.schemas.analytics import LoadSuggestion, PreviousExercise
from ironlog.services.progression import previous_exercise_log, suggest_next_load

router = APIRouter()


@router.get("/suggestion", response_model=LoadSuggestion | None)
async def get_suggestion(
    name: str = Query(..., min_length=1),
    muscle_group: str | None = None,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Suggested weight and reps, or null for cardio and never-logged exercises."""
    history = await load_history(db, user_id)
    return suggest_next_load(name, history, muscle_group=muscle_group)


@router.get("/previous", response_model=PreviousExercise | None)
async def get_previous(
    name: str = Query(..., min_length=1),
    exclude_session_id: uuid.UUID | None = None,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Sets from the most recent session that included this exercise. Pass
    exclude_session_id (the session being edited) to get the one before it.
    """
    history = await load_history(db, user_id)
    return previous_exercise_log(name, history, exclude_session_id=exclude_session_id)

"""Streak calculation endpoint."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import require_user_id
from ironlog.api.v1.endpoints.sessions import load_history
from ironlog.db.session import get_db
from ironlog.schemas.analytics import StreakSummary
from ironlog.services.streak import longest_training_streak, training_streak

router = APIRouter()


@router.get("", response_model=StreakSummary)
async def get_streak(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Returns current streak (consecutive training days, one rest day tolerated,
    last session no more than 2 days ago), longest ever streak, and the date
    of the last workout.
    """
    history = await load_history(db, user_id)
    return StreakSummary(
        current_streak=training_streak(history),
        longest_streak=longest_training_streak(history),
        last_workout_date=history[0].day if history else None,
    )

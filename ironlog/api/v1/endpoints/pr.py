"""Personal records and one-rep-max estimates."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import require_user_id
from ironlog.api.v1.endpoints.sessions import load_history
from ironlog.core.rounding import round_int
from ironlog.db.session import get_db
from ironlog.schemas.analytics import PersonalRecord
from ironlog.services.pr_detection import best_one_rep_max_by_name, estimate_one_rep_max, personal_records

router = APIRouter()


@router.get("/one-rep-max")
async def one_rep_max(
    weight: float = Query(..., ge=0),
    reps: int = Query(..., ge=1),
):
    """Epley estimate for a single set (no DB)."""
    return {"weight": weight, "reps": reps, "one_rm": estimate_one_rep_max(weight, reps)}


@router.get("/records", response_model=list[PersonalRecord])
async def key_lift_records(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Best estimated 1RM for bench, squat, deadlift and overhead press."""
    history = await load_history(db, user_id)
    return personal_records(history)


@router.get("/all", response_model=list[PersonalRecord])
async def all_records(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Best estimated 1RM for every exercise ever logged, highest first."""
    history = await load_history(db, user_id)
    bests = best_one_rep_max_by_name(history)
    rows = [PersonalRecord(name=name, one_rm=round_int(value)) for name, value in bests.items()]
    return sorted(rows, key=lambda r: r.one_rm, reverse=True)

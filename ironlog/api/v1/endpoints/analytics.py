"""Training analytics derived from the user's full session history."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import require_user_id
from ironlog.api.v1.endpoints.sessions import load_history
from ironlog.core.config import get_settings
from ironlog.core.constants import VOLUME_WINDOW_DAYS
from ironlog.db.session import get_db
from ironlog.schemas.analytics import (
    DashboardSummary,
    ExerciseProgress,
    GroupVolume,
    SessionVolume,
    VolumeComparison,
    WeeklyReport,
)
from ironlog.services.reports import dashboard_alerts, dashboard_summary, exercise_progress, weekly_report
from ironlog.services.trends import detect_imbalance, detect_stalls
from ironlog.services.volume import session_volumes, weekly_muscle_group_volume, weekly_volume_comparison

router = APIRouter()


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Streak, weekly volume, muscle split, alerts and key-lift records in one call."""
    history = await load_history(db, user_id)
    return dashboard_summary(history, unit=get_settings().weight_unit)


@router.get("/volume/groups", response_model=list[GroupVolume])
async def get_group_volume(
    window_days: int = Query(VOLUME_WINDOW_DAYS, ge=1, le=365),
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Volume per muscle group in the window, largest first. Empty list = nothing logged."""
    history = await load_history(db, user_id)
    return weekly_muscle_group_volume(history, window_days=window_days)


@router.get("/volume/weekly", response_model=VolumeComparison)
async def get_weekly_volume(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return weekly_volume_comparison(history)


@router.get("/volume/sessions", response_model=list[SessionVolume])
async def get_session_volumes(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return session_volumes(history)


@router.get("/trends", response_model=list[ExerciseProgress])
async def get_trends(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return exercise_progress(history)


@router.get("/alerts", response_model=list[str])
async def get_alerts(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Volume drop vs last week, then stalled lifts (max 4)."""
    history = await load_history(db, user_id)
    return dashboard_alerts(history, unit=get_settings().weight_unit)


@router.get("/stalls", response_model=list[str])
async def get_stalls(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return detect_stalls(history, unit=get_settings().weight_unit)


@router.get("/imbalance")
async def get_imbalance(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return {"message": detect_imbalance(weekly_muscle_group_volume(history))}


@router.get("/weekly-report", response_model=WeeklyReport)
async def get_weekly_report(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return weekly_report(history)

"""Workout session CRUD. Saves report new PRs and milestones as celebrations."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import get_notifier, require_user_id
from ironlog.core.config import get_settings
from ironlog.core.constants import DEFAULT_SESSION_NAME
from ironlog.db.session import get_db
from ironlog.models.workout import WorkoutSession as WorkoutSessionRow
from ironlog.schemas.session import SessionSaveResult, WorkoutSession, WorkoutSessionCreate
from ironlog.services.notifications import NotificationSink
from ironlog.services.pr_detection import detect_milestone, detect_prs_on_save
from ironlog.services.preferences import get_or_create_preference

logger = logging.getLogger(__name__)

router = APIRouter()


async def load_history(db: AsyncSession, user_id: uuid.UUID) -> list[WorkoutSession]:
    """
    All of a user's sessions, most recent first.
    A store failure is a 503, never an empty list: empty means "no workouts".
    """
    try:
        result = await db.execute(
            select(WorkoutSessionRow)
            .where(WorkoutSessionRow.user_id == user_id)
            .order_by(WorkoutSessionRow.date.desc())
        )
        rows = result.scalars().all()
    except SQLAlchemyError:
        logger.exception("Could not load sessions for user %s", user_id)
        raise HTTPException(status_code=503, detail="Could not load saved workouts.")
    return [WorkoutSession.model_validate(row) for row in rows]


async def _get_row(db: AsyncSession, user_id: uuid.UUID, session_id: uuid.UUID) -> WorkoutSessionRow:
    row = await db.get(WorkoutSessionRow, session_id)
    if not row or row.user_id != user_id:
        raise HTTPException(status_code=404, detail="Workout session not found")
    return row


def _apply(row: WorkoutSessionRow, payload: WorkoutSessionCreate, editing: bool = False) -> None:
    """Copy the payload onto the row. An edit that omits date or duration keeps the stored ones."""
    row.name = payload.name.strip() or DEFAULT_SESSION_NAME
    row.date = payload.resolved_date(current=row.date if editing else None)
    row.duration_minutes = payload.resolved_duration(current=row.duration_minutes if editing else None)
    row.exercises = [ex.model_dump(mode="json") for ex in payload.exercises]


async def _celebrate(
    db: AsyncSession,
    user_id: uuid.UUID,
    notifier: NotificationSink,
    messages: list[str],
) -> None:
    if not messages:
        return
    pref = await get_or_create_preference(db, user_id)
    notifier.notify_all(str(user_id), pref.notification_permission, messages)


@router.get("", response_model=list[WorkoutSession])
async def list_sessions(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """All sessions, most recent first."""
    return await load_history(db, user_id)


@router.post("", response_model=SessionSaveResult, status_code=201)
async def create_session(
    payload: WorkoutSessionCreate,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
    notifier: NotificationSink = Depends(get_notifier),
):
    """Save a finished workout. Exercises without sets are dropped before saving."""
    prior = await load_history(db, user_id)
    row = WorkoutSessionRow(user_id=user_id)
    _apply(row, payload)
    db.add(row)
    await db.flush()
    await db.refresh(row)
    saved = WorkoutSession.model_validate(row)

    celebrations = detect_prs_on_save(saved, prior, unit=get_settings().weight_unit)
    milestone = detect_milestone(len(prior) + 1)
    if milestone:
        celebrations.append(milestone)
    await _celebrate(db, user_id, notifier, celebrations)
    logger.info("Saved session %s for user %s (%d celebrations)", saved.id, user_id, len(celebrations))
    return SessionSaveResult(session=saved, celebrations=celebrations)


@router.get("/{session_id}", response_model=WorkoutSession)
async def get_session(
    session_id: uuid.UUID,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await _get_row(db, user_id, session_id)


@router.put("/{session_id}", response_model=SessionSaveResult)
async def update_session(
    session_id: uuid.UUID,
    payload: WorkoutSessionCreate,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
    notifier: NotificationSink = Depends(get_notifier),
):
    """
    Replace a session. PRs are judged against history as stored before the edit,
    including this session's previous version, so re-saving never beats itself.
    Milestones only count on create.
    """
    row = await _get_row(db, user_id, session_id)
    prior = await load_history(db, user_id)
    _apply(row, payload, editing=True)
    await db.flush()
    await db.refresh(row)
    saved = WorkoutSession.model_validate(row)

    celebrations = detect_prs_on_save(saved, prior, unit=get_settings().weight_unit)
    await _celebrate(db, user_id, notifier, celebrations)
    return SessionSaveResult(session=saved, celebrations=celebrations)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: uuid.UUID,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    row = await _get_row(db, user_id, session_id)
    await db.delete(row)
    logger.info("Deleted session %s for user %s", session_id, user_id)

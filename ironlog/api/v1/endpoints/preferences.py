"""Reminder time and notification permission, plus the daily reminder check."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import get_notifier, require_user_id
from ironlog.api.v1.endpoints.sessions import load_history
from ironlog.core.constants import REMINDER_BODY, REMINDER_TITLE
from ironlog.core.enums import NotificationPermission
from ironlog.core.timeutils import utcnow
from ironlog.db.session import get_db
from ironlog.schemas.preferences import PermissionUpdate, PreferencesRead, ReminderCheck, ReminderUpdate
from ironlog.services.notifications import NotificationSink, request_permission
from ironlog.services.preferences import get_or_create_preference
from ironlog.services.reminders import reminder_due

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=PreferencesRead)
async def get_preferences(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_create_preference(db, user_id)


@router.put("/reminder", response_model=PreferencesRead)
async def set_reminder_time(
    payload: ReminderUpdate,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    pref = await get_or_create_preference(db, user_id)
    pref.reminder_time = payload.reminder_time
    await db.flush()
    return pref


@router.put("/notification-permission", response_model=PreferencesRead)
async def set_notification_permission(
    payload: PermissionUpdate,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Record the client's permission prompt result. A decided permission does not change."""
    pref = await get_or_create_preference(db, user_id)
    current = NotificationPermission(pref.notification_permission)
    pref.notification_permission = request_permission(current, payload.permission).value
    await db.flush()
    return pref


@router.post("/reminder/check", response_model=ReminderCheck)
async def check_reminder(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
    notifier: NotificationSink = Depends(get_notifier),
):
    """
    Called by the client periodically. Sends the daily reminder at most once a day,
    after the reminder time, when no session has been logged today.
    """
    now = utcnow()
    pref = await get_or_create_preference(db, user_id)
    history = await load_history(db, user_id)
    has_session_today = any(s.day == now.date() for s in history)
    due = reminder_due(now, pref.reminder_time, has_session_today, pref.last_reminded_on)
    notified = False
    if due:
        notified = notifier.notify(str(user_id), pref.notification_permission, REMINDER_TITLE, REMINDER_BODY)
        pref.last_reminded_on = now.date()
        await db.flush()
        logger.info("Daily reminder for user %s (delivered=%s)", user_id, notified)
    return ReminderCheck(due=due, notified=notified)

"""AI coach: chat threads, messages and insights."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import get_coach, require_user_id
from ironlog.api.v1.endpoints.sessions import load_history
from ironlog.core.constants import NEW_CHAT_TITLE, THREAD_PREVIEW_LENGTH, THREAD_TITLE_LENGTH
from ironlog.core.enums import ChatRole
from ironlog.core.timeutils import utcnow
from ironlog.db.session import get_db
from ironlog.models.coach import CoachMessage, CoachThread
from ironlog.schemas.coach import (
    ChatMessageRead,
    CoachAskRequest,
    CoachReply,
    SendMessage,
    SendResult,
    ThreadCreate,
    ThreadRead,
    ThreadRename,
)
from ironlog.services.coach import GeminiCoach
from ironlog.services.reports import coach_context, coach_insights

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_thread(db: AsyncSession, user_id: uuid.UUID, thread_id: uuid.UUID) -> CoachThread:
    thread = await db.get(CoachThread, thread_id)
    if not thread or thread.user_id != user_id:
        raise HTTPException(status_code=404, detail="Chat thread not found")
    return thread


@router.get("/threads", response_model=list[ThreadRead])
async def list_threads(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Threads, most recently active first."""
    result = await db.execute(
        select(CoachThread).where(CoachThread.user_id == user_id).order_by(CoachThread.updated_at.desc())
    )
    return list(result.scalars().all())


@router.post("/threads", response_model=ThreadRead, status_code=201)
async def create_thread(
    payload: ThreadCreate,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    thread = CoachThread(user_id=user_id, title=payload.title.strip() or NEW_CHAT_TITLE)
    db.add(thread)
    await db.flush()
    await db.refresh(thread)
    return thread


@router.patch("/threads/{thread_id}", response_model=ThreadRead)
async def rename_thread(
    thread_id: uuid.UUID,
    payload: ThreadRename,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    thread = await _get_thread(db, user_id, thread_id)
    thread.title = payload.title.strip()
    thread.updated_at = utcnow()
    await db.flush()
    await db.refresh(thread)
    return thread


@router.delete("/threads/{thread_id}", status_code=204)
async def delete_thread(
    thread_id: uuid.UUID,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    thread = await _get_thread(db, user_id, thread_id)
    await db.delete(thread)


@router.get("/threads/{thread_id}/messages", response_model=list[ChatMessageRead])
async def list_messages(
    thread_id: uuid.UUID,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Messages in send order."""
    await _get_thread(db, user_id, thread_id)
    result = await db.execute(
        select(CoachMessage)
        .where(CoachMessage.thread_id == thread_id)
        .order_by(CoachMessage.created_at, CoachMessage.role.desc())
    )
    return list(result.scalars().all())


@router.post("/threads/{thread_id}/messages", response_model=SendResult)
async def send_message(
    thread_id: uuid.UUID,
    payload: SendMessage,
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
    coach: GeminiCoach = Depends(get_coach),
):
    """
    Ask the coach with the latest session as context and store both messages.
    The reply is always text: provider failures come back as a fallback message.
    """
    thread = await _get_thread(db, user_id, thread_id)
    history = await load_history(db, user_id)
    reply = await coach.send(payload.text, coach_context(history))

    now = utcnow()
    question = CoachMessage(thread_id=thread.id, role=ChatRole.USER.value, text=payload.text, created_at=now)
    answer = CoachMessage(thread_id=thread.id, role=ChatRole.MODEL.value, text=reply, created_at=now)
    db.add_all([question, answer])

    thread.preview = reply[:THREAD_PREVIEW_LENGTH]
    thread.updated_at = now
    if thread.title == NEW_CHAT_TITLE:
        thread.title = payload.text.strip()[:THREAD_TITLE_LENGTH] or NEW_CHAT_TITLE
    await db.flush()
    await db.refresh(thread)
    return SendResult(
        thread=ThreadRead.model_validate(thread),
        messages=[ChatMessageRead.model_validate(question), ChatMessageRead.model_validate(answer)],
    )


@router.post("/ask", response_model=CoachReply)
async def ask(
    payload: CoachAskRequest,
    user_id: uuid.UUID = Depends(require_user_id),
    coach: GeminiCoach = Depends(get_coach),
):
    """One-off question without a thread. Context is sent as given."""
    return CoachReply(reply=await coach.send(payload.message, payload.context))


@router.get("/insights", response_model=list[str])
async def get_insights(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    history = await load_history(db, user_id)
    return coach_insights(history)


@router.get("/context")
async def get_context(
    user_id: uuid.UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """The context line sent with each coach question."""
    history = await load_history(db, user_id)
    return {"context": coach_context(history)}

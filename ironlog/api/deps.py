"""Shared request dependencies: current user, coach client, notification sink."""

from __future__ import annotations

import uuid
from functools import lru_cache

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.core.config import get_settings
from ironlog.db.session import get_db
from ironlog.models.user import AuthToken
from ironlog.services.coach import GeminiCoach
from ironlog.services.notifications import NotificationSink

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> uuid.UUID | None:
    """Current user id or None (anonymous or unknown token)."""
    if credentials is None:
        return None
    token = await db.get(AuthToken, credentials.credentials)
    return token.user_id if token else None


async def require_user_id(user_id: uuid.UUID | None = Depends(get_current_user_id)) -> uuid.UUID:
    if user_id is None:
        raise HTTPException(status_code=401, detail="Please sign in.", headers={"WWW-Authenticate": "Bearer"})
    return user_id


@lru_cache
def get_coach() -> GeminiCoach:
    return GeminiCoach.from_settings(get_settings())


@lru_cache
def get_notifier() -> NotificationSink:
    return NotificationSink()

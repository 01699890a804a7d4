"""Register, login, logout and current user."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.api.deps import bearer_scheme, require_user_id
from ironlog.core.config import get_settings
from ironlog.core.security import hash_password, new_token, verify_password
from ironlog.db.session import get_db
from ironlog.models.user import AuthToken, User
from ironlog.schemas.auth import Credentials, TokenRead, UserRead

logger = logging.getLogger(__name__)

router = APIRouter()


async def _issue_token(db: AsyncSession, user: User) -> TokenRead:
    token = AuthToken(token=new_token(get_settings().auth_token_bytes), user_id=user.id)
    db.add(token)
    await db.flush()
    return TokenRead(access_token=token.token, user_id=user.id)


@router.post("/register", response_model=TokenRead, status_code=201)
async def register(payload: Credentials, db: AsyncSession = Depends(get_db)):
    """Create an account and sign it in."""
    email = payload.email.strip().lower()
    existing = await db.execute(select(User.id).where(func.lower(User.email) == email))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail="An account with this email already exists")
    user = User(email=email, password_hash=hash_password(payload.password))
    db.add(user)
    await db.flush()
    logger.info("Registered user %s", user.id)
    return await _issue_token(db, user)


@router.post("/login", response_model=TokenRead)
async def login(payload: Credentials, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).where(User.email == payload.email.strip().lower()))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return await _issue_token(db, user)


@router.post("/logout", status_code=204)
async def logout(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
):
    """Revoke the presented token. Logging out twice is not an error."""
    if credentials is not None:
        await db.execute(delete(AuthToken).where(AuthToken.token == credentials.credentials))


@router.get("/me", response_model=UserRead)
async def me(user_id: uuid.UUID = Depends(require_user_id), db: AsyncSession = Depends(get_db)):
    user = await db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

"""User account, bearer tokens and per-user preferences."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ironlog.core.constants import DEFAULT_REMINDER_TIME
from ironlog.core.enums import NotificationPermission
from ironlog.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A login. Every session, chat thread and preference row belongs to one user."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)

    tokens: Mapped[list["AuthToken"]] = relationship(
        "AuthToken", back_populates="user", cascade="all, delete-orphan"
    )


class AuthToken(Base):
    """Opaque bearer token issued on login, deleted on logout."""

    __tablename__ = "auth_tokens"

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)

    user: Mapped["User"] = relationship("User", back_populates="tokens")


class UserPreference(Base):
    """Reminder time (HH:MM), last known notification permission, last reminder day."""

    __tablename__ = "user_preferences"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    reminder_time: Mapped[str] = mapped_column(String(5), default=DEFAULT_REMINDER_TIME, nullable=False)
    notification_permission: Mapped[str] = mapped_column(
        String(10), default=NotificationPermission.DEFAULT.value, nullable=False
    )
    last_reminded_on: Mapped[date | None] = mapped_column(Date, nullable=True)

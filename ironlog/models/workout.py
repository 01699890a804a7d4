"""WorkoutSession model. Exercises and sets are stored as one JSON document per session."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from ironlog.core.constants import DEFAULT_SESSION_NAME
from ironlog.db.base import Base

ExercisesJSON = JSON().with_variant(JSONB(), "postgresql")


class WorkoutSession(Base):
    """A logged workout. Replaced wholesale on edit, never patched set by set."""

    __tablename__ = "workout_sessions"
    __table_args__ = (Index("ix_workout_sessions_user_id_date", "user_id", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    name: Mapped[str] = mapped_column(String(255), default=DEFAULT_SESSION_NAME, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    exercises: Mapped[list] = mapped_column(ExercisesJSON, default=list, nullable=False)

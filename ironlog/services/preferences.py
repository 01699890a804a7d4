"""Per-user preference row, created with defaults on first use."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ironlog.models.user import UserPreference


async def get_or_create_preference(db: AsyncSession, user_id: uuid.UUID) -> UserPreference:
    """Reminder at 18:00 and permission 'default' until the user changes them."""
    pref = await db.get(UserPreference, user_id)
    if pref is None:
        pref = UserPreference(user_id=user_id)
        db.add(pref)
        await db.flush()
        await db.refresh(pref)
    return pref

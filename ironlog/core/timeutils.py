"""Timezone helpers. Stored instants are always timezone-aware UTC."""

from datetime import date, datetime, time, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes (e.g. from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def noon_utc(day: date) -> datetime:
    """A calendar day saved as noon so it never shifts across timezones."""
    return datetime.combine(day, time(12, 0), tzinfo=timezone.utc)


def parse_hhmm(value: str) -> time:
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))

"""Daily training reminder."""

from __future__ import annotations

import re
from datetime import date, datetime

from ironlog.core.timeutils import parse_hhmm

REMINDER_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def reminder_due(
    now: datetime,
    reminder_time: str,
    has_session_today: bool,
    last_reminded_on: date | None,
) -> bool:
    """Due once per day, after the reminder time, and only if nothing was logged today."""
    if has_session_today or last_reminded_on == now.date():
        return False
    return now.time() >= parse_hhmm(reminder_time)

"""Workout and rest timers anchored to wall-clock time.

Clients tick once a second for display only; every value here is computed
from an absolute anchor so dropped or delayed ticks never cause drift.
"""

import math
from datetime import datetime

from ironlog.core.constants import MAX_SESSION_DURATION_MINUTES
from ironlog.core.timeutils import ensure_utc


def elapsed_seconds(anchor: datetime, now: datetime) -> int:
    """Whole seconds since the anchor, never negative."""
    delta = (ensure_utc(now) - ensure_utc(anchor)).total_seconds()
    return max(0, int(delta))


def session_duration_minutes(elapsed: float) -> int:
    """Minutes to store for a finished workout: at least 1, at most a full day."""
    return min(MAX_SESSION_DURATION_MINUTES, max(1, math.ceil(elapsed / 60)))


def rest_remaining_seconds(rest_started: datetime, rest_seconds: int, now: datetime) -> int:
    return max(0, rest_seconds - elapsed_seconds(rest_started, now))


def format_clock(seconds: int) -> str:
    """mm:ss, or h:mm:ss once past an hour."""
    hours, rem = divmod(max(0, seconds), 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"

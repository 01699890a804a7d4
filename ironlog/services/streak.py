"""Training streak: consecutive training days with one tolerated rest day."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ironlog.core.constants import STREAK_GRACE_GAP_DAYS, STREAK_MAX_DAYS_SINCE_LAST
from ironlog.core.timeutils import utcnow
from ironlog.schemas.session import WorkoutSession


def _training_days(history: Iterable[WorkoutSession]) -> list[date]:
    # One entry per session, most recent first. Same-day sessions are kept as
    # separate entries, so a 0-day gap ends the walk.
    return [s.day for s in sorted(history, key=lambda s: s.date, reverse=True)]


def _run_length(days: list[date], start: int) -> int:
    """Length of the streak starting at days[start] and walking back in time."""
    count = 1
    grace_used = False
    for prev, cur in zip(days[start:], days[start + 1 :]):
        gap = (prev - cur).days
        if gap == 1:
            count += 1
        elif gap == STREAK_GRACE_GAP_DAYS and not grace_used:
            grace_used = True
            count += 1
        else:
            break
    return count


def training_streak(history: Iterable[WorkoutSession], today: date | None = None) -> int:
    """
    Current streak ending at the most recent session.
    0 when there is no history or the last session is more than 2 days before today.
    """
    days = _training_days(history)
    if not days:
        return 0
    today = today or utcnow().date()
    if (today - days[0]).days > STREAK_MAX_DAYS_SINCE_LAST:
        return 0
    return _run_length(days, 0)


def longest_training_streak(history: Iterable[WorkoutSession]) -> int:
    """Longest streak anywhere in history, using the same gap rules."""
    days = _training_days(history)
    return max((_run_length(days, i) for i in range(len(days))), default=0)

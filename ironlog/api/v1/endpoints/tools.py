"""QoL tools: workout and rest timers anchored to wall-clock time."""

from datetime import datetime

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ironlog.core.timeutils import utcnow
from ironlog.services.workout_timer import (
    elapsed_seconds,
    format_clock,
    rest_remaining_seconds,
    session_duration_minutes,
)

router = APIRouter()


class ElapsedResponse(BaseModel):
    elapsed_seconds: int
    clock: str
    duration_minutes: int  # What a save right now would store


class RestResponse(BaseModel):
    remaining_seconds: int
    clock: str
    done: bool


@router.get("/timer/elapsed", response_model=ElapsedResponse)
async def workout_elapsed(started_at: datetime):
    """Elapsed time since the workout anchor, computed from the clock (not from ticks)."""
    elapsed = elapsed_seconds(started_at, utcnow())
    return ElapsedResponse(
        elapsed_seconds=elapsed,
        clock=format_clock(elapsed),
        duration_minutes=session_duration_minutes(elapsed),
    )


@router.get("/timer/rest", response_model=RestResponse)
async def rest_remaining(started_at: datetime, rest_seconds: int = Query(90, ge=1, le=3600)):
    remaining = rest_remaining_seconds(started_at, rest_seconds, utcnow())
    return RestResponse(remaining_seconds=remaining, clock=format_clock(remaining), done=remaining == 0)

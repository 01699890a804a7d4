"""Session payload rules, timers, reminders, notifications and program presets."""

import math
from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from factories import REF

from ironlog.core.enums import NotificationPermission
from ironlog.schemas.session import WorkoutSession, WorkoutSessionCreate, WorkoutSet
from ironlog.services.notifications import NotificationSink, request_permission
from ironlog.services.programs import build_preset, format_day_name, suggest_program_day
from ironlog.services.reminders import reminder_due
from ironlog.services.workout_timer import (
    elapsed_seconds,
    format_clock,
    rest_remaining_seconds,
    session_duration_minutes,
)


# ── Set fields ──


class TestWorkoutSet:
    @pytest.mark.parametrize("raw", ["", "abc", True, None, math.nan, math.inf])
    def test_non_numbers_become_unset(self, raw):
        assert WorkoutSet(weight=raw).weight is None

    def test_numbers_kept(self):
        s = WorkoutSet(weight=62.5, reps=8, rpe=8.5)
        assert (s.weight, s.reps, s.rpe) == (62.5, 8, 8.5)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutSet(weight=-5, reps=8)

    def test_loggable_depends_on_kind(self):
        assert WorkoutSet(weight=0, reps=10).is_loggable(cardio=False)
        assert not WorkoutSet(weight=20).is_loggable(cardio=False)
        assert WorkoutSet(incline=3).is_loggable(cardio=True)
        assert not WorkoutSet(weight=20, reps=5).is_loggable(cardio=True)


# ── Create payload ──


def _payload(**overrides):
    body = {
        "name": "Push",
        "exercises": [
            {"name": "Bench", "muscle_group": "Chest", "sets": [{"weight": 100, "reps": 5, "completed": True}]},
        ],
    }
    body.update(overrides)
    return body


class TestWorkoutSessionCreate:
    def test_exercises_without_sets_are_pruned(self):
        body = _payload()
        body["exercises"].append({"name": "Fly", "sets": []})
        assert [ex.name for ex in WorkoutSessionCreate(**body).exercises] == ["Bench"]

    def test_completed_strength_set_needs_weight_and_reps(self):
        body = _payload(exercises=[{"name": "Bench", "sets": [{"weight": 100, "completed": True}]}])
        with pytest.raises(ValidationError, match="needs weight and reps"):
            WorkoutSessionCreate(**body)

    def test_completed_cardio_set_needs_a_metric(self):
        body = _payload(exercises=[{"name": "Row", "muscle_group": "Cardio", "sets": [{"completed": True}]}])
        with pytest.raises(ValidationError, match="duration, distance or incline"):
            WorkoutSessionCreate(**body)

    def test_incomplete_blank_sets_allowed(self):
        body = _payload(exercises=[{"name": "Bench", "sets": [{"weight": ""}]}])
        assert WorkoutSessionCreate(**body).exercises[0].sets[0].weight is None

    def test_default_name(self):
        assert WorkoutSessionCreate().name == "Untitled Workout"

    def test_past_day_saved_at_noon_utc(self):
        payload = WorkoutSessionCreate(**_payload(on_date="2026-03-01"))
        assert payload.resolved_date(REF) == datetime(2026, 3, 1, 12, tzinfo=timezone.utc)

    def test_date_defaults_to_now(self):
        assert WorkoutSessionCreate(**_payload()).resolved_date(REF) == REF

    def test_duration_from_timer_anchor(self):
        payload = WorkoutSessionCreate(**_payload(started_at=(REF - timedelta(minutes=10, seconds=30)).isoformat()))
        assert payload.resolved_duration(REF) == 11

    def test_duration_clamped_to_a_day(self):
        assert WorkoutSessionCreate(**_payload(duration_minutes=5000)).resolved_duration(REF) == 1440

    def test_duration_defaults_to_one_minute(self):
        assert WorkoutSessionCreate(**_payload()).resolved_duration(REF) == 1

    def test_edit_without_date_keeps_current(self):
        current = datetime(2026, 3, 8, 12, tzinfo=timezone.utc)
        assert WorkoutSessionCreate(**_payload()).resolved_date(REF, current=current) == current

    def test_explicit_day_overrides_current(self):
        payload = WorkoutSessionCreate(**_payload(on_date="2026-03-01"))
        assert payload.resolved_date(REF, current=REF) == datetime(2026, 3, 1, 12, tzinfo=timezone.utc)

    def test_edit_without_duration_keeps_current(self):
        assert WorkoutSessionCreate(**_payload()).resolved_duration(REF, current=45) == 45
        assert WorkoutSessionCreate(**_payload(duration_minutes=30)).resolved_duration(REF, current=45) == 30

    def test_zero_duration_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutSessionCreate(**_payload(duration_minutes=0))


class TestWorkoutSession:
    def test_naive_date_treated_as_utc(self):
        s = WorkoutSession(date=datetime(2026, 3, 18, 9, 30))
        assert s.date.tzinfo == timezone.utc
        assert s.day == date(2026, 3, 18)

    def test_duration_bounds(self):
        with pytest.raises(ValidationError):
            WorkoutSession(date=REF, duration_minutes=1441)


# ── Timers ──


class TestTimers:
    def test_elapsed_never_negative(self):
        assert elapsed_seconds(REF + timedelta(minutes=1), REF) == 0
        assert elapsed_seconds(REF, REF + timedelta(seconds=90.7)) == 90

    def test_duration_minutes(self):
        assert session_duration_minutes(0) == 1
        assert session_duration_minutes(61) == 2
        assert session_duration_minutes(10 * 24 * 3600) == 1440

    def test_rest_countdown(self):
        assert rest_remaining_seconds(REF, 90, REF + timedelta(seconds=30)) == 60
        assert rest_remaining_seconds(REF, 90, REF + timedelta(minutes=5)) == 0

    def test_format_clock(self):
        assert format_clock(65) == "01:05"
        assert format_clock(3725) == "1:02:05"


# ── Reminders and notifications ──


class TestReminders:
    def test_due_after_reminder_time(self):
        assert reminder_due(REF, "14:00", has_session_today=False, last_reminded_on=None)

    def test_not_due_before_reminder_time(self):
        assert not reminder_due(REF, "18:00", has_session_today=False, last_reminded_on=None)

    def test_not_due_when_trained_today(self):
        assert not reminder_due(REF, "14:00", has_session_today=True, last_reminded_on=None)

    def test_once_per_day(self):
        assert not reminder_due(REF, "14:00", has_session_today=False, last_reminded_on=REF.date())
        assert reminder_due(REF, "14:00", has_session_today=False, last_reminded_on=date(2026, 3, 17))


class _BrokenSink(NotificationSink):
    def deliver(self, user_id, title, body):
        raise RuntimeError("push service down")


class _CountingSink(NotificationSink):
    def __init__(self):
        self.sent = []

    def deliver(self, user_id, title, body):
        self.sent.append(body)


class TestNotifications:
    def test_undecided_permission_can_change(self):
        assert request_permission(NotificationPermission.DEFAULT, NotificationPermission.GRANTED) == "granted"

    def test_decided_permission_is_sticky(self):
        assert request_permission(NotificationPermission.DENIED, NotificationPermission.GRANTED) == "denied"
        assert request_permission(NotificationPermission.GRANTED, NotificationPermission.DENIED) == "granted"

    def test_nothing_sent_without_permission(self):
        sink = _CountingSink()
        assert not sink.notify("u1", "default", "BFit", "hi")
        assert not sink.notify("u1", NotificationPermission.DENIED, "BFit", "hi")
        assert sink.sent == []

    def test_delivery_failure_is_swallowed(self):
        assert _BrokenSink().notify("u1", "granted", "BFit", "hi") is False

    def test_notify_all_counts_deliveries(self):
        sink = _CountingSink()
        assert sink.notify_all("u1", "granted", ["a", "b"]) == 2
        assert sink.sent == ["a", "b"]


# ── Program presets ──


class TestPrograms:
    def test_format_day_name(self):
        assert format_day_name("Upper (Monday)") == "Upper Day"
        assert format_day_name("Leg Day") == "Leg Day"
        assert format_day_name("Chest & Back") == "Chest & Back Day"

    def test_build_preset(self):
        day = {
            "id": "d1",
            "label": "Upper",
            "rest": False,
            "exercises": [{"name": "Barbell Bench Press", "weight": 60, "muscle_group": "Chest"}],
        }
        [ex] = build_preset(day)
        assert ex.exercise_id == "bp"
        assert ex.sets[0].weight == 60
        assert ex.sets[0].reps == 10
        assert not ex.sets[0].completed

    def test_custom_exercise_gets_slug_id(self):
        day = {"id": "d1", "exercises": [{"name": "Goblin Squats", "weight": 30, "muscle_group": "Legs"}]}
        assert build_preset(day)[0].exercise_id == "goblin-squats"

    def test_suggest_for_weekday(self):
        program, day = suggest_program_day("Monday")
        assert program["id"] == "custom-split"
        assert day["label"] == "Upper (Monday)"

    def test_rest_days_never_suggested(self):
        assert suggest_program_day("wednesday") is None

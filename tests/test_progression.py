"""Next-load suggestions and previous-session lookup."""

from factories import cardio, session, strength

from ironlog.schemas.analytics import LoadSuggestion
from ironlog.schemas.session import ExerciseLog, WorkoutSet
from ironlog.services.progression import best_set, previous_exercise_log, suggest_next_load


def _squat(*sessions_sets):
    """sessions_sets[0] is the most recent session's (weight, reps) sets."""
    return [session(i, strength("Squat", *sets, group="Legs")) for i, sets in enumerate(sessions_sets)]


class TestBestSet:
    def test_heaviest_wins(self):
        assert best_set(strength("Squat", (100, 5), (110, 3))) == LoadSuggestion(weight=110, reps=3)

    def test_tie_broken_by_reps(self):
        assert best_set(strength("Squat", (100, 5), (100, 8), (100, 6))) == LoadSuggestion(weight=100, reps=8)

    def test_nothing_lifted(self):
        assert best_set(strength("Push Up", (0, 20))) is None


class TestSuggestNextLoad:
    def test_improved_last_session_holds_weight(self):
        history = _squat([(100, 8)], [(95, 8)])
        assert suggest_next_load("Squat", history) == LoadSuggestion(weight=100, reps=8)

    def test_plateau_with_enough_reps_adds_heavy_increment(self):
        history = _squat([(100, 8)], [(100, 8)])
        assert suggest_next_load("Squat", history) == LoadSuggestion(weight=105, reps=8)

    def test_plateau_with_few_reps_holds_weight(self):
        history = _squat([(100, 5)], [(100, 5)])
        assert suggest_next_load("Squat", history) == LoadSuggestion(weight=100, reps=8)

    def test_light_load_uses_small_increment(self):
        history = _squat([(40, 8)], [(40, 8)])
        assert suggest_next_load("Squat", history) == LoadSuggestion(weight=42.5, reps=8)

    def test_single_session_with_eight_reps(self):
        assert suggest_next_load("Squat", _squat([(60, 8)])) == LoadSuggestion(weight=65, reps=8)

    def test_single_session_below_eight_reps(self):
        assert suggest_next_load("Squat", _squat([(60, 7)])) == LoadSuggestion(weight=60, reps=8)

    def test_keeps_higher_rep_target(self):
        history = _squat([(100, 12)], [(110, 5)])
        assert suggest_next_load("Squat", history) == LoadSuggestion(weight=105, reps=12)

    def test_rounded_to_one_decimal_half_up(self):
        assert suggest_next_load("Squat", _squat([(22.25, 8)])) == LoadSuggestion(weight=24.8, reps=8)

    def test_uses_two_most_recent_sessions_only(self):
        history = _squat([(100, 8)], [(100, 8)], [(200, 8)])
        assert suggest_next_load("Squat", history).weight == 105

    def test_unseen_exercise(self):
        assert suggest_next_load("Deadlift", _squat([(100, 8)])) is None

    def test_catalog_cardio_gets_nothing(self):
        history = [session(0, strength("Treadmill Run", (10, 10), group="Legs"))]
        assert suggest_next_load("Treadmill Run", history) is None

    def test_cardio_by_argument(self):
        assert suggest_next_load("Squat", _squat([(100, 8)]), muscle_group="Cardio") is None

    def test_cardio_by_logged_group(self):
        history = [session(0, cardio("Hill Sprints", {"duration_minutes": 10}))]
        assert suggest_next_load("Hill Sprints", history) is None

    def test_last_session_without_weight(self):
        assert suggest_next_load("Squat", _squat([(0, 8)], [(100, 8)])) is None

    def test_idempotent(self):
        history = _squat([(100, 8)], [(100, 8)])
        assert suggest_next_load("Squat", history) == suggest_next_load("Squat", history)


class TestPreviousExerciseLog:
    def test_returns_most_recent_log(self):
        history = _squat([(100, 8)], [(95, 8)])
        previous = previous_exercise_log("Squat", history)
        assert previous.session_id == history[0].id
        assert previous.sets[0]["weight"] == 100

    def test_excludes_session_being_edited(self):
        history = _squat([(100, 8)], [(95, 8)])
        previous = previous_exercise_log("Squat", history, exclude_session_id=history[0].id)
        assert previous.session_id == history[1].id

    def test_not_found(self):
        assert previous_exercise_log("Deadlift", _squat([(100, 8)])) is None

    def test_matches_exact_name(self):
        ex = ExerciseLog(name="Front Squat", sets=[WorkoutSet(weight=60, reps=5)])
        assert previous_exercise_log("Squat", [session(0, ex)]) is None

"""Trend classification, stall detection and muscle imbalance."""

from factories import REF, cardio, session, strength

from ironlog.core.enums import TrendStatus
from ironlog.schemas.analytics import GroupVolume, TrendPoint
from ironlog.services.trends import classify_trend, detect_imbalance, detect_stalls, exercise_points


def _point(max_weight, volume):
    return TrendPoint(date=REF, max_weight=max_weight, volume=volume, one_rm=0)


# ── classify_trend ──


class TestClassifyTrend:
    def test_fewer_than_two_points_is_maintaining(self):
        assert classify_trend([]) == TrendStatus.MAINTAINING
        assert classify_trend([_point(100, 1000)]) == TrendStatus.MAINTAINING

    def test_progressing_above_two_percent(self):
        # 100*10 + 1000 = 2000 -> 2100
        assert classify_trend([_point(100, 1000), _point(100, 1100)]) == TrendStatus.PROGRESSING

    def test_within_dead_band_is_maintaining(self):
        assert classify_trend([_point(100, 1000), _point(100, 1030)]) == TrendStatus.MAINTAINING

    def test_regressing_below_two_percent(self):
        assert classify_trend([_point(100, 1000), _point(90, 900)]) == TrendStatus.REGRESSING

    def test_only_last_two_points_matter(self):
        points = [_point(10, 10), _point(100, 1000), _point(100, 1000)]
        assert classify_trend(points) == TrendStatus.MAINTAINING


# ── exercise_points ──


class TestExercisePoints:
    def test_sorted_oldest_first(self):
        history = [session(1, strength("Bench", (110, 5))), session(3, strength("Bench", (100, 10)))]
        points = exercise_points(history)["Bench"]
        assert [p.max_weight for p in points] == [100, 110]
        assert points[0].one_rm == 133
        assert points[0].volume == 1000

    def test_skips_cardio_and_unlifted_entries(self):
        history = [
            session(
                0,
                cardio("Cycling", {"duration_minutes": 30}),
                strength("Plank", (0, 60), group="Abs"),
                strength("Row", (50, 10), group="Back"),
            )
        ]
        assert list(exercise_points(history)) == ["Row"]

    def test_zero_weight_sets_do_not_estimate(self):
        history = [session(0, strength("Dip", (0, 20), (10, 1)))]
        assert exercise_points(history)["Dip"][0].one_rm == 10


# ── detect_stalls ──


def _bench_history(*weights):
    """weights[0] is the most recent session."""
    return [session(i, strength("Bench", (w, 5))) for i, w in enumerate(weights)]


class TestDetectStalls:
    def test_flat_weights_stall(self):
        assert detect_stalls(_bench_history(100, 100, 100)) == [
            "Bench has stalled for 3 sessions. Add 5 lbs or a rep next time."
        ]

    def test_unit_in_message(self):
        assert detect_stalls(_bench_history(60, 60, 60), unit="kg") == [
            "Bench has stalled for 3 sessions. Add 5 kg or a rep next time."
        ]

    def test_steady_increase_is_not_a_stall(self):
        assert detect_stalls(_bench_history(105, 100, 95)) == []

    def test_decreasing_weights_are_flagged(self):
        assert len(detect_stalls(_bench_history(95, 100, 105))) == 1

    def test_needs_three_sessions(self):
        assert detect_stalls(_bench_history(100, 100)) == []

    def test_only_last_three_sessions_count(self):
        assert detect_stalls(_bench_history(110, 105, 100, 100, 100)) == []

    def test_sessions_without_working_sets_ignored(self):
        history = _bench_history(100, 100) + [session(5, strength("Bench", (0, 5))), session(6, strength("Bench", (100, 5)))]
        assert len(detect_stalls(history)) == 1


# ── detect_imbalance ──


class TestDetectImbalance:
    def test_single_group_has_no_imbalance(self):
        assert detect_imbalance([GroupVolume(group="Chest", volume=5000)]) is None

    def test_empty(self):
        assert detect_imbalance([]) is None

    def test_exactly_double_is_fine(self):
        groups = [GroupVolume(group="Back", volume=200), GroupVolume(group="Legs", volume=100)]
        assert detect_imbalance(groups) is None

    def test_names_top_and_bottom_group(self):
        groups = [
            GroupVolume(group="Back", volume=900),
            GroupVolume(group="Chest", volume=500),
            GroupVolume(group="Arms", volume=300),
        ]
        assert detect_imbalance(groups) == "Back volume is >2x Arms. Consider adding sets for Arms."

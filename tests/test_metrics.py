"""
Unit tests for the metric calculator.

These tests verify:
1. BMR/TDEE and adaptive TDEE formulas
2. Trend weight smoothing and its moving-average seed
3. One-rep max, progression and plateau rules
4. Deficit planning, including the zero-week boundary
5. Duration formatting and parsing

Usage:
    pytest tests/test_metrics.py -v
"""
import math

import pytest

from health_scoring import metrics
from health_scoring.metrics import (
    DeficitPlan,
    PersonMetrics,
    ProgressionAction,
    Sex,
)
from health_scoring.units import cm_to_in, in_to_cm, kg_to_lb, lb_to_kg


class TestEnergyExpenditure:
    """Test BMR, TDEE and adaptive TDEE."""

    def test_bmr_male(self):
        """Mifflin-St Jeor adds 5 for men."""
        person = PersonMetrics(weight_kg=80, height_cm=180, age=30, sex=Sex.MALE)
        # 800 + 1125 - 150 + 5
        assert metrics.calculate_bmr(person) == 1780

    def test_bmr_female(self):
        """Mifflin-St Jeor subtracts 161 for women."""
        person = PersonMetrics(weight_kg=60, height_cm=165, age=25, sex="female")
        # 600 + 1031.25 - 125 - 161
        assert metrics.calculate_bmr(person) == pytest.approx(1345.25)

    def test_tdee_rounds_to_integer(self):
        """TDEE is BMR times the activity factor, rounded."""
        assert metrics.calculate_tdee(1780, 1.55) == 2759
        assert isinstance(metrics.calculate_tdee(1345.25, 1.2), int)

    def test_adaptive_tdee_weight_gain_raises_estimate(self):
        """Gaining trend weight means intake exceeded expenditure."""
        # 0.5 kg = 1.10231 lb; 3500 * 1.10231 / 7 = 551.155
        assert metrics.adaptive_tdee(2000, -0.5) == 1449
        assert metrics.adaptive_tdee(2000, 0.5) == 2551

    def test_adaptive_tdee_stable_weight(self):
        """No trend change leaves the estimate at average intake."""
        assert metrics.adaptive_tdee(2150.4, 0.0) == 2150

    def test_adaptive_tdee_custom_window(self):
        """The window length divides the weight change."""
        assert metrics.adaptive_tdee(2000, 1.0, days=14) == 2551

    def test_adaptive_tdee_zero_days_returns_sentinel(self):
        """A zero-day window returns 0 instead of dividing by zero."""
        assert metrics.adaptive_tdee(2000, 1.0, days=0) == 0

    def test_formulas_exported_from_package(self):
        """Callers can import the formulas from the package root."""
        import health_scoring

        assert health_scoring.calculate_tdee is metrics.calculate_tdee
        assert "plan_deficit" in health_scoring.__all__


class TestTrendWeight:
    """Test EWMA trend weight and its fallback."""

    def test_trend_weight_default_lambda(self):
        """0.25 * 82 + 0.75 * 80 == 80.5"""
        assert metrics.trend_weight(80, 82) == 80.5

    def test_trend_weight_custom_lambda(self):
        """A lambda of 1 tracks the raw reading exactly."""
        assert metrics.trend_weight(80, 82, lam=1.0) == 82

    def test_trend_weight_is_incremental(self):
        """Feeding readings one at a time chains previous trends."""
        trend = 80.0
        for reading in (82, 82, 82):
            trend = metrics.trend_weight(trend, reading)
        assert trend == pytest.approx(80 + 2 * (1 - 0.75 ** 3))

    def test_moving_average(self):
        """Simple mean of the readings."""
        assert metrics.moving_average([80, 81, 82]) == 81

    def test_moving_average_empty(self):
        """Empty input returns 0 rather than failing."""
        assert metrics.moving_average([]) == 0

    def test_next_trend_weight_seeds_from_history(self):
        """Without a stored trend, the mean of recent readings seeds it."""
        assert metrics.next_trend_weight(None, 82, history=[80, 81]) == 81

    def test_next_trend_weight_uses_previous_trend(self):
        """With a stored trend, one EWMA step is applied."""
        assert metrics.next_trend_weight(80, 82, history=[70, 70]) == 80.5


class TestStrength:
    """Test one-rep max and progression suggestions."""

    def test_one_rep_max_epley(self):
        """100 x 5 -> 116.7"""
        assert metrics.one_rep_max(100, 5) == 116.7

    def test_one_rep_max_single_rep(self):
        """One rep still adds 1/30."""
        assert metrics.one_rep_max(60, 1) == 62.0

    def test_progression_low_rir_heavy_weight(self):
        """RIR <= 2 at 50 kg and above adds 2.5 kg."""
        suggestion = metrics.suggest_progression(60, 2)
        assert suggestion.weight == 62.5
        assert suggestion.action is ProgressionAction.INCREASE

    def test_progression_low_rir_light_weight(self):
        """RIR <= 2 below 50 kg adds 1 kg."""
        suggestion = metrics.suggest_progression(40, 1)
        assert suggestion.weight == 41
        assert suggestion.action is ProgressionAction.INCREASE

    def test_progression_boundary_at_50kg(self):
        """Exactly 50 kg uses the larger increment."""
        assert metrics.suggest_progression(50, 0).weight == 52.5

    @pytest.mark.parametrize("rir", [2.5, 3, 4, 6])
    def test_progression_maintains_otherwise(self, rir):
        """Every RIR above 2 holds the weight."""
        suggestion = metrics.suggest_progression(60, rir)
        assert suggestion.weight == 60
        assert suggestion.action is ProgressionAction.MAINTAIN

    def test_progression_never_reduces(self):
        """The reduce action is reserved and not emitted."""
        actions = {metrics.suggest_progression(60, rir).action for rir in range(0, 11)}
        assert ProgressionAction.REDUCE not in actions


class TestPlateau:
    """Test plateau detection."""

    def test_plateau_detected(self):
        """0.2 kg on 80 kg over 14 days at 85% adherence is a plateau."""
        assert metrics.detect_plateau(0.2, 80, 14, 0.85) is True

    def test_too_few_days(self):
        """Fewer than 14 days never counts."""
        assert metrics.detect_plateau(0.2, 80, 10, 0.85) is False

    def test_low_adherence(self):
        """Below 80% adherence never counts."""
        assert metrics.detect_plateau(0.0, 80, 21, 0.79) is False

    def test_change_above_threshold(self):
        """More than 0.3% change is progress, not a plateau."""
        assert metrics.detect_plateau(-0.5, 80, 14, 0.9) is False

    def test_change_just_under_threshold(self):
        """A loss just under 0.3% still counts as flat."""
        assert metrics.detect_plateau(-0.29, 100, 14, 0.8) is True

    def test_zero_body_weight(self):
        """Non-positive body weight returns False instead of dividing by zero."""
        assert metrics.detect_plateau(0.0, 0, 14, 0.9) is False


class TestDeficitPlan:
    """Test calorie deficit planning."""

    def test_plan_for_weight_loss(self):
        """5 kg over 10 weeks from a 2500 kcal TDEE."""
        plan = metrics.plan_deficit(85, 80, 10, 2500)
        # 5 kg = 11.0231 lb; * 3500 / 70 = 551.155
        assert plan.daily_deficit == 551
        assert plan.target_kcal == 1949
        assert plan.is_defined

    def test_plan_for_weight_gain_is_surplus(self):
        """A goal above current weight gives a negative deficit."""
        plan = metrics.plan_deficit(70, 72, 8, 2400)
        assert plan.daily_deficit < 0
        assert plan.target_kcal > 2400

    @pytest.mark.parametrize("weeks", [0, -2])
    def test_non_positive_weeks_is_undefined(self, weeks):
        """Zero weeks returns an undefined plan instead of dividing by zero."""
        plan = metrics.plan_deficit(85, 80, weeks, 2500)
        assert isinstance(plan, DeficitPlan)
        assert not plan.is_defined
        assert plan.daily_deficit is None
        assert plan.target_kcal is None
        assert plan.reason


class TestDurationFormatting:
    """Test minute <-> 'XhYYm' conversions."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "0h00m"), (5, "0h05m"), (60, "1h00m"), (83, "1h23m"), (605, "10h05m")],
    )
    def test_format_duration(self, minutes, expected):
        """Minutes are zero-padded to two digits."""
        assert metrics.format_duration(minutes) == expected

    def test_parse_duration(self):
        """Parsing is the inverse of formatting."""
        assert metrics.parse_duration("1h23m") == 83
        assert metrics.parse_duration(metrics.format_duration(425)) == 425

    def test_parse_duration_without_trailing_m(self):
        """The trailing 'm' is optional."""
        assert metrics.parse_duration("2h05") == 125

    @pytest.mark.parametrize("text", ["", "90 minutes", "h30m", None])
    def test_parse_duration_invalid(self, text):
        """Malformed strings parse to 0."""
        assert metrics.parse_duration(text) == 0


class TestRounding:
    """Test half-up rounding."""

    def test_halves_round_up(self):
        """Unlike round(), 2.5 goes to 3."""
        assert metrics.round_half_up(2.5) == 3
        assert metrics.round_half_up(0.5) == 1

    def test_one_decimal(self):
        """Digits select the decimal place."""
        assert metrics.round_half_up(116.65, 1) == 116.7

    @pytest.mark.parametrize("value", [float("inf"), float("-inf")])
    def test_infinity_passes_through(self, value):
        assert metrics.round_half_up(value) == value

    def test_nan_passes_through(self):
        assert math.isnan(metrics.round_half_up(float("nan"), 1))


class TestNonFiniteInput:
    """Formulas return non-finite results instead of raising."""

    def test_tdee_nan(self):
        assert math.isnan(metrics.calculate_tdee(float("nan"), 1.2))

    def test_tdee_inf(self):
        assert metrics.calculate_tdee(float("inf"), 1.2) == float("inf")

    def test_adaptive_tdee_nan(self):
        assert math.isnan(metrics.adaptive_tdee(2000, float("nan")))

    def test_deficit_plan_nan_tdee(self):
        plan = metrics.plan_deficit(85, 80, 10, float("nan"))
        assert plan.daily_deficit == 551
        assert math.isnan(plan.target_kcal)

    def test_format_duration_non_finite(self):
        assert metrics.format_duration(float("nan")) == "0h00m"
        assert metrics.format_duration(float("inf")) == "0h00m"


class TestUnits:
    """Test unit conversions."""

    def test_kg_lb_round_trip(self):
        assert kg_to_lb(1) == pytest.approx(2.20462)
        assert lb_to_kg(kg_to_lb(72.5)) == pytest.approx(72.5)

    def test_cm_in_round_trip(self):
        assert cm_to_in(2.54) == pytest.approx(1)
        assert in_to_cm(cm_to_in(180)) == pytest.approx(180)

"""
Health Scoring Module.

Turns a day's raw logs into a bounded score and color, counts streaks
over sequences of scored days, and provides the metric formulas that
derive calorie and weight targets.
"""

from .errors import HealthScoringError, TemporalParseError
from .models import (
    CalorieStatus,
    Color,
    DailyInputs,
    DailyResult,
    DailySummaryRecord,
    Meal,
    NormalizedDay,
    SleepSession,
    StreakResult,
    Targets,
    Workout,
)
from .evaluator import DailyEvaluator, evaluate_daily
from .counters import ColorStreak, current_color_streak, current_streak
from .metrics import (
    DeficitPlan,
    PersonMetrics,
    ProgressionAction,
    ProgressionSuggestion,
    Sex,
    adaptive_tdee,
    calculate_bmr,
    calculate_tdee,
    detect_plateau,
    format_duration,
    moving_average,
    next_trend_weight,
    one_rep_max,
    parse_duration,
    plan_deficit,
    suggest_progression,
    trend_weight,
)
from .streaks import (
    StreakPolicy,
    calculate_streak,
    effective_color,
    fill_calendar_gaps,
    has_data,
    never_zero,
    normalize_days,
    streak_from_summaries,
    streak_message,
)

__all__ = [
    "HealthScoringError",
    "TemporalParseError",
    "CalorieStatus",
    "Color",
    "DailyInputs",
    "DailyResult",
    "DailySummaryRecord",
    "Meal",
    "NormalizedDay",
    "SleepSession",
    "StreakResult",
    "Targets",
    "Workout",
    "DailyEvaluator",
    "evaluate_daily",
    "ColorStreak",
    "current_color_streak",
    "current_streak",
    "DeficitPlan",
    "PersonMetrics",
    "ProgressionAction",
    "ProgressionSuggestion",
    "Sex",
    "adaptive_tdee",
    "calculate_bmr",
    "calculate_tdee",
    "detect_plateau",
    "format_duration",
    "moving_average",
    "next_trend_weight",
    "one_rep_max",
    "parse_duration",
    "plan_deficit",
    "suggest_progression",
    "trend_weight",
    "StreakPolicy",
    "calculate_streak",
    "effective_color",
    "fill_calendar_gaps",
    "has_data",
    "never_zero",
    "normalize_days",
    "streak_from_summaries",
    "streak_message",
]

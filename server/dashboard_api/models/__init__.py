"""Pydantic models for health scoring API requests and responses."""
from .scoring import MealEntry, SleepEntry, WorkoutEntry, DailyScoreRequest, DailyScoreResponse
from .streak import StreakSummary, SummaryDay
from .metrics import (
    PersonEntry,
    EnergyTargetsRequest,
    EnergyTargetsResponse,
    DeficitPlanResponse,
    OneRepMaxResponse,
    ProgressionResponse,
    PlateauResponse,
    TrendWeightResponse,
)

__all__ = [
    "MealEntry",
    "SleepEntry",
    "WorkoutEntry",
    "DailyScoreRequest",
    "DailyScoreResponse",
    "StreakSummary",
    "SummaryDay",
    "PersonEntry",
    "EnergyTargetsRequest",
    "EnergyTargetsResponse",
    "DeficitPlanResponse",
    "OneRepMaxResponse",
    "ProgressionResponse",
    "PlateauResponse",
    "TrendWeightResponse",
]

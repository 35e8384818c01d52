"""
Data Models for Daily Health Scoring.

Value types shared by the evaluator, the run counters and the streak
engine. Everything here is immutable once built; results are derived,
never mutated in place.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, List, Union

from .metrics import round_half_up

Timestamp = Union[str, datetime]


class Color(str, Enum):
    """Traffic-light color of a scored day."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    @classmethod
    def from_score(cls, score: int) -> "Color":
        """Map a 0-3 score to its color: 3 green, 2 yellow, anything lower red."""
        if score >= 3:
            return cls.GREEN
        if score == 2:
            return cls.YELLOW
        return cls.RED


class CalorieStatus(str, Enum):
    """Intake relative to the calorie goal."""

    UNDER = "UN"
    OVER = "OV"
    GOAL = "GOAL"


@dataclass(frozen=True)
class Targets:
    """Per-user goals supplied by the caller."""

    calorie_goal: int
    sleep_goal_minutes: int = 360


@dataclass(frozen=True)
class Meal:
    """A logged meal. Only calories matter for scoring."""

    calories: Optional[float] = None


@dataclass(frozen=True)
class SleepSession:
    """A sleep session, attributed to the day it ends on."""

    start_at: Timestamp
    end_at: Timestamp


@dataclass(frozen=True)
class Workout:
    """A workout with start/end timestamps, or just an explicit duration."""

    start_at: Optional[Timestamp] = None
    end_at: Optional[Timestamp] = None
    duration_min: Optional[float] = None


@dataclass(frozen=True)
class DailyInputs:
    """One day's raw activity, pre-aggregation."""

    tz: str
    day: Union[date, str]
    targets: Targets
    meals: List[Meal] = field(default_factory=list)
    sleep_sessions: List[SleepSession] = field(default_factory=list)
    workouts: List[Workout] = field(default_factory=list)


@dataclass(frozen=True)
class DailyResult:
    """Outcome of evaluating one day."""

    day: date
    sleep_min: int
    sleep_ok: bool
    kcal_intake: int
    kcal_goal: int
    kcal_delta: int
    kcal_status: CalorieStatus
    kcal_ok: bool
    gym_ok: bool
    gym_duration_min: int
    score: int
    color: Color
    gym_start_at: Optional[datetime] = None
    gym_end_at: Optional[datetime] = None
    calories_chip: str = ""
    sleep_chip: str = ""
    gym_chip: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "date": self.day.isoformat(),
            "sleep_min": self.sleep_min,
            "sleep_ok": self.sleep_ok,
            "kcal_intake": self.kcal_intake,
            "kcal_goal": self.kcal_goal,
            "kcal_delta": self.kcal_delta,
            "kcal_status": self.kcal_status.value,
            "kcal_ok": self.kcal_ok,
            "gym_ok": self.gym_ok,
            "gym_duration_min": self.gym_duration_min,
            "gym_start_at": self.gym_start_at.isoformat() if self.gym_start_at else None,
            "gym_end_at": self.gym_end_at.isoformat() if self.gym_end_at else None,
            "score": self.score,
            "color": self.color.value,
            "calories_chip": self.calories_chip,
            "sleep_chip": self.sleep_chip,
            "gym_chip": self.gym_chip,
        }


@dataclass(frozen=True)
class DailySummaryRecord:
    """
    A persisted, already-scored day as read back from summary storage.

    Every field except the date may be missing; the streak engine decides
    from these fields whether the day was actually tracked.
    """

    summary_date: Union[date, str]
    calories_total: Optional[float] = None
    calorie_target: Optional[float] = None
    sleep_hours: Optional[float] = None
    did_workout: Optional[bool] = None
    streak_color: Optional[Union[Color, str]] = None

    @classmethod
    def from_daily_result(cls, result: DailyResult) -> "DailySummaryRecord":
        """Build the row the summary writer stores for an evaluated day."""
        return cls(
            summary_date=result.day,
            calories_total=result.kcal_intake,
            calorie_target=result.kcal_goal,
            sleep_hours=round_half_up(result.sleep_min / 60, 2),
            did_workout=result.gym_ok,
            streak_color=result.color,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        color = self.streak_color
        return {
            "summary_date": str(self.summary_date),
            "calories_total": self.calories_total,
            "calorie_target": self.calorie_target,
            "sleep_hours": self.sleep_hours,
            "did_workout": self.did_workout,
            "streak_color": color.value if isinstance(color, Color) else color,
        }


@dataclass(frozen=True)
class NormalizedDay:
    """A stored day reduced to its date and effective color."""

    date: Union[date, str]
    effective_color: Color


@dataclass(frozen=True)
class StreakResult:
    """Current streak length and its representative color."""

    count: int
    color: Color

    def to_dict(self) -> dict:
        return {"count": self.count, "color": self.color.value}

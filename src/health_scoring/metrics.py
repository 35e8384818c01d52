"""
Metric Calculator.

Stateless physiological formulas used to derive calorie and weight
targets: BMR, TDEE, adaptive TDEE, trend weight, one-rep max,
progression suggestions, plateau detection and deficit planning.

None of these raise for well-typed numeric input. Boundary cases return
documented sentinels instead:
    - adaptive_tdee with days <= 0 returns 0
    - moving_average of nothing returns 0
    - detect_plateau with a non-positive body weight returns False
    - plan_deficit with weeks <= 0 returns a plan where is_defined is False
    - parse_duration of a malformed string returns 0
    - round_half_up passes NaN and infinities through unchanged, so
      formulas built on it return them too
    - format_duration of a non-finite value returns "0h00m"
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Iterable, Optional, Union

from .units import kg_to_lb

logger = logging.getLogger(__name__)

KCAL_PER_LB = 3500  # 1 lb of body mass
DEFAULT_TREND_LAMBDA = 0.25
PLATEAU_MIN_DAYS = 14
PLATEAU_MIN_ADHERENCE = 0.80
PLATEAU_MAX_CHANGE = 0.003  # 0.3% of body weight

_DURATION_RE = re.compile(r"(\d+)h(\d+)m?")


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ProgressionAction(str, Enum):
    INCREASE = "increase"
    MAINTAIN = "maintain"
    REDUCE = "reduce"  # reserved, not produced by suggest_progression


@dataclass(frozen=True)
class PersonMetrics:
    """A user's physical baseline."""

    weight_kg: float
    height_cm: float
    age: int
    sex: Union[Sex, str]


@dataclass(frozen=True)
class ProgressionSuggestion:
    weight: float
    action: ProgressionAction

    def to_dict(self) -> dict:
        return {"weight": self.weight, "action": self.action.value}


@dataclass(frozen=True)
class DeficitPlan:
    """Daily calorie deficit and resulting intake target for a weight goal."""

    daily_deficit: Optional[int]
    target_kcal: Optional[int]
    reason: Optional[str] = None

    @property
    def is_defined(self) -> bool:
        return self.daily_deficit is not None and self.target_kcal is not None

    def to_dict(self) -> dict:
        return {
            "daily_deficit": self.daily_deficit,
            "target_kcal": self.target_kcal,
            "is_defined": self.is_defined,
            "reason": self.reason,
        }


def round_half_up(value: float, digits: int = 0) -> Union[int, float]:
    """
    Round halves away from zero, unlike the built-in banker's rounding.

    Returns an int when digits is 0. NaN and infinities are returned
    unchanged.
    """
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)


def calculate_bmr(person: PersonMetrics) -> float:
    """
    Basal metabolic rate using the Mifflin-St Jeor equation.

    Male:   10 * kg + 6.25 * cm - 5 * age + 5
    Female: 10 * kg + 6.25 * cm - 5 * age - 161
    """
    base = 10 * person.weight_kg + 6.25 * person.height_cm - 5 * person.age
    if Sex(person.sex) is Sex.MALE:
        return base + 5
    return base - 161


def calculate_tdee(bmr: float, activity_factor: float) -> int:
    """Total daily energy expenditure: BMR times an activity multiplier (1.2-1.9)."""
    return round_half_up(bmr * activity_factor)


def adaptive_tdee(avg_intake: float, trend_weight_delta_kg: float, days: int = 7) -> int:
    """
    Estimate TDEE from what was eaten and how the trend weight moved.

    TDEE = avg_intake + 3500 * (trend change in lb / days)
    """
    if days <= 0:
        return 0
    lb_change = kg_to_lb(trend_weight_delta_kg)
    return round_half_up(avg_intake + KCAL_PER_LB * (lb_change / days))


def trend_weight(previous_trend: float, new_weight: float, lam: float = DEFAULT_TREND_LAMBDA) -> float:
    """One EWMA step: lam * new_weight + (1 - lam) * previous_trend."""
    return lam * new_weight + (1 - lam) * previous_trend


def moving_average(weights: Iterable[float]) -> float:
    """Simple mean; 0 for an empty input."""
    values = list(weights)
    if not values:
        return 0
    return sum(values) / len(values)


def next_trend_weight(
    previous_trend: Optional[float],
    new_weight: float,
    history: Iterable[float] = (),
    lam: float = DEFAULT_TREND_LAMBDA,
) -> float:
    """
    Advance the trend weight by one reading.

    The caller persists the returned value and passes it back as
    previous_trend next time. Until a trend exists, the mean of the
    recent raw readings seeds it.
    """
    if previous_trend is None:
        return moving_average([*history, new_weight])
    return trend_weight(previous_trend, new_weight, lam)


def one_rep_max(weight: float, reps: int) -> float:
    """Epley estimate, rounded to one decimal: weight * (1 + reps / 30)."""
    return round_half_up(weight * (1 + reps / 30), 1)


def suggest_progression(current_weight: float, last_set_rir: float) -> ProgressionSuggestion:
    """
    Suggest the next working weight from the last set's reps in reserve.

    RIR <= 2 adds 1 kg below 50 kg and 2.5 kg otherwise. Anything above
    that holds the weight.
    """
    if last_set_rir <= 2:
        increment = 1 if current_weight < 50 else 2.5
        return ProgressionSuggestion(current_weight + increment, ProgressionAction.INCREASE)
    return ProgressionSuggestion(current_weight, ProgressionAction.MAINTAIN)


def detect_plateau(weight_change: float, body_weight: float, days: int, adherence: float) -> bool:
    """True after 14+ days at 80%+ adherence with at most 0.3% weight change."""
    if days < PLATEAU_MIN_DAYS or adherence < PLATEAU_MIN_ADHERENCE:
        return False
    if body_weight <= 0:
        return False
    return abs(weight_change / body_weight) <= PLATEAU_MAX_CHANGE


def plan_deficit(
    current_weight_kg: float,
    goal_weight_kg: float,
    weeks_to_goal: float,
    tdee: float,
) -> DeficitPlan:
    """
    Daily deficit needed to reach a goal weight, and the intake it implies.

    A goal above the current weight yields a negative deficit (a surplus).
    """
    if weeks_to_goal <= 0:
        logger.warning(
            f"[METRICS] Deficit plan undefined for weeks_to_goal={weeks_to_goal}"
        )
        return DeficitPlan(None, None, reason="weeks_to_goal must be positive")

    total_lb = kg_to_lb(current_weight_kg - goal_weight_kg)
    daily_deficit = round_half_up(total_lb * KCAL_PER_LB / (weeks_to_goal * 7))
    return DeficitPlan(daily_deficit, round_half_up(tdee - daily_deficit))


def format_duration(minutes: float) -> str:
    """Format minutes as '<h>h<mm>m', e.g. 83 -> '1h23m'."""
    if not math.isfinite(minutes):
        return "0h00m"
    total = max(0, round_half_up(minutes))
    hours, mins = divmod(total, 60)
    return f"{hours}h{mins:02d}m"


def parse_duration(duration: str) -> int:
    """Inverse of format_duration; 0 when the string doesn't match."""
    match = _DURATION_RE.search(duration or "")
    if not match:
        return 0
    return int(match.group(1)) * 60 + int(match.group(2))

"""
Daily Evaluator.

Turns one day's raw logs (meals, sleep sessions, workouts) into a
three-part score, a traffic-light color and the display chips.

Scoring rules:
    - nutrition: intake <= calorie goal
    - sleep: sessions ending on the day total at least the sleep goal
      (360 minutes by default)
    - exercise: any positive workout time credited to the day

score = sleep_ok + kcal_ok + gym_ok, color 3 green / 2 yellow / <=1 red.
"""

import logging
import math
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional, Tuple
from zoneinfo import ZoneInfo

from .chips import DailyChips, format_chips
from .metrics import round_half_up
from .models import (
    CalorieStatus,
    Color,
    DailyInputs,
    DailyResult,
    Meal,
    SleepSession,
    Workout,
)
from .timeutils import day_bounds, minutes_between, parse_day, parse_timestamp, resolve_zone

logger = logging.getLogger(__name__)

ChipFormatter = Callable[[DailyResult], DailyChips]


def _finite_or_zero(value: Optional[float]) -> float:
    """Missing, NaN and infinite amounts count as nothing logged."""
    if value is None:
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        logger.debug(f"[SCORE] Ignoring non-finite amount {value!r}")
        return 0.0
    return value


class DailyEvaluator:
    """
    Scores a single day.

    Holds no state between calls apart from the chip formatter, so one
    instance can serve any number of users concurrently.
    """

    def __init__(self, chip_formatter: Optional[ChipFormatter] = None):
        """
        Args:
            chip_formatter: Renders chips for a result (defaults to format_chips)
        """
        self.chip_formatter = chip_formatter or format_chips

    def evaluate(self, inputs: DailyInputs) -> DailyResult:
        """
        Evaluate one day.

        Raises:
            TemporalParseError: a timestamp, the date or the timezone is invalid
        """
        zone = resolve_zone(inputs.tz)
        day = parse_day(inputs.day)
        targets = inputs.targets

        kcal_intake, kcal_delta, kcal_status = self._nutrition(inputs.meals, targets.calorie_goal)
        kcal_ok = kcal_intake <= targets.calorie_goal

        sleep_min = self._sleep_minutes(inputs.sleep_sessions, day, zone)
        sleep_ok = sleep_min >= targets.sleep_goal_minutes

        gym_duration, gym_start, gym_end = self._exercise(inputs.workouts, day, zone)
        gym_ok = gym_duration > 0

        score = int(sleep_ok) + int(kcal_ok) + int(gym_ok)
        result = DailyResult(
            day=day,
            sleep_min=sleep_min,
            sleep_ok=sleep_ok,
            kcal_intake=kcal_intake,
            kcal_goal=targets.calorie_goal,
            kcal_delta=kcal_delta,
            kcal_status=kcal_status,
            kcal_ok=kcal_ok,
            gym_ok=gym_ok,
            gym_duration_min=gym_duration,
            score=score,
            color=Color.from_score(score),
            gym_start_at=gym_start,
            gym_end_at=gym_end,
        )

        chips = self.chip_formatter(result)
        result = replace(
            result,
            calories_chip=chips.calories,
            sleep_chip=chips.sleep,
            gym_chip=chips.gym,
        )

        logger.debug(
            f"[SCORE] {day}: sleep={sleep_min}m ok={sleep_ok}, "
            f"kcal={kcal_intake}/{targets.calorie_goal} ok={kcal_ok}, "
            f"gym={gym_duration}m ok={gym_ok} -> {score} {result.color.value}"
        )
        return result

    @staticmethod
    def _nutrition(meals: list[Meal], goal: int) -> Tuple[int, int, CalorieStatus]:
        total = sum(_finite_or_zero(meal.calories) for meal in meals)
        intake = max(0, round_half_up(total))
        delta = intake - goal

        if delta < 0:
            status = CalorieStatus.UNDER
        elif delta > 0:
            status = CalorieStatus.OVER
        else:
            status = CalorieStatus.GOAL
        return intake, delta, status

    @staticmethod
    def _sleep_minutes(sessions: list[SleepSession], day: date, zone: ZoneInfo) -> int:
        total = 0.0
        for session in sessions:
            start = parse_timestamp(session.start_at, zone)
            end = parse_timestamp(session.end_at, zone)

            # A night belongs to the day you wake up on
            if end.date() != day:
                logger.debug(f"[SCORE] Skipping sleep ending {end.isoformat()} (not {day})")
                continue
            total += max(0.0, minutes_between(start, end))
        return round_half_up(total)

    @staticmethod
    def _exercise(
        workouts: list[Workout], day: date, zone: ZoneInfo
    ) -> Tuple[int, Optional[datetime], Optional[datetime]]:
        day_start, day_end = day_bounds(day, zone)
        duration = 0
        first_start: Optional[datetime] = None
        last_end: Optional[datetime] = None

        for workout in workouts:
            if workout.start_at is not None and workout.end_at is not None:
                start = max(parse_timestamp(workout.start_at, zone), day_start)
                end = min(parse_timestamp(workout.end_at, zone), day_end)
                minutes = max(0.0, minutes_between(start, end))
                if minutes > 0:
                    first_start = start if first_start is None else min(first_start, start)
                    last_end = end if last_end is None else max(last_end, end)
            else:
                minutes = max(0.0, _finite_or_zero(workout.duration_min))
            duration += round_half_up(minutes)

        return duration, first_start, last_end


# Global default instance
daily_evaluator = DailyEvaluator()


def evaluate_daily(inputs: DailyInputs) -> DailyResult:
    """Convenience function to score a day with the default evaluator."""
    return daily_evaluator.evaluate(inputs)

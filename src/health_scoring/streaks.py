"""
Streak Engine.

Computes the current streak from persisted daily summaries, most recent
day first.

A stored day only counts if it actually has tracked activity: a day with
no calories/target pair, no sleep and no workout is red no matter what
color happens to be stored with it. Otherwise a logging gap with a stale
or default color would extend a streak that was really broken.

Two reporting policies exist for an empty history or a red most-recent
day:
    - LITERAL: the plain walk, count=0 and color red
    - NEVER_ZERO: the dashboard convention, count=1 and color red
calculate_streak always does the literal walk; never_zero() is applied on
top of it when that convention is wanted.
"""

import logging
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Union

from .models import Color, DailySummaryRecord, NormalizedDay, StreakResult
from .timeutils import parse_day

logger = logging.getLogger(__name__)

DayLike = Union[DailySummaryRecord, NormalizedDay]


class StreakPolicy(str, Enum):
    """How an empty or already-broken streak is reported."""

    LITERAL = "literal"
    NEVER_ZERO = "never_zero"


def _is_positive(value) -> bool:
    try:
        return value is not None and float(value) > 0
    except (TypeError, ValueError):
        return False


def has_data(record: DailySummaryRecord) -> bool:
    """
    True if the day has any tracked activity.

    That is: calories and a calorie target were both recorded, or sleep
    is positive, or a workout was logged.
    """
    return (
        (record.calories_total is not None and record.calorie_target is not None)
        or _is_positive(record.sleep_hours)
        or record.did_workout is True
    )


def effective_color(record: DailySummaryRecord) -> Color:
    """The stored color if the day has data, red otherwise or when unreadable."""
    if not has_data(record):
        if record.streak_color not in (None, Color.RED):
            logger.debug(
                f"[STREAK] {record.summary_date} has no data, "
                f"overriding stored color {record.streak_color!r} with red"
            )
        return Color.RED

    stored = record.streak_color
    if stored is None:
        return Color.RED
    if isinstance(stored, Color):
        return stored
    try:
        return Color(str(stored).strip().lower())
    except ValueError:
        logger.debug(f"[STREAK] {record.summary_date} has unknown color {stored!r}, using red")
        return Color.RED


def normalize_day(day: DayLike) -> NormalizedDay:
    if isinstance(day, NormalizedDay):
        return day
    return NormalizedDay(date=day.summary_date, effective_color=effective_color(day))


def normalize_days(days: Iterable[DayLike]) -> List[NormalizedDay]:
    """Reduce each day to its date and effective color. Already-normalized days pass through."""
    return [normalize_day(day) for day in days]


def calculate_streak(days: Iterable[DayLike]) -> StreakResult:
    """
    Walk from the most recent day backwards until the first red day.

    count is the number of non-red days walked; color is the most recent
    day's color while the streak is alive. An empty history or a red most
    recent day gives count=0, color red.
    """
    normalized = normalize_days(days)

    count = 0
    for day in normalized:
        if day.effective_color is Color.RED:
            break
        count += 1

    if count == 0:
        return StreakResult(count=0, color=Color.RED)
    return StreakResult(count=count, color=normalized[0].effective_color)


def never_zero(result: StreakResult) -> StreakResult:
    """Report a broken streak as one red day instead of zero."""
    if result.count == 0:
        return StreakResult(count=1, color=Color.RED)
    return result


def apply_policy(result: StreakResult, policy: Union[StreakPolicy, str]) -> StreakResult:
    if StreakPolicy(policy) is StreakPolicy.NEVER_ZERO:
        return never_zero(result)
    return result


def streak_from_summaries(
    records: Iterable[DayLike],
    policy: Union[StreakPolicy, str] = StreakPolicy.LITERAL,
) -> StreakResult:
    """Normalize stored summaries, walk them, and report under the given policy."""
    result = apply_policy(calculate_streak(records), policy)
    logger.debug(f"[STREAK] {result.count} day(s), {result.color.value} ({StreakPolicy(policy).value})")
    return result


def fill_calendar_gaps(
    records: Iterable[DailySummaryRecord],
    newest: Optional[Union[date, str]] = None,
    oldest: Optional[Union[date, str]] = None,
) -> List[DailySummaryRecord]:
    """
    Insert an empty record for every date missing between stored days.

    Storage only holds rows for days something was logged, so an absent
    row has to read as a no-data (red) day too. Output is most recent
    first.

    Args:
        records: Stored summaries in any order
        newest: Last day of the window, usually today; days after the
            latest stored row up to it are filled too
        oldest: First day of the window; days before the earliest stored
            row down to it are filled too

    Raises:
        TemporalParseError: a record's summary_date or a bound is not a valid date
    """
    ordered = sorted(records, key=lambda r: parse_day(r.summary_date), reverse=True)

    filled: List[DailySummaryRecord] = []
    expected = parse_day(newest) if newest is not None else None
    for record in ordered:
        day = parse_day(record.summary_date)
        while expected is not None and expected > day:
            filled.append(DailySummaryRecord(summary_date=expected))
            expected -= timedelta(days=1)
        filled.append(record)
        expected = day - timedelta(days=1)

    if oldest is not None and expected is not None:
        stop = parse_day(oldest)
        while expected >= stop:
            filled.append(DailySummaryRecord(summary_date=expected))
            expected -= timedelta(days=1)

    if len(filled) > len(ordered):
        logger.debug(f"[STREAK] Filled {len(filled) - len(ordered)} missing day(s)")
    return filled


def _days(count: int) -> str:
    return "1 day" if count == 1 else f"{count} days"


def streak_message(result: StreakResult) -> str:
    """One-line encouragement for the dashboard streak badge."""
    if result.color is Color.GREEN:
        return f"Green streak: {_days(result.count)}. Great work, keep it going!"
    if result.color is Color.YELLOW:
        return f"Streak: {_days(result.count)}. Still on track, aim for all three tomorrow."
    if result.count > 0:
        return f"Red streak: {_days(result.count)}. Time to turn it around."
    return "Streak lost. Let's get it back tomorrow."

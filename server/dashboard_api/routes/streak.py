"""Streak API routes backed by stored daily summaries."""
import logging
import sqlite3
from fastapi import APIRouter, HTTPException, Query
from datetime import date as Date, datetime, timedelta
from typing import Optional

from health_scoring.counters import current_color_streak
from health_scoring.errors import TemporalParseError
from health_scoring.models import DailySummaryRecord
from health_scoring.streaks import (
    StreakPolicy,
    fill_calendar_gaps,
    has_data,
    normalize_days,
    streak_from_summaries,
    streak_message,
)
from health_scoring.timeutils import resolve_zone

from ..config import get_settings
from ..database import db_manager
from ..models.streak import StreakSummary, SummaryDay

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Streak"])

_TRUE_VALUES = {"1", "true", "t", "yes", "y"}
_FALSE_VALUES = {"0", "false", "f", "no", "n"}


def _get_reference_date(as_of: Optional[Date], tz: Optional[str]) -> Date:
    """The last day of the streak window: asOf if given, else today in the user's zone."""
    if as_of is not None:
        return as_of
    try:
        zone = resolve_zone(tz or get_settings().default_tz)
    except TemporalParseError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return datetime.now(zone).date()


def _row_to_summary(row) -> DailySummaryRecord:
    """Convert SQLite row to DailySummaryRecord."""
    # Columns are stored as TEXT; blanks and junk read as missing
    def to_float(val):
        if val is None or val == "":
            return None
        try:
            return float(val)
        except (TypeError, ValueError):
            return None

    def to_bool(val):
        if val is None or val == "":
            return None
        if isinstance(val, (int, float)):
            return bool(val)
        text = str(val).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        return None

    return DailySummaryRecord(
        summary_date=row["summary_date"],
        calories_total=to_float(row["calories_total"]),
        calorie_target=to_float(row["calorie_target"]),
        sleep_hours=to_float(row["sleep_hours"]),
        did_workout=to_bool(row["did_workout"]),
        streak_color=row["streak_color"] or None,
    )


def _load_summaries(days: int, reference_date: Date) -> list[DailySummaryRecord]:
    """
    Load the `days` ending on reference_date, newest first.

    Every date in the window is present in the result: dates without a
    stored row come back as empty records.
    """
    cutoff_date = reference_date - timedelta(days=days - 1)
    try:
        with db_manager.get_summary_conn() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT summary_date, calories_total, calorie_target,
                       sleep_hours, did_workout, streak_color
                FROM daily_summary
                WHERE summary_date >= ? AND summary_date <= ?
                ORDER BY summary_date DESC
                """,
                (str(cutoff_date), str(reference_date)),
            )
            rows = cursor.fetchall()
    except sqlite3.OperationalError as e:
        raise HTTPException(
            status_code=503,
            detail=f"Summary database unavailable: {e}"
        )

    try:
        return fill_calendar_gaps(
            (_row_to_summary(row) for row in rows),
            newest=reference_date,
            oldest=cutoff_date,
        )
    except TemporalParseError as e:
        log.warning(f"[API] Invalid stored summary date: {e}")
        raise HTTPException(
            status_code=503,
            detail=f"Summary database holds an invalid date: {e}"
        )


@router.get("/streak/current", response_model=StreakSummary, response_model_by_alias=True)
async def get_current_streak(
    days: Optional[int] = Query(default=None, ge=1, le=366, description="Days of history to consider"),
    policy: Optional[StreakPolicy] = Query(default=None, description="How a broken streak is reported"),
    as_of: Optional[Date] = Query(default=None, alias="asOf", description="Last day of the window (defaults to today)"),
    tz: Optional[str] = Query(default=None, description="IANA zone that decides today"),
):
    """
    Get the current streak from stored daily summaries.

    The window ends today (or on asOf). Days without tracked activity,
    including days with no stored row, count as red and break the streak.
    """
    settings = get_settings()
    policy = policy or settings.streak_policy
    reference_date = _get_reference_date(as_of, tz)
    records = _load_summaries(days or settings.streak_lookback_days, reference_date)

    normalized = normalize_days(records)
    result = streak_from_summaries(normalized, policy)
    runs = current_color_streak(day.effective_color for day in normalized)

    return StreakSummary(
        count=result.count,
        color=result.color.value,
        green_only=runs.green_only,
        non_red=runs.non_red,
        message=streak_message(result),
        policy=StreakPolicy(policy).value,
        days_considered=len(normalized),
    )


@router.get("/streak/days", response_model=list[SummaryDay], response_model_by_alias=True)
async def get_streak_days(
    days: int = Query(default=14, ge=1, le=366, description="Number of days of history"),
    as_of: Optional[Date] = Query(default=None, alias="asOf", description="Last day of the window (defaults to today)"),
    tz: Optional[str] = Query(default=None, description="IANA zone that decides today"),
):
    """Get every day in the window with its effective color, newest first."""
    records = _load_summaries(days, _get_reference_date(as_of, tz))
    return [
        SummaryDay(
            date=str(day.date),
            effective_color=day.effective_color.value,
            has_data=has_data(record),
        )
        for record, day in zip(records, normalize_days(records))
    ]

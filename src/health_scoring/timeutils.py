"""
Timezone-aware date helpers.

Calendar days are built from wall-clock midnights in an IANA zone, so a
DST transition day is 23 or 25 hours long. Durations are always measured
in UTC: subtracting two datetimes that share a ZoneInfo compares wall
clocks and would be off by an hour across a transition.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import TemporalParseError


def resolve_zone(name: str) -> ZoneInfo:
    """Look up an IANA timezone such as 'America/New_York'."""
    if not name or not isinstance(name, str):
        raise TemporalParseError(name, "timezone name is required")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TemporalParseError(name, "unknown timezone") from e


def parse_day(value: Union[date, str]) -> date:
    """Parse a calendar date given as a date or 'YYYY-MM-DD'."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TemporalParseError(value, "expected an ISO calendar date")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise TemporalParseError(value, "expected an ISO calendar date") from e


def parse_timestamp(value: Union[str, datetime], zone: ZoneInfo) -> datetime:
    """
    Parse a timestamp and express it in the given zone.

    Naive values are read as wall-clock time in that zone; values with an
    offset (including a trailing 'Z') are converted into it.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise TemporalParseError(value, "expected an ISO 8601 timestamp") from e
    else:
        raise TemporalParseError(value, "expected an ISO 8601 timestamp")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone)
    return parsed.astimezone(zone)


def day_bounds(day: date, zone: ZoneInfo) -> Tuple[datetime, datetime]:
    """Return the half-open interval [local midnight, next local midnight)."""
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=zone)
    return start, end


def minutes_between(start: datetime, end: datetime) -> float:
    """Elapsed minutes from start to end; negative if end comes first."""
    delta = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return delta.total_seconds() / 60

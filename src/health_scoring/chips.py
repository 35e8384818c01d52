"""
Chip formatting for scored days.

Chips are the short per-metric strings shown on the dashboard, e.g.
'1850/2000 UN -150', '7h05m ✅' or '✅ 1h00m (6:00 AM–7:00 AM)'.
Formatting is kept apart from scoring so it can be swapped or localized
without touching the evaluator.
"""

from dataclasses import dataclass
from datetime import datetime

from .metrics import format_duration
from .models import DailyResult

OK_MARK = "✅"
MISS_MARK = "❌"


@dataclass(frozen=True)
class DailyChips:
    calories: str
    sleep: str
    gym: str


def format_clock(moment: datetime) -> str:
    """Short 12-hour clock time, e.g. '6:05 PM'."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_signed_delta(delta: int) -> str:
    if delta > 0:
        return f"+{delta}"
    return str(delta)


def calories_chip(result: DailyResult) -> str:
    return (
        f"{result.kcal_intake}/{result.kcal_goal} "
        f"{result.kcal_status.value} {format_signed_delta(result.kcal_delta)}"
    )


def sleep_chip(result: DailyResult) -> str:
    mark = OK_MARK if result.sleep_ok else MISS_MARK
    return f"{format_duration(result.sleep_min)} {mark}"


def gym_chip(result: DailyResult) -> str:
    if not result.gym_ok:
        return MISS_MARK
    chip = f"{OK_MARK} {format_duration(result.gym_duration_min)}"
    if result.gym_start_at and result.gym_end_at:
        chip += f" ({format_clock(result.gym_start_at)}–{format_clock(result.gym_end_at)})"
    return chip


def format_chips(result: DailyResult) -> DailyChips:
    """Render all three chips for a scored day."""
    return DailyChips(
        calories=calories_chip(result),
        sleep=sleep_chip(result),
        gym=gym_chip(result),
    )

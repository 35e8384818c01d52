"""
Run Counters.

Leading-run counts over most-recent-first sequences, for simple
"N days in a row" displays.
"""

from dataclasses import dataclass
from typing import Iterable, Union

from .models import Color


@dataclass(frozen=True)
class ColorStreak:
    """Two independent leading runs over the same colors."""

    green_only: int
    non_red: int

    def to_dict(self) -> dict:
        return {"green_only": self.green_only, "non_red": self.non_red}


def current_streak(flags_desc: Iterable[bool]) -> int:
    """Count leading True values, stopping at the first False."""
    count = 0
    for flag in flags_desc:
        if not flag:
            break
        count += 1
    return count


def current_color_streak(colors_desc: Iterable[Union[Color, str]]) -> ColorStreak:
    """
    Leading run of green days and, separately, leading run of non-red days.

    Each run stops at the first color that fails its own test, so
    ['green', 'yellow', 'red'] gives green_only=1, non_red=2.
    """
    colors = [Color(c) for c in colors_desc]
    green_only = current_streak(c is Color.GREEN for c in colors)
    non_red = current_streak(c is not Color.RED for c in colors)
    return ColorStreak(green_only=green_only, non_red=non_red)

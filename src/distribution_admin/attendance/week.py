from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..common.datetime_utils import format_iso_date
from ..core.constants import DAYS_IN_WEEK, EXCLUDED_WEEKDAY, SUNDAY


@dataclass(frozen=True)
class WeekWindow:
    """Sunday-to-Saturday week with its displayable (non-Friday) dates."""

    start: date
    end: date
    visible_dates: tuple[date, ...]

    def contains(self, day: date) -> bool:
        return day in self.visible_dates

    @property
    def label(self) -> str:
        return f"{format_iso_date(self.start)} - {format_iso_date(self.end)}"


def week_start(anchor: date) -> date:
    # weekday(): Monday=0 ... Sunday=6, so Sunday maps to an offset of 0.
    return anchor - timedelta(days=(anchor.weekday() - SUNDAY) % DAYS_IN_WEEK)


def compute_week(anchor: date) -> WeekWindow:
    start = week_start(anchor)
    days = (start + timedelta(days=i) for i in range(DAYS_IN_WEEK))
    return WeekWindow(
        start=start,
        end=start + timedelta(days=DAYS_IN_WEEK - 1),
        visible_dates=tuple(d for d in days if d.weekday() != EXCLUDED_WEEKDAY),
    )


def shift_anchor(anchor: date, weeks: int) -> date:
    return anchor + timedelta(days=DAYS_IN_WEEK * weeks)


def can_go_next(window: WeekWindow, today: date) -> bool:
    """Next week is reachable only once the current window has fully elapsed."""
    return window.end < today

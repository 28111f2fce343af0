"""Week partitioner and residency week seeds.

A residency is displayed as a run of calendar weeks aligned to a fixed anchor
weekday (Sunday by default). `partition_weeks` snaps the requested range
outward to anchor days and walks it in 7-day strides; `seed_residency_weeks`
then tags each week as CALM or BUSY depending on whether it touches a
vacation window, which fixes its performance count and fee.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from marquee.domain.calendar import (
    DAYS_PER_WEEK,
    CalendarDate,
    DateRange,
    Week,
    Weekday,
)
from marquee.domain.errors import InvalidRangeError

DEFAULT_ANCHOR = Weekday.SUNDAY


# ============================================================================
#                               Partitioning
# ============================================================================


def snap_back(day: CalendarDate, anchor: Weekday = DEFAULT_ANCHOR) -> CalendarDate:
    """Return the latest anchor weekday on or before `day`."""
    return day.add_days(-((day.weekday.value - anchor.value) % DAYS_PER_WEEK))


def snap_forward(day: CalendarDate, anchor: Weekday = DEFAULT_ANCHOR) -> CalendarDate:
    """Return the earliest anchor weekday on or after `day`."""
    return day.add_days((anchor.value - day.weekday.value) % DAYS_PER_WEEK)


def partition_weeks(
    start: CalendarDate, end: CalendarDate, anchor: Weekday = DEFAULT_ANCHOR
) -> list[Week]:
    """Split ``[start, end]`` into contiguous weeks aligned to `anchor`.

    The lower bound is snapped back and the upper bound forward to the anchor
    weekday, so the weeks always contain the requested range. An end date that
    already falls on the anchor is kept as the closing boundary and does not
    produce an extra trailing week. A single anchor day (``start == end`` on the
    anchor) yields the one week starting there.

    Args:
        start: First requested day.
        end: Last requested day.
        anchor: Weekday every week starts on.

    Returns:
        Weeks in ascending order; never empty.

    Raises:
        InvalidRangeError: If `start` is after `end`.
    """
    if start > end:
        raise InvalidRangeError(start, end)

    lower = snap_back(start, anchor)
    upper = max(snap_forward(end, anchor), lower.add_days(DAYS_PER_WEEK))

    weeks: list[Week] = []
    cursor = lower
    while cursor < upper:
        week = Week.starting(cursor)
        weeks.append(week)
        cursor = week.end
    return weeks


def partition_weeks_iso(
    start: str, end: str, anchor: Weekday = DEFAULT_ANCHOR
) -> list[Week]:
    """Parse two ISO dates and partition the range between them.

    Raises:
        InvalidDateError: If either bound is not a valid ``YYYY-MM-DD`` date.
        InvalidRangeError: If `start` is after `end`.
    """
    return partition_weeks(CalendarDate.parse(start), CalendarDate.parse(end), anchor)


# ============================================================================
#                               Week seeds
# ============================================================================


class WeekKind(str, Enum):
    """Load profile of a residency week."""

    CALM = "CALM"
    BUSY = "BUSY"


@dataclass(frozen=True)
class WeekRate:
    """Performances and fee attached to a week kind."""

    performances_count: int
    fee_cents: int


WEEK_RATES: dict[WeekKind, WeekRate] = {
    WeekKind.CALM: WeekRate(performances_count=2, fee_cents=15_000),
    WeekKind.BUSY: WeekRate(performances_count=4, fee_cents=30_000),
}


@dataclass(frozen=True)
class VacationWindow:
    """Yearly window given as month/day bounds, both inclusive.

    A window whose start comes after its end (e.g. Dec 20 → Jan 5) wraps
    into the following year.
    """

    start_month: int
    start_day: int
    end_month: int
    end_day: int

    @property
    def wraps_year(self) -> bool:
        """True if the window runs across New Year."""
        return (self.start_month, self.start_day) > (self.end_month, self.end_day)

    def occurrence(self, year: int) -> DateRange:
        """Return the window instance that starts in `year`."""
        end_year = year + 1 if self.wraps_year else year
        return DateRange(
            CalendarDate.of(year, self.start_month, self.start_day),
            CalendarDate.of(end_year, self.end_month, self.end_day),
        )


DEFAULT_VACATION_WINDOWS: tuple[VacationWindow, ...] = (
    VacationWindow(7, 1, 8, 31),  # summer
    VacationWindow(12, 20, 1, 5),  # end of year
)


@dataclass(frozen=True)
class ResidencyWeekSeed:
    """A partitioned week with its load profile, ready to be persisted."""

    week: Week
    kind: WeekKind
    performances_count: int
    fee_cents: int

    @classmethod
    def for_week(cls, week: Week, kind: WeekKind) -> ResidencyWeekSeed:
        """Build the seed for `week` using the rate of `kind`."""
        rate = WEEK_RATES[kind]
        return cls(
            week=week,
            kind=kind,
            performances_count=rate.performances_count,
            fee_cents=rate.fee_cents,
        )


def is_vacation_week(
    week: Week, windows: Iterable[VacationWindow] = DEFAULT_VACATION_WINDOWS
) -> bool:
    """Return True if any day of `week` falls inside a vacation window."""
    last_day = week.end.add_days(-1)
    # a window starting the year before can still reach into this week
    years = range(week.start.value.year - 1, last_day.value.year + 1)
    for window in windows:
        for year in years:
            span = window.occurrence(year)
            if week.start <= span.end and span.start <= last_day:
                return True
    return False


def classify_week(
    week: Week, windows: Iterable[VacationWindow] = DEFAULT_VACATION_WINDOWS
) -> WeekKind:
    """Return BUSY for weeks touching a vacation window, CALM otherwise."""
    return WeekKind.BUSY if is_vacation_week(week, windows) else WeekKind.CALM


def seed_residency_weeks(
    start: CalendarDate,
    end: CalendarDate,
    anchor: Weekday = DEFAULT_ANCHOR,
    windows: Sequence[VacationWindow] = DEFAULT_VACATION_WINDOWS,
) -> list[ResidencyWeekSeed]:
    """Partition ``[start, end]`` and classify every resulting week."""
    return [
        ResidencyWeekSeed.for_week(week, classify_week(week, windows))
        for week in partition_weeks(start, end, anchor)
    ]

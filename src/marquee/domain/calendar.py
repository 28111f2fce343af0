"""Calendar value objects.

Dates handled by MARQUEE are plain calendar days: no time of day and no
timezone. Arithmetic is done on `datetime.date`, which never consults the host
timezone; `CalendarDate.at_utc_midnight` is the only bridge to wall-clock time.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum

from marquee.domain.errors import InvalidDateError, InvalidRangeError

DAYS_PER_WEEK = 7

_ISO_DATE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


class Weekday(Enum):
    """Day of the week, numbered like `datetime.date.weekday()`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: str | Weekday) -> Weekday:
        """Parse a weekday name or three-letter abbreviation (case-insensitive).

        Raises:
            ValueError: If the value does not name a weekday.
        """
        if isinstance(value, Weekday):
            return value
        raw = (value or "").strip().upper()
        for member in cls:
            if raw in (member.name, member.name[:3]):
                return member
        raise ValueError(f"Unknown weekday: {value!r}")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A timezone-less calendar day."""

    value: date

    def __post_init__(self) -> None:
        # datetime is a subclass of date; keep the time component out
        if isinstance(self.value, datetime) or not isinstance(self.value, date):
            raise InvalidDateError(self.value)

    # --- Construction Paths ---

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Parse strict ISO `YYYY-MM-DD` text.

        Raises:
            InvalidDateError: If the text has the wrong shape or names a day
                that does not exist (e.g. ``2025-02-30``).
        """
        if not isinstance(text, str) or not (match := _ISO_DATE.match(text.strip())):
            raise InvalidDateError(text)
        year, month, day = (int(part) for part in match.groups())
        try:
            return cls(date(year, month, day))
        except ValueError as e:
            raise InvalidDateError(text) from e

    @classmethod
    def of(cls, year: int, month: int, day: int) -> CalendarDate:
        """Build a date from its components."""
        try:
            return cls(date(year, month, day))
        except ValueError as e:
            raise InvalidDateError(f"{year:04d}-{month:02d}-{day:02d}") from e

    @classmethod
    def today_utc(cls) -> CalendarDate:
        """Return the current calendar day in UTC."""
        return cls(datetime.now(timezone.utc).date())

    # --- Arithmetic ---

    def add_days(self, days: int) -> CalendarDate:
        """Return the date `days` days later (earlier when negative)."""
        return CalendarDate(self.value + timedelta(days=days))

    def days_until(self, other: CalendarDate) -> int:
        """Return the signed number of days from this date to `other`."""
        return (other.value - self.value).days

    @property
    def weekday(self) -> Weekday:
        """The day of the week."""
        return Weekday(self.value.weekday())

    @property
    def month_key(self) -> str:
        """The ``YYYY-MM`` period this date belongs to."""
        return f"{self.value.year:04d}-{self.value.month:02d}"

    # --- Formatting ---

    def isoformat(self) -> str:
        """Return the date as ``YYYY-MM-DD``."""
        return self.value.isoformat()

    def at_utc_midnight(self) -> datetime:
        """Return an aware datetime at 00:00 UTC on this day."""
        return datetime(
            self.value.year, self.value.month, self.value.day, tzinfo=timezone.utc
        )

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days with ``start <= end``."""

    start: CalendarDate
    end: CalendarDate

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    @classmethod
    def parse(cls, start: str, end: str) -> DateRange:
        """Parse both bounds from ISO text."""
        return cls(CalendarDate.parse(start), CalendarDate.parse(end))

    @property
    def days(self) -> int:
        """Number of days in the range, both bounds included."""
        return self.start.days_until(self.end) + 1

    def contains(self, day: CalendarDate) -> bool:
        """Return True if `day` falls within the range (bounds included)."""
        return self.start <= day <= self.end

    def __str__(self) -> str:
        return f"{self.start} → {self.end}"


@dataclass(frozen=True)
class Week:
    """Seven consecutive days starting at `start`; `end` is exclusive."""

    start: CalendarDate
    end: CalendarDate

    def __post_init__(self) -> None:
        if self.start.days_until(self.end) != DAYS_PER_WEEK:
            raise ValueError(
                f"A week must span exactly {DAYS_PER_WEEK} days, "
                f"got {self.start} → {self.end}"
            )

    @classmethod
    def starting(cls, start: CalendarDate) -> Week:
        """Build the week that begins on `start`."""
        return cls(start, start.add_days(DAYS_PER_WEEK))

    def contains(self, day: CalendarDate) -> bool:
        """Return True if `day` falls in ``[start, end)``."""
        return self.start <= day < self.end

    def days(self) -> Iterator[CalendarDate]:
        """Iterate over the seven days of the week."""
        for offset in range(DAYS_PER_WEEK):
            yield self.start.add_days(offset)

"""Residency value built from a confirmed booking request."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from marquee.domain.booking import ResidencyInstruction
from marquee.domain.calendar import CalendarDate, DateRange, Weekday
from marquee.domain.weeks import (
    DEFAULT_ANCHOR,
    DEFAULT_VACATION_WINDOWS,
    ResidencyWeekSeed,
    VacationWindow,
    seed_residency_weeks,
)


@dataclass(frozen=True)
class Residency:
    """A confirmed engagement and the weeks it is displayed as.

    `weeks` is always derived from `dates`; changing the dates goes through
    `reschedule`, which recomputes every week.
    """

    residency_id: str
    request_id: str
    venue_id: str
    dates: DateRange
    anchor: Weekday
    weeks: tuple[ResidencyWeekSeed, ...]

    @classmethod
    def materialize(
        cls,
        residency_id: str,
        instruction: ResidencyInstruction,
        anchor: Weekday = DEFAULT_ANCHOR,
        windows: Sequence[VacationWindow] = DEFAULT_VACATION_WINDOWS,
    ) -> Residency:
        """Create the residency a confirmation asked for."""
        return cls(
            residency_id=residency_id,
            request_id=instruction.request_id,
            venue_id=instruction.venue_id,
            dates=instruction.dates,
            anchor=anchor,
            weeks=tuple(
                seed_residency_weeks(
                    instruction.dates.start, instruction.dates.end, anchor, windows
                )
            ),
        )

    def reschedule(
        self,
        dates: DateRange,
        windows: Sequence[VacationWindow] = DEFAULT_VACATION_WINDOWS,
    ) -> Residency:
        """Return a copy spanning `dates`, with its weeks recomputed."""
        return Residency(
            residency_id=self.residency_id,
            request_id=self.request_id,
            venue_id=self.venue_id,
            dates=dates,
            anchor=self.anchor,
            weeks=tuple(seed_residency_weeks(dates.start, dates.end, self.anchor, windows)),
        )

    @property
    def total_fee_cents(self) -> int:
        """Sum of the week fees."""
        return sum(seed.fee_cents for seed in self.weeks)

    @property
    def total_performances(self) -> int:
        """Sum of the week performance counts."""
        return sum(seed.performances_count for seed in self.weeks)

    def week_of(self, day: CalendarDate) -> ResidencyWeekSeed | None:
        """Return the week containing `day`, if any."""
        for seed in self.weeks:
            if seed.week.contains(day):
                return seed
        return None

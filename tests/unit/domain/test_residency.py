"""Unit tests for Residency."""

from marquee.domain.booking import ResidencyInstruction
from marquee.domain.calendar import DateRange, Weekday
from marquee.domain.residency import Residency
from marquee.domain.weeks import WeekKind
from tests.fixtures.booking import d

# pylint: disable=magic-value-comparison


def test_materialize_partitions_the_dates(make_residency):
    """A residency over 2025-03-02..2025-03-15 has two CALM Sunday weeks."""
    residency = make_residency()
    assert residency.request_id == "R1"
    assert residency.anchor is Weekday.SUNDAY
    assert [seed.week.start.isoformat() for seed in residency.weeks] == [
        "2025-03-02",
        "2025-03-09",
    ]
    assert {seed.kind for seed in residency.weeks} == {WeekKind.CALM}
    assert residency.total_performances == 4
    assert residency.total_fee_cents == 30_000


def test_materialize_with_monday_anchor():
    """The anchor is stored and used for the weeks."""
    instruction = ResidencyInstruction(
        "R1", "V1", DateRange(d("2025-07-01"), d("2025-07-01"))
    )
    residency = Residency.materialize("RS1", instruction, anchor=Weekday.MONDAY)
    assert residency.anchor is Weekday.MONDAY
    assert len(residency.weeks) == 1
    assert residency.weeks[0].week.start == d("2025-06-30")
    assert residency.weeks[0].kind is WeekKind.BUSY


def test_reschedule_recomputes_weeks(make_residency):
    """Moving a residency into the summer makes its weeks BUSY."""
    residency = make_residency()
    moved = residency.reschedule(DateRange(d("2025-07-06"), d("2025-07-19")))
    assert moved.residency_id == residency.residency_id
    assert moved.request_id == residency.request_id
    assert [seed.kind for seed in moved.weeks] == [WeekKind.BUSY, WeekKind.BUSY]
    assert moved.total_fee_cents == 60_000
    assert residency.weeks[0].kind is WeekKind.CALM


def test_reschedule_without_windows(make_residency):
    """Custom windows are honored when rescheduling."""
    moved = make_residency().reschedule(
        DateRange(d("2025-07-06"), d("2025-07-19")), windows=()
    )
    assert {seed.kind for seed in moved.weeks} == {WeekKind.CALM}


def test_week_of(make_residency):
    """week_of finds the containing week or returns None."""
    residency = make_residency()
    assert residency.week_of(d("2025-03-10")).week.start == d("2025-03-09")
    assert residency.week_of(d("2025-03-16")) is None

"""Contract tests for VenueAccountRepository implementations."""

from __future__ import annotations

import pytest

from marquee.domain.booking import VenueUsage
from marquee.interfaces.errors import DuplicateRecordError, VenueNotFoundError


def test_plans_read_back_raw(seeded):
    """Plan identifiers are stored as given, including None."""
    assert seeded.venues.get_plan("V1") == "starter"
    assert seeded.venues.get_plan("V2") is None


def test_add_duplicate(seeded):
    """Venue IDs are unique."""
    with pytest.raises(DuplicateRecordError):
        seeded.venues.add("V1", "pro")


def test_unknown_venue(seeded):
    """Reading or changing a missing venue's plan fails."""
    with pytest.raises(VenueNotFoundError):
        seeded.venues.get_plan("V9")
    with pytest.raises(VenueNotFoundError):
        seeded.venues.set_plan("V9", "pro")


def test_set_plan(seeded):
    """set_plan replaces the identifier, unknown values included."""
    seeded.venues.set_plan("V2", "gold")
    assert seeded.venues.get_plan("V2") == "gold"
    seeded.venues.set_plan("V2", None)
    assert seeded.venues.get_plan("V2") is None


def test_usage_starts_at_zero(seeded):
    """A period without confirmations reads as zero."""
    assert seeded.venues.get_usage("V1", "2025-03") == VenueUsage(0)


def test_increment_from_matching_snapshot(seeded):
    """increment_confirmed bumps the counter when `seen` is current."""
    assert seeded.venues.increment_confirmed("V1", "2025-03", 0) is True
    assert seeded.venues.increment_confirmed("V1", "2025-03", 1) is True
    assert seeded.venues.get_usage("V1", "2025-03") == VenueUsage(2)


def test_increment_refuses_stale_snapshot(seeded):
    """A stale `seen` leaves the counter untouched and returns False."""
    seeded.venues.increment_confirmed("V1", "2025-03", 0)
    assert seeded.venues.increment_confirmed("V1", "2025-03", 0) is False
    assert seeded.venues.get_usage("V1", "2025-03") == VenueUsage(1)


def test_increment_without_snapshot(seeded):
    """A `seen` of None always bumps the counter."""
    assert seeded.venues.increment_confirmed("V1", "2025-03", None) is True
    assert seeded.venues.increment_confirmed("V1", "2025-03", None) is True
    assert seeded.venues.get_usage("V1", "2025-03") == VenueUsage(2)


def test_usage_is_per_venue_and_period(seeded):
    """Counters are keyed by venue and month."""
    seeded.venues.increment_confirmed("V1", "2025-03", 0)
    assert seeded.venues.get_usage("V1", "2025-04") == VenueUsage(0)
    assert seeded.venues.get_usage("V2", "2025-03") == VenueUsage(0)

"""Contract tests for ResidencyRepository implementations."""

from __future__ import annotations

import pytest

from marquee.domain.calendar import DateRange
from marquee.interfaces.errors import DuplicateRecordError, ResidencyNotFoundError
from tests.fixtures.booking import d

# pylint: disable=redefined-outer-name


@pytest.fixture
def with_request(seeded, make_request):
    """Seeded repositories holding request R1 of venue V1."""
    seeded.requests.add(make_request())
    return seeded


def test_add_then_get_roundtrips(with_request, make_residency):
    """A residency and its weeks read back equal."""
    residency = make_residency()
    with_request.residencies.add(residency)
    assert with_request.residencies.get("RS1") == residency


def test_get_by_request(with_request, make_residency):
    """Residencies are found by their request."""
    residency = make_residency()
    with_request.residencies.add(residency)
    assert with_request.residencies.get_by_request("R1") == residency
    assert with_request.residencies.get_by_request("R9") is None


def test_get_missing(with_request):
    """Unknown IDs raise ResidencyNotFoundError."""
    with pytest.raises(ResidencyNotFoundError):
        with_request.residencies.get("nope")


def test_one_residency_per_request(with_request, make_residency):
    """A second residency for the same request is refused."""
    with_request.residencies.add(make_residency())
    with pytest.raises(DuplicateRecordError):
        with_request.residencies.add(make_residency("RS2"))


def test_duplicate_id(with_request, make_residency):
    """Residency IDs are unique."""
    with_request.residencies.add(make_residency())
    with pytest.raises(DuplicateRecordError):
        with_request.residencies.add(make_residency())


def test_replace_rewrites_weeks(with_request, make_residency):
    """replace() stores the new dates and exactly the new weeks."""
    residency = make_residency()
    with_request.residencies.add(residency)
    moved = residency.reschedule(DateRange(d("2025-07-06"), d("2025-07-26")))

    with_request.residencies.replace(moved)

    stored = with_request.residencies.get("RS1")
    assert stored == moved
    assert len(stored.weeks) == 3  # pylint: disable=magic-value-comparison


def test_replace_missing(with_request, make_residency):
    """Replacing an unknown residency fails."""
    with pytest.raises(ResidencyNotFoundError):
        with_request.residencies.replace(make_residency())

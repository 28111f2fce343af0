"""Contract tests for BookingRequestRepository implementations."""

from __future__ import annotations

import dataclasses

import pytest

from marquee.domain.booking import Status, TermsEdit
from marquee.interfaces.errors import (
    DuplicateRecordError,
    RequestNotFoundError,
    StaleRequestError,
    VenueNotFoundError,
)

# pylint: disable=magic-value-comparison


def test_add_then_get_roundtrips(seeded, make_request):
    """A stored request reads back equal, dates and all."""
    request = make_request()
    seeded.requests.add(request)
    assert seeded.requests.get("R1") == request


def test_optional_fields_roundtrip(seeded, make_request):
    """Requests without artist or fee keep their None values."""
    request = make_request(artist_id=None, fee_cents=None)
    seeded.requests.add(request)
    stored = seeded.requests.get("R1")
    assert stored.artist_id is None
    assert stored.fee_cents is None


def test_get_missing(seeded):
    """Unknown IDs raise RequestNotFoundError."""
    with pytest.raises(RequestNotFoundError):
        seeded.requests.get("nope")


def test_add_duplicate(seeded, make_request):
    """Request IDs are unique."""
    seeded.requests.add(make_request())
    with pytest.raises(DuplicateRecordError):
        seeded.requests.add(make_request(format_ref="trio"))


def test_add_for_unknown_venue(seeded, make_request):
    """Requests need an existing venue."""
    with pytest.raises(VenueNotFoundError):
        seeded.requests.add(make_request(venue_id="V9"))


def test_save_applies_status_change(seeded, make_request):
    """save() stores the new status when the snapshot still holds."""
    request = make_request()
    seeded.requests.add(request)
    pending = dataclasses.replace(request, status=Status.PENDING)
    seeded.requests.save(pending, expected=request)
    assert seeded.requests.get("R1").status is Status.PENDING


def test_save_applies_terms_edit(seeded, make_request):
    """save() stores edited terms and the modification count."""
    request = make_request(status=Status.PENDING)
    seeded.requests.add(request)
    edited = TermsEdit(fee_cents=99_000).apply(request)
    seeded.requests.save(edited, expected=request)
    stored = seeded.requests.get("R1")
    assert stored.fee_cents == 99_000
    assert stored.modifications_used == 1


def test_save_refuses_stale_status(seeded, make_request):
    """A snapshot whose status no longer matches is refused."""
    request = make_request()
    seeded.requests.add(request)
    seeded.requests.save(dataclasses.replace(request, status=Status.PENDING), request)

    with pytest.raises(StaleRequestError) as exc_info:
        seeded.requests.save(
            dataclasses.replace(request, status=Status.CANCELLED), expected=request
        )
    assert exc_info.value.expected == "OPEN"
    assert seeded.requests.get("R1").status is Status.PENDING


def test_save_refuses_stale_modification_count(seeded, make_request):
    """Two edits from the same snapshot cannot both land."""
    request = make_request(status=Status.PENDING)
    seeded.requests.add(request)
    seeded.requests.save(TermsEdit(fee_cents=1).apply(request), expected=request)
    with pytest.raises(StaleRequestError):
        seeded.requests.save(TermsEdit(fee_cents=2).apply(request), expected=request)
    assert seeded.requests.get("R1").fee_cents == 1


def test_save_missing(seeded, make_request):
    """Saving a request that was never added raises RequestNotFoundError."""
    request = make_request()
    with pytest.raises(RequestNotFoundError):
        seeded.requests.save(request, expected=request)


def test_list_for_venue(seeded, make_request):
    """Only the venue's requests are listed, ordered by ID."""
    seeded.requests.add(make_request(request_id="R2"))
    seeded.requests.add(make_request(request_id="R1"))
    seeded.requests.add(make_request(request_id="R3", venue_id="V2"))
    assert [r.request_id for r in seeded.requests.list_for_venue("V1")] == ["R1", "R2"]
    assert seeded.requests.list_for_venue("V9") == []

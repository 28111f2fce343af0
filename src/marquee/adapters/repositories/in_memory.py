"""In-memory repositories for testing purposes.

Note: These implementations are not thread-safe and are intended solely
for single-threaded test scenarios.
"""

from __future__ import annotations

from marquee.domain.booking import BookingRequest, VenueUsage
from marquee.domain.residency import Residency
from marquee.interfaces.errors import (
    DuplicateRecordError,
    RequestNotFoundError,
    ResidencyNotFoundError,
    StaleRequestError,
    VenueNotFoundError,
)
from marquee.interfaces.repositories import (
    BookingRequestRepository,
    ResidencyRepository,
    VenueAccountRepository,
)

from .memory_store import InMemoryBookingData

# pylint: disable=consider-using-assignment-expr


class InMemoryBookingRequestRepository(BookingRequestRepository):
    """Booking requests kept in a shared `InMemoryBookingData`."""

    def __init__(self, data: InMemoryBookingData) -> None:
        self._data = data

    def add(self, request: BookingRequest) -> None:
        if request.request_id in self._data.requests:
            raise DuplicateRecordError("Booking request", request.request_id)
        if request.venue_id not in self._data.venue_plans:
            raise VenueNotFoundError(request.venue_id)
        self._data.requests[request.request_id] = request

    def get(self, request_id: str) -> BookingRequest:
        request = self._data.requests.get(request_id)
        if request is None:
            raise RequestNotFoundError(request_id)
        return request

    def save(self, request: BookingRequest, expected: BookingRequest) -> None:
        stored = self.get(request.request_id)
        if (
            stored.status is not expected.status
            or stored.modifications_used != expected.modifications_used
        ):
            raise StaleRequestError(request.request_id, expected.status.value)
        self._data.requests[request.request_id] = request

    def list_for_venue(self, venue_id: str) -> list[BookingRequest]:
        return sorted(
            (r for r in self._data.requests.values() if r.venue_id == venue_id),
            key=lambda r: r.request_id,
        )


class InMemoryVenueAccountRepository(VenueAccountRepository):
    """Venue plans and usage counters kept in a shared `InMemoryBookingData`."""

    def __init__(self, data: InMemoryBookingData) -> None:
        self._data = data

    def add(self, venue_id: str, plan: str | None) -> None:
        if venue_id in self._data.venue_plans:
            raise DuplicateRecordError("Venue", venue_id)
        self._data.venue_plans[venue_id] = plan

    def get_plan(self, venue_id: str) -> str | None:
        if venue_id not in self._data.venue_plans:
            raise VenueNotFoundError(venue_id)
        return self._data.venue_plans[venue_id]

    def set_plan(self, venue_id: str, plan: str | None) -> None:
        if venue_id not in self._data.venue_plans:
            raise VenueNotFoundError(venue_id)
        self._data.venue_plans[venue_id] = plan

    def get_usage(self, venue_id: str, period: str) -> VenueUsage:
        return VenueUsage(
            confirmed_this_month=self._data.usage.get((venue_id, period), 0)
        )

    def increment_confirmed(
        self, venue_id: str, period: str, seen: int | None
    ) -> bool:
        key = (venue_id, period)
        current = self._data.usage.get(key, 0)
        if seen is not None and current != seen:
            return False
        self._data.usage[key] = current + 1
        return True


class InMemoryResidencyRepository(ResidencyRepository):
    """Residencies kept in a shared `InMemoryBookingData`."""

    def __init__(self, data: InMemoryBookingData) -> None:
        self._data = data

    def add(self, residency: Residency) -> None:
        if residency.residency_id in self._data.residencies:
            raise DuplicateRecordError("Residency", residency.residency_id)
        if self.get_by_request(residency.request_id) is not None:
            raise DuplicateRecordError("Residency for request", residency.request_id)
        self._data.residencies[residency.residency_id] = residency

    def get(self, residency_id: str) -> Residency:
        residency = self._data.residencies.get(residency_id)
        if residency is None:
            raise ResidencyNotFoundError(residency_id)
        return residency

    def get_by_request(self, request_id: str) -> Residency | None:
        for residency in self._data.residencies.values():
            if residency.request_id == request_id:
                return residency
        return None

    def replace(self, residency: Residency) -> None:
        if residency.residency_id not in self._data.residencies:
            raise ResidencyNotFoundError(residency.residency_id)
        self._data.residencies[residency.residency_id] = residency

"""Repository ports for booking requests, venue accounts and residencies.

Writes that depend on a previously read snapshot are conditional: they only
apply when the stored row still matches what the caller saw, and report a
conflict otherwise. This is how the service layer keeps the quota check and
the counter increment atomic without locks in the domain.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marquee.domain.booking import BookingRequest, VenueUsage
    from marquee.domain.residency import Residency


class BookingRequestRepository(abc.ABC):
    """Stores booking requests."""

    @abc.abstractmethod
    def add(self, request: BookingRequest) -> None:
        """Insert a new request.

        Raises:
            DuplicateRecordError: If the request ID is already used.
        """

    @abc.abstractmethod
    def get(self, request_id: str) -> BookingRequest:
        """Return the request with the given ID.

        Raises:
            RequestNotFoundError: If no such request exists.
        """

    @abc.abstractmethod
    def save(self, request: BookingRequest, expected: BookingRequest) -> None:
        """Overwrite a request if it still matches the snapshot it was derived from.

        The stored status and modification count must equal those of
        `expected`; otherwise nothing is written.

        Raises:
            StaleRequestError: If the stored request moved on since `expected`
                was read.
        """

    @abc.abstractmethod
    def list_for_venue(self, venue_id: str) -> list[BookingRequest]:
        """Return the venue's requests ordered by request ID."""


class VenueAccountRepository(abc.ABC):
    """Stores venue plans and monthly usage counters."""

    @abc.abstractmethod
    def add(self, venue_id: str, plan: str | None) -> None:
        """Register a venue account with its plan identifier.

        Raises:
            DuplicateRecordError: If the venue already exists.
        """

    @abc.abstractmethod
    def get_plan(self, venue_id: str) -> str | None:
        """Return the raw plan identifier stored for a venue.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """

    @abc.abstractmethod
    def set_plan(self, venue_id: str, plan: str | None) -> None:
        """Change a venue's plan identifier.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """

    @abc.abstractmethod
    def get_usage(self, venue_id: str, period: str) -> VenueUsage:
        """Return the usage snapshot for a ``YYYY-MM`` period (zero if none)."""

    @abc.abstractmethod
    def increment_confirmed(
        self, venue_id: str, period: str, seen: int | None
    ) -> bool:
        """Add one confirmed event if the counter still equals `seen`.

        A `seen` of None increments unconditionally, for plans without a
        monthly cap.

        Returns:
            True if the counter was incremented, False if it had changed.
        """


class ResidencyRepository(abc.ABC):
    """Stores residencies and their week rows."""

    @abc.abstractmethod
    def add(self, residency: Residency) -> None:
        """Insert a residency and all of its weeks.

        Raises:
            DuplicateRecordError: If the residency or its request already has one.
        """

    @abc.abstractmethod
    def get(self, residency_id: str) -> Residency:
        """Return a residency with its weeks.

        Raises:
            ResidencyNotFoundError: If no such residency exists.
        """

    @abc.abstractmethod
    def get_by_request(self, request_id: str) -> Residency | None:
        """Return the residency spawned by a request, if any."""

    @abc.abstractmethod
    def replace(self, residency: Residency) -> None:
        """Overwrite a residency's dates and replace all of its weeks.

        Raises:
            ResidencyNotFoundError: If no such residency exists.
        """

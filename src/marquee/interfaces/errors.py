"""Errors raised by persistence ports."""


class RepositoryError(Exception):
    """Base class for persistence-port errors."""


class RequestNotFoundError(RepositoryError, LookupError):
    """Raised when a booking request does not exist."""

    def __init__(self, request_id: str) -> None:
        super().__init__(f"Booking request {request_id} not found.")
        self.request_id = request_id


class VenueNotFoundError(RepositoryError, LookupError):
    """Raised when a venue account does not exist."""

    def __init__(self, venue_id: str) -> None:
        super().__init__(f"Venue {venue_id} not found.")
        self.venue_id = venue_id


class ResidencyNotFoundError(RepositoryError, LookupError):
    """Raised when a residency does not exist."""

    def __init__(self, residency_id: str) -> None:
        super().__init__(f"Residency {residency_id} not found.")
        self.residency_id = residency_id


class DuplicateRecordError(RepositoryError):
    """Raised when adding a record whose identifier is already taken."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} {key} already exists.")
        self.kind = kind
        self.key = key


class StaleRequestError(RepositoryError):
    """Raised when a request's status changed since it was read.

    Attributes:
        request_id: The request that could not be saved.
        expected: The status the caller read before deciding the transition.
    """

    def __init__(self, request_id: str, expected: str) -> None:
        super().__init__(
            f"Booking request {request_id} is no longer {expected}; reload and retry."
        )
        self.request_id = request_id
        self.expected = expected

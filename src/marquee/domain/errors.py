"""Domain-layer error definitions.

Every domain error carries a stable `ErrorCode` so callers can map it to a
localized message (see `marquee.labels`) without parsing exception text.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes shared with the presentation layer."""

    INVALID_DATE = "INVALID_DATE"
    INVALID_RANGE = "INVALID_RANGE"
    ILLEGAL_TRANSITION = "ILLEGAL_TRANSITION"
    UNAUTHORIZED = "UNAUTHORIZED"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    MODIFICATION_LIMIT_EXCEEDED = "MODIFICATION_LIMIT_EXCEEDED"


# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""

    code: ErrorCode


# ============================================================================
#                           Calendar errors
# ============================================================================


class InvalidDateError(DomainError, ValueError):
    """Raised when text cannot be parsed into a calendar date."""

    code = ErrorCode.INVALID_DATE

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid calendar date: {value!r} (expected YYYY-MM-DD).")
        self.value = value


class InvalidRangeError(DomainError, ValueError):
    """Raised when a date range starts after it ends."""

    code = ErrorCode.INVALID_RANGE

    def __init__(self, start: object, end: object) -> None:
        super().__init__(f"Invalid date range: start {start} is after end {end}.")
        self.start = start
        self.end = end


# ============================================================================
#                           Workflow errors
# ============================================================================


class WorkflowError(DomainError):
    """Base class for errors reported by the booking workflow engine."""


class IllegalTransitionError(WorkflowError):
    """Raised when the requested status edge is not in the transition table."""

    code = ErrorCode.ILLEGAL_TRANSITION

    def __init__(self, request_id: str, current: str, proposed: str) -> None:
        super().__init__(
            f"Booking request {request_id} cannot move from {current} to {proposed}."
        )
        self.request_id = request_id
        self.current = current
        self.proposed = proposed


class UnauthorizedTransitionError(WorkflowError):
    """Raised when the actor is not allowed to perform the transition."""

    code = ErrorCode.UNAUTHORIZED

    def __init__(self, request_id: str, actor: str, proposed: str) -> None:
        super().__init__(
            f"Actor {actor} may not move booking request {request_id} to {proposed}."
        )
        self.request_id = request_id
        self.actor = actor
        self.proposed = proposed


class QuotaExceededError(WorkflowError):
    """Raised when a venue has used up its monthly confirmed-event quota."""

    code = ErrorCode.QUOTA_EXCEEDED

    def __init__(self, venue_id: str, limit: int, used: int) -> None:
        super().__init__(
            f"Venue {venue_id} reached its monthly limit of {limit} confirmed "
            f"events ({used} used)."
        )
        self.venue_id = venue_id
        self.limit = limit
        self.used = used


class StaleUsageSnapshotError(QuotaExceededError):
    """Raised when the usage counter changed between the quota check and the write.

    The confirmation may be retried with a fresh snapshot.
    """

    def __init__(self, venue_id: str, period: str, seen: int) -> None:
        DomainError.__init__(
            self,
            f"Usage counter for venue {venue_id} ({period}) changed since it was "
            f"read as {seen}; retry the confirmation.",
        )
        self.venue_id = venue_id
        self.period = period
        self.seen = seen
        self.limit = None
        self.used = seen


class ModificationLimitExceededError(WorkflowError):
    """Raised when a request has used up its allowed term modifications."""

    code = ErrorCode.MODIFICATION_LIMIT_EXCEEDED

    def __init__(self, request_id: str, limit: int, used: int) -> None:
        super().__init__(
            f"Booking request {request_id} already used {used} of {limit} "
            "allowed modifications."
        )
        self.request_id = request_id
        self.limit = limit
        self.used = used

"""Booking request workflow and quota engine.

A booking request moves through a fixed state machine. `attempt_transition`
checks, in order, that the edge exists, that the actor may take it, that the
venue's monthly confirmation quota allows it and, for term edits, that the
request still has modifications left. It never raises for these conditions:
the outcome comes back as a `TransitionResult`.

The engine reads quotas and usage counters but never changes them; the
caller persists the new status and bumps the usage counter atomically.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from marquee.domain.calendar import DateRange
from marquee.domain.errors import (
    IllegalTransitionError,
    ModificationLimitExceededError,
    QuotaExceededError,
    UnauthorizedTransitionError,
    WorkflowError,
)
from marquee.domain.plans import PlanQuota

# pylint: disable=too-many-arguments


class Status(str, Enum):
    """Booking request status codes."""

    OPEN = "OPEN"
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    CONFIRMED = "CONFIRMED"
    DECLINED = "DECLINED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, code: str | Status) -> Status:
        """Parse a status code, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the code is not a known status.
        """
        if isinstance(code, Status):
            return code
        return cls((code or "").strip().upper())

    @property
    def is_terminal(self) -> bool:
        """True for statuses that end a request without a booking."""
        return self in TERMINAL_STATUSES

    @property
    def is_final(self) -> bool:
        """True if no transition leaves this status (terminal or CONFIRMED)."""
        return not TRANSITIONS[self]


TRANSITIONS: Mapping[Status, frozenset[Status]] = MappingProxyType(
    {
        Status.OPEN: frozenset({Status.PENDING, Status.CANCELLED}),
        Status.PENDING: frozenset(
            {
                Status.ACCEPTED,
                Status.REJECTED,
                Status.CONFIRMED,
                Status.DECLINED,
                Status.CANCELLED,
            }
        ),
        Status.ACCEPTED: frozenset(
            {Status.CONFIRMED, Status.DECLINED, Status.CANCELLED}
        ),
        Status.REJECTED: frozenset(),
        Status.CONFIRMED: frozenset(),
        Status.DECLINED: frozenset(),
        Status.CANCELLED: frozenset(),
    }
)

if _missing := set(Status) - set(TRANSITIONS):  # pragma: no cover
    raise RuntimeError(f"Transition table misses statuses: {sorted(_missing)}")

TERMINAL_STATUSES = frozenset({Status.REJECTED, Status.DECLINED, Status.CANCELLED})

# Only a pending request can have its terms edited; an edit keeps the status.
EDITABLE_STATUS = Status.PENDING

DECISION_STATUSES = frozenset(
    {Status.ACCEPTED, Status.REJECTED, Status.CONFIRMED, Status.DECLINED}
)


def is_legal(current: Status, proposed: Status) -> bool:
    """Return True if ``current -> proposed`` is in the transition table."""
    return proposed in TRANSITIONS[current]


# ============================================================================
#                               Actors
# ============================================================================


class ActorRole(str, Enum):
    """Who is acting on a booking request."""

    VENUE = "venue"
    ARTIST = "artist"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    """The account performing a transition."""

    role: ActorRole
    actor_id: str

    @classmethod
    def admin(cls, actor_id: str = "admin") -> Actor:
        """Build an admin actor."""
        return cls(ActorRole.ADMIN, actor_id)

    @classmethod
    def venue(cls, venue_id: str) -> Actor:
        """Build a venue actor."""
        return cls(ActorRole.VENUE, venue_id)

    @classmethod
    def artist(cls, artist_id: str) -> Actor:
        """Build an artist actor."""
        return cls(ActorRole.ARTIST, artist_id)

    def owns(self, request: BookingRequest) -> bool:
        """True if this actor is the venue that issued `request`."""
        return self.role is ActorRole.VENUE and self.actor_id == request.venue_id

    def __str__(self) -> str:
        return f"{self.role.value}:{self.actor_id}"


def may_move_to(actor: Actor, request: BookingRequest, proposed: Status) -> bool:
    """Return True if `actor` is authorized to move `request` to `proposed`."""
    if actor.role is ActorRole.ADMIN:
        return True
    if proposed in DECISION_STATUSES:
        return actor.role is ActorRole.ARTIST
    # sending, editing and cancelling belong to the owning venue
    return actor.owns(request)


# ============================================================================
#                               Requests
# ============================================================================


@dataclass(frozen=True)
class BookingRequest:
    """A venue's solicitation of an artist format."""

    request_id: str
    venue_id: str
    format_ref: str
    dates: DateRange
    artist_id: str | None = None
    fee_cents: int | None = None
    status: Status = Status.OPEN
    modifications_used: int = 0

    def __post_init__(self) -> None:
        if self.fee_cents is not None and self.fee_cents < 0:
            raise ValueError("fee_cents cannot be negative")
        if self.modifications_used < 0:
            raise ValueError("modifications_used cannot be negative")


@dataclass(frozen=True)
class TermsEdit:
    """A change to the dates and/or fee of a pending request."""

    dates: DateRange | None = None
    fee_cents: int | None = None

    def __post_init__(self) -> None:
        if self.dates is None and self.fee_cents is None:
            raise ValueError("A terms edit must change the dates or the fee")
        if self.fee_cents is not None and self.fee_cents < 0:
            raise ValueError("fee_cents cannot be negative")

    def apply(self, request: BookingRequest) -> BookingRequest:
        """Return `request` with the edited terms and one more modification used."""
        return dataclasses.replace(
            request,
            dates=self.dates if self.dates is not None else request.dates,
            fee_cents=self.fee_cents if self.fee_cents is not None else request.fee_cents,
            modifications_used=request.modifications_used + 1,
        )


@dataclass(frozen=True)
class VenueUsage:
    """Point-in-time snapshot of a venue's usage counters."""

    confirmed_this_month: int = 0


@dataclass(frozen=True)
class ResidencyInstruction:
    """Tells the caller to materialize a residency for a confirmed request."""

    request_id: str
    venue_id: str
    dates: DateRange


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of `attempt_transition`.

    On success `error` is None and `request` is the updated request. On failure
    `request` is the untouched input and `error` names the failed check.
    """

    request: BookingRequest
    error: WorkflowError | None = None
    residency: ResidencyInstruction | None = None

    @property
    def ok(self) -> bool:
        """True if the transition was authorized."""
        return self.error is None

    def unwrap(self) -> BookingRequest:
        """Return the updated request, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.request


def attempt_transition(
    request: BookingRequest,
    proposed: Status,
    actor: Actor,
    quota: PlanQuota,
    usage: VenueUsage,
    *,
    edit: TermsEdit | None = None,
) -> TransitionResult:
    """Validate and apply a status move or a term edit.

    Args:
        request: Current request snapshot.
        proposed: Target status. A term edit uses the request's own status,
            which must be PENDING.
        actor: Who performs the move.
        quota: Quota of the venue that owns the request.
        usage: Venue usage snapshot for the current month.
        edit: New terms, when the move is an edit rather than a status change.

    Returns:
        TransitionResult: the updated request, or the error of the first
        failed check (legality, authorization, monthly quota, modifications).
    """

    def fail(error: WorkflowError) -> TransitionResult:
        return TransitionResult(request=request, error=error)

    current = request.status
    is_edit = edit is not None

    # 1) legality
    if is_edit:
        legal = current is EDITABLE_STATUS and proposed is EDITABLE_STATUS
    else:
        legal = is_legal(current, proposed)
    if not legal:
        return fail(
            IllegalTransitionError(request.request_id, current.value, proposed.value)
        )

    # 2) authorization
    if not may_move_to(actor, request, proposed):
        return fail(
            UnauthorizedTransitionError(request.request_id, str(actor), proposed.value)
        )

    # 3) monthly confirmation quota
    if proposed is Status.CONFIRMED and not quota.allows_confirmation(
        usage.confirmed_this_month
    ):
        return fail(
            QuotaExceededError(
                request.venue_id,
                quota.monthly_events_limit,
                usage.confirmed_this_month,
            )
        )

    # 4) per-request modification quota
    if edit is not None:
        if not quota.allows_modification(request.modifications_used):
            return fail(
                ModificationLimitExceededError(
                    request.request_id,
                    quota.modifications_per_request,
                    request.modifications_used,
                )
            )
        return TransitionResult(request=edit.apply(request))

    updated = dataclasses.replace(request, status=proposed)
    residency = (
        ResidencyInstruction(updated.request_id, updated.venue_id, updated.dates)
        if proposed is Status.CONFIRMED
        else None
    )
    return TransitionResult(request=updated, residency=residency)

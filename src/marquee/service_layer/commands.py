"""Module defining Commands."""

from dataclasses import dataclass

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RegisterVenue(Command):
    """Command to open a venue account on a subscription plan."""

    venue_id: str
    plan: str | None = None


@dataclass(frozen=True)
class ChangeVenuePlan(Command):
    """Command to move a venue account to another plan."""

    venue_id: str
    plan: str | None


@dataclass(frozen=True)
class SubmitBookingRequest(Command):
    """Command to create an OPEN booking request.

    Dates are ISO ``YYYY-MM-DD`` strings, both inclusive.
    """

    venue_id: str
    format_ref: str
    start: str
    end: str
    artist_id: str | None = None
    fee_cents: int | None = None


@dataclass(frozen=True)
class TransitionBookingRequest(Command):
    """Command to move a booking request to another status."""

    request_id: str
    status: str
    actor_role: str
    actor_id: str


@dataclass(frozen=True)
class EditBookingTerms(Command):
    """Command to change the dates and/or fee of a pending booking request.

    Omitted fields keep their current value; giving only one date bound keeps
    the other.
    """

    request_id: str
    actor_role: str
    actor_id: str
    start: str | None = None
    end: str | None = None
    fee_cents: int | None = None


@dataclass(frozen=True)
class RescheduleResidency(Command):
    """Command to move a residency to new dates and recompute its weeks."""

    residency_id: str
    start: str
    end: str

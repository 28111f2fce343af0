"""Handlers for booking requests.

Each handler reads a snapshot, lets `attempt_transition` decide, and writes
the outcome in the same unit of work. Writes that depend on the snapshot are
conditional, so a concurrent change makes the handler raise and the unit of
work roll back instead of overcounting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from marquee.domain.booking import (
    Actor,
    ActorRole,
    BookingRequest,
    Status,
    TermsEdit,
    VenueUsage,
    attempt_transition,
)
from marquee.domain.calendar import CalendarDate, DateRange, Weekday
from marquee.domain.errors import StaleUsageSnapshotError
from marquee.domain.plans import get_plan_quota
from marquee.domain.residency import Residency
from marquee.domain.weeks import VacationWindow
from marquee.interfaces.id_generator import IdGenerator
from marquee.interfaces.unit_of_work import AbstractUnitOfWork
from marquee.service_layer import commands

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments


def _actor(role: str, actor_id: str) -> Actor:
    """Build an actor from its role code (``venue``, ``artist``, ``admin``).

    Raises:
        ValueError: If the role is unknown.
    """
    return Actor(ActorRole((role or "").strip().lower()), actor_id)


def submit_booking_request(
    cmd: commands.SubmitBookingRequest,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> str:
    """Create an OPEN booking request and return its ID.

    Raises:
        InvalidDateError: If a date is not ``YYYY-MM-DD``.
        InvalidRangeError: If the start is after the end.
        VenueNotFoundError: If the venue has no account.
    """
    request = BookingRequest(
        request_id=id_generator.new_id(),
        venue_id=cmd.venue_id,
        format_ref=cmd.format_ref,
        dates=DateRange.parse(cmd.start, cmd.end),
        artist_id=cmd.artist_id,
        fee_cents=cmd.fee_cents,
    )

    with uow:
        uow.venues.get_plan(cmd.venue_id)
        uow.requests.add(request)
        uow.commit()

    logger.info(
        "Venue %s submitted request %s for %s (%s)",
        request.venue_id,
        request.request_id,
        request.format_ref,
        request.dates,
    )
    return request.request_id


def transition_booking_request(
    cmd: commands.TransitionBookingRequest,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Callable[[], CalendarDate],
    anchor: Weekday,
    vacation_windows: Sequence[VacationWindow],
) -> BookingRequest:
    """Move a request to another status, materializing a residency on confirmation.

    Raises:
        WorkflowError: If the engine refuses the move.
        StaleUsageSnapshotError: If the usage counter moved since it was read.
        StaleRequestError: If the request moved since it was read.
    """
    proposed = Status.parse(cmd.status)
    actor = _actor(cmd.actor_role, cmd.actor_id)
    period = clock().month_key

    with uow:
        request = uow.requests.get(cmd.request_id)
        quota = get_plan_quota(uow.venues.get_plan(request.venue_id))
        usage = uow.venues.get_usage(request.venue_id, period)

        result = attempt_transition(request, proposed, actor, quota, usage)
        updated = result.unwrap()

        if result.residency is not None:
            # unlimited plans skip the compare-and-set
            seen = (
                None
                if quota.monthly_events_limit is None
                else usage.confirmed_this_month
            )
            if not uow.venues.increment_confirmed(request.venue_id, period, seen):
                raise StaleUsageSnapshotError(
                    request.venue_id, period, usage.confirmed_this_month
                )

        uow.requests.save(updated, expected=request)

        if result.residency is not None:
            residency = Residency.materialize(
                id_generator.new_id(), result.residency, anchor, vacation_windows
            )
            uow.residencies.add(residency)
            logger.info(
                "Request %s confirmed; residency %s spans %d week(s)",
                request.request_id,
                residency.residency_id,
                len(residency.weeks),
            )

        uow.commit()

    logger.info(
        "Request %s moved %s -> %s by %s",
        request.request_id,
        request.status.value,
        updated.status.value,
        actor,
    )
    return updated


def _terms_edit(cmd: commands.EditBookingTerms, request: BookingRequest) -> TermsEdit:
    dates = None
    if cmd.start is not None or cmd.end is not None:
        start = CalendarDate.parse(cmd.start) if cmd.start else request.dates.start
        end = CalendarDate.parse(cmd.end) if cmd.end else request.dates.end
        dates = DateRange(start, end)
    return TermsEdit(dates=dates, fee_cents=cmd.fee_cents)


def edit_booking_terms(
    cmd: commands.EditBookingTerms, uow: AbstractUnitOfWork
) -> BookingRequest:
    """Change the dates and/or fee of a pending request.

    Consumes one of the request's modifications; the monthly quota is not
    involved.

    Raises:
        WorkflowError: If the request is not pending, the actor may not edit
            it, or its plan allows no more modifications.
        StaleRequestError: If the request moved since it was read.
    """
    actor = _actor(cmd.actor_role, cmd.actor_id)

    with uow:
        request = uow.requests.get(cmd.request_id)
        edit = _terms_edit(cmd, request)
        quota = get_plan_quota(uow.venues.get_plan(request.venue_id))

        updated = attempt_transition(
            request, request.status, actor, quota, VenueUsage(), edit=edit
        ).unwrap()

        uow.requests.save(updated, expected=request)
        uow.commit()

    logger.info(
        "Request %s terms edited by %s (%d modification(s) used)",
        request.request_id,
        actor,
        updated.modifications_used,
    )
    return updated


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.SubmitBookingRequest: submit_booking_request,
    commands.TransitionBookingRequest: transition_booking_request,
    commands.EditBookingTerms: edit_booking_terms,
}

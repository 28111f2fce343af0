"""Handlers for venue accounts and their subscription plans."""

import logging
from collections.abc import Callable

from marquee.domain.plans import PlanQuota, get_plan_quota
from marquee.interfaces.unit_of_work import AbstractUnitOfWork
from marquee.service_layer import commands

logger = logging.getLogger(__name__)


def register_venue(cmd: commands.RegisterVenue, uow: AbstractUnitOfWork) -> None:
    """Open a venue account."""
    with uow:
        uow.venues.add(cmd.venue_id, cmd.plan)
        uow.commit()
    logger.info("Registered venue %s on plan %s", cmd.venue_id, cmd.plan)


def change_venue_plan(
    cmd: commands.ChangeVenuePlan, uow: AbstractUnitOfWork
) -> PlanQuota:
    """Store a new plan identifier and return the quota it resolves to.

    The raw identifier is stored as given; an unknown one resolves to the
    free plan when read.
    """
    with uow:
        uow.venues.set_plan(cmd.venue_id, cmd.plan)
        uow.commit()
    quota = get_plan_quota(cmd.plan)
    logger.info("Venue %s moved to plan %s", cmd.venue_id, quota.plan.value)
    return quota


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.RegisterVenue: register_venue,
    commands.ChangeVenuePlan: change_venue_plan,
}

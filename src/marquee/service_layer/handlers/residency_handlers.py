"""Handlers for residencies."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from marquee.domain.calendar import DateRange
from marquee.domain.residency import Residency
from marquee.domain.weeks import VacationWindow
from marquee.interfaces.unit_of_work import AbstractUnitOfWork
from marquee.service_layer import commands

logger = logging.getLogger(__name__)


def reschedule_residency(
    cmd: commands.RescheduleResidency,
    uow: AbstractUnitOfWork,
    vacation_windows: Sequence[VacationWindow],
) -> Residency:
    """Move a residency to new dates; all of its weeks are recomputed.

    Overlap with other residencies of the venue is not checked.
    """
    dates = DateRange.parse(cmd.start, cmd.end)

    with uow:
        residency = uow.residencies.get(cmd.residency_id).reschedule(
            dates, vacation_windows
        )
        uow.residencies.replace(residency)
        uow.commit()

    logger.info(
        "Residency %s rescheduled to %s (%d week(s))",
        residency.residency_id,
        residency.dates,
        len(residency.weeks),
    )
    return residency


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    commands.RescheduleResidency: reschedule_residency,
}

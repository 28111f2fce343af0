"""Service layer handlers."""

from collections.abc import Callable

from .booking_handlers import COMMAND_HANDLERS as BOOKING_COMMAND_HANDLERS
from .residency_handlers import COMMAND_HANDLERS as RESIDENCY_COMMAND_HANDLERS
from .venue_handlers import COMMAND_HANDLERS as VENUE_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **VENUE_COMMAND_HANDLERS,
    **BOOKING_COMMAND_HANDLERS,
    **RESIDENCY_COMMAND_HANDLERS,
}

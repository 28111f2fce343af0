"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from marquee import config
from marquee.adapters.db.engine import make_engine
from marquee.adapters.id_generators import ULIDGenerator
from marquee.adapters.unit_of_work import SqlAlchemyUnitOfWork
from marquee.domain.calendar import CalendarDate, Weekday
from marquee.domain.weeks import DEFAULT_VACATION_WINDOWS, VacationWindow
from marquee.interfaces.id_generator import IdGenerator
from marquee.interfaces.unit_of_work import AbstractUnitOfWork
from marquee.service_layer.handlers import COMMAND_HANDLERS
from marquee.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from marquee.service_layer.commands import Command

# pylint: disable=too-many-arguments


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    *,
    id_generator: IdGenerator | None = None,
    clock: Callable[[], CalendarDate] = CalendarDate.today_utc,
    anchor: Weekday = config.DEFAULT_WEEK_ANCHOR,
    vacation_windows: Sequence[VacationWindow] = DEFAULT_VACATION_WINDOWS,
) -> MessageBus:
    """Build a message bus with injected dependencies.

    Each handler receives only the dependencies its signature names.
    """
    dependencies = {
        "uow": uow,
        "id_generator": id_generator or ULIDGenerator(),
        "clock": clock,
        "anchor": anchor,
        "vacation_windows": tuple(vacation_windows),
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap() -> AppContainer:
    """Bootstrap the message bus from the environment.

    Raises:
        DatabaseUrlNotSetError: If `MARQUEE_DB_URL` is not set.
        InvalidWeekAnchorError: If `MARQUEE_WEEK_ANCHOR` is not a weekday.
    """
    uow = build_write_uow(config.get_db_url())
    message_bus = build_message_bus(
        uow, COMMAND_HANDLERS, anchor=config.get_week_anchor()
    )

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)

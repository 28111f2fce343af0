"""Custom SQLAlchemy column types for MARQUEE.

`CalendarDateType` stores `CalendarDate` values in a plain DATE column so the
database never sees a time or timezone. `UTCDateTime` keeps audit timestamps
aware and in UTC on every backend.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy.types import Date, DateTime, TypeDecorator

from marquee.domain.calendar import CalendarDate

from .dialects import DialectName

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["CalendarDateType", "UTCDateTime"]


class CalendarDateType(TypeDecorator[CalendarDate]):  # pylint: disable=too-many-ancestors
    """DATE column mapped to `CalendarDate`."""

    impl = Date()
    cache_ok = True

    def process_bind_param(self, value: CalendarDate | date | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        if isinstance(value, CalendarDate):
            return value.value
        return value

    def process_result_value(self, value: Any, dialect: Dialect) -> CalendarDate | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            return CalendarDate(value)
        return CalendarDate.parse(str(value))

    def process_literal_param(self, value: CalendarDate | None, dialect: Dialect) -> Any:
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[CalendarDate]:
        return CalendarDate


class UTCDateTime(TypeDecorator[datetime]):  # pylint: disable=too-many-ancestors
    """Timezone-aware UTC datetime; naive values are taken as UTC."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        # SQLite stores naive UTC so it won't be reinterpreted as local time
        return (
            value.replace(tzinfo=None)
            if dialect.name == DialectName.SQLITE.value
            else value
        )

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)
        return value

    def process_literal_param(self, value: datetime | None, dialect: Dialect) -> Any:
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[datetime]:
        return datetime

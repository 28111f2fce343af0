"""Repositories backed by SQLAlchemy Core, for Postgres and SQLite.

All repositories of a unit of work share its `Connection`; none of them
commits. Snapshot-dependent writes are conditional UPDATEs whose row count
tells whether the snapshot still held.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from marquee.adapters.db.dialects import DialectName, UnsupportedDialect
from marquee.adapters.db.schema import (
    booking_requests,
    residencies,
    residency_weeks,
    venue_accounts,
    venue_usage,
)
from marquee.domain.booking import BookingRequest, Status, VenueUsage
from marquee.domain.calendar import DateRange, Week, Weekday
from marquee.domain.residency import Residency
from marquee.domain.weeks import ResidencyWeekSeed, WeekKind
from marquee.interfaces.errors import (
    DuplicateRecordError,
    RequestNotFoundError,
    ResidencyNotFoundError,
    StaleRequestError,
    VenueNotFoundError,
)
from marquee.interfaces.repositories import (
    BookingRequestRepository,
    ResidencyRepository,
    VenueAccountRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row
    from sqlalchemy.sql.dml import Insert


def _request_values(request: BookingRequest) -> dict:
    return {
        "venue_id": request.venue_id,
        "format_ref": request.format_ref,
        "artist_id": request.artist_id,
        "start_date": request.dates.start,
        "end_date": request.dates.end,
        "fee_cents": request.fee_cents,
        "status": request.status.value,
        "modifications_used": request.modifications_used,
    }


def _request_from_row(row: Row) -> BookingRequest:
    return BookingRequest(
        request_id=row.request_id,
        venue_id=row.venue_id,
        format_ref=row.format_ref,
        dates=DateRange(row.start_date, row.end_date),
        artist_id=row.artist_id,
        fee_cents=row.fee_cents,
        status=Status(row.status),
        modifications_used=int(row.modifications_used),
    )


class SqlAlchemyBookingRequestRepository(BookingRequestRepository):
    """Booking requests stored in the ``booking_requests`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def _exists(self, request_id: str) -> bool:
        stmt = select(booking_requests.c.request_id).where(
            booking_requests.c.request_id == request_id
        )
        return self.connection.execute(stmt).first() is not None

    def add(self, request: BookingRequest) -> None:
        if self._exists(request.request_id):
            raise DuplicateRecordError("Booking request", request.request_id)
        venue = select(venue_accounts.c.venue_id).where(
            venue_accounts.c.venue_id == request.venue_id
        )
        if self.connection.execute(venue).first() is None:
            raise VenueNotFoundError(request.venue_id)
        self.connection.execute(
            insert(booking_requests).values(
                request_id=request.request_id, **_request_values(request)
            )
        )

    def get(self, request_id: str) -> BookingRequest:
        stmt = select(booking_requests).where(
            booking_requests.c.request_id == request_id
        )
        if not (row := self.connection.execute(stmt).first()):
            raise RequestNotFoundError(request_id)
        return _request_from_row(row)

    def save(self, request: BookingRequest, expected: BookingRequest) -> None:
        stmt = (
            update(booking_requests)
            .where(
                booking_requests.c.request_id == request.request_id,
                booking_requests.c.status == expected.status.value,
                booking_requests.c.modifications_used == expected.modifications_used,
            )
            .values(**_request_values(request), updated_at=func.current_timestamp())
        )
        if self.connection.execute(stmt).rowcount == 1:
            return
        if not self._exists(request.request_id):
            raise RequestNotFoundError(request.request_id)
        raise StaleRequestError(request.request_id, expected.status.value)

    def list_for_venue(self, venue_id: str) -> list[BookingRequest]:
        stmt = (
            select(booking_requests)
            .where(booking_requests.c.venue_id == venue_id)
            .order_by(booking_requests.c.request_id)
        )
        return [_request_from_row(row) for row in self.connection.execute(stmt)]


class SqlAlchemyVenueAccountRepository(VenueAccountRepository):
    """Venue plans and monthly usage in ``venue_accounts`` and ``venue_usage``."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = connection.engine.dialect.name  # 'postgresql' or 'sqlite'

    def add(self, venue_id: str, plan: str | None) -> None:
        stmt = select(venue_accounts.c.venue_id).where(
            venue_accounts.c.venue_id == venue_id
        )
        if self.connection.execute(stmt).first() is not None:
            raise DuplicateRecordError("Venue", venue_id)
        self.connection.execute(
            insert(venue_accounts).values(venue_id=venue_id, plan=plan)
        )

    def get_plan(self, venue_id: str) -> str | None:
        stmt = select(venue_accounts.c.plan).where(
            venue_accounts.c.venue_id == venue_id
        )
        if not (row := self.connection.execute(stmt).first()):
            raise VenueNotFoundError(venue_id)
        return row.plan

    def set_plan(self, venue_id: str, plan: str | None) -> None:
        stmt = (
            update(venue_accounts)
            .where(venue_accounts.c.venue_id == venue_id)
            .values(plan=plan)
        )
        if self.connection.execute(stmt).rowcount != 1:
            raise VenueNotFoundError(venue_id)

    def get_usage(self, venue_id: str, period: str) -> VenueUsage:
        stmt = select(venue_usage.c.confirmed_count).where(
            venue_usage.c.venue_id == venue_id,
            venue_usage.c.period == period,
        )
        count = self.connection.execute(stmt).scalar_one_or_none()
        return VenueUsage(confirmed_this_month=int(count or 0))

    def increment_confirmed(
        self, venue_id: str, period: str, seen: int | None
    ) -> bool:
        # 1) make sure the counter row exists, without disturbing a concurrent one
        self.connection.execute(self._build_no_throw_insert(venue_id, period))

        # 2) compare-and-set on the value the caller's quota check saw
        stmt = update(venue_usage).where(
            venue_usage.c.venue_id == venue_id,
            venue_usage.c.period == period,
        )
        if seen is not None:
            stmt = stmt.where(venue_usage.c.confirmed_count == seen)
        stmt = stmt.values(confirmed_count=venue_usage.c.confirmed_count + 1)
        return self.connection.execute(stmt).rowcount == 1

    def _build_no_throw_insert(self, venue_id: str, period: str) -> Insert:
        dialect_name = DialectName.from_string(self.dialect)
        values = {"venue_id": venue_id, "period": period, "confirmed_count": 0}
        if dialect_name is DialectName.POSTGRES:
            return pg_insert(venue_usage).values(**values).on_conflict_do_nothing()
        if dialect_name is DialectName.SQLITE:
            return sqlite_insert(venue_usage).values(**values).on_conflict_do_nothing()

        msg = f"Unsupported dialect: {self.dialect}"  # pragma: no cover
        raise UnsupportedDialect(msg)  # pragma: no cover


class SqlAlchemyResidencyRepository(ResidencyRepository):
    """Residencies in ``residencies``, their weeks in ``residency_weeks``."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- lookups ---

    def get(self, residency_id: str) -> Residency:
        stmt = select(residencies).where(residencies.c.residency_id == residency_id)
        if not (row := self.connection.execute(stmt).first()):
            raise ResidencyNotFoundError(residency_id)
        return self._load(row)

    def get_by_request(self, request_id: str) -> Residency | None:
        stmt = select(residencies).where(residencies.c.request_id == request_id)
        if not (row := self.connection.execute(stmt).first()):
            return None
        return self._load(row)

    def _load(self, row: Row) -> Residency:
        stmt = (
            select(residency_weeks)
            .where(residency_weeks.c.residency_id == row.residency_id)
            .order_by(residency_weeks.c.start_date)
        )
        weeks = tuple(
            ResidencyWeekSeed(
                week=Week(week_row.start_date, week_row.end_date),
                kind=WeekKind(week_row.kind),
                performances_count=int(week_row.performances_count),
                fee_cents=int(week_row.fee_cents),
            )
            for week_row in self.connection.execute(stmt)
        )
        return Residency(
            residency_id=row.residency_id,
            request_id=row.request_id,
            venue_id=row.venue_id,
            dates=DateRange(row.start_date, row.end_date),
            anchor=Weekday[row.anchor],
            weeks=weeks,
        )

    # --- writes ---

    def add(self, residency: Residency) -> None:
        stmt = select(residencies.c.residency_id).where(
            residencies.c.residency_id == residency.residency_id
        )
        if self.connection.execute(stmt).first() is not None:
            raise DuplicateRecordError("Residency", residency.residency_id)
        if self.get_by_request(residency.request_id) is not None:
            raise DuplicateRecordError("Residency for request", residency.request_id)

        self.connection.execute(
            insert(residencies).values(
                residency_id=residency.residency_id,
                request_id=residency.request_id,
                venue_id=residency.venue_id,
                start_date=residency.dates.start,
                end_date=residency.dates.end,
                anchor=residency.anchor.name,
            )
        )
        self._insert_weeks(residency)

    def replace(self, residency: Residency) -> None:
        stmt = (
            update(residencies)
            .where(residencies.c.residency_id == residency.residency_id)
            .values(
                start_date=residency.dates.start,
                end_date=residency.dates.end,
                anchor=residency.anchor.name,
            )
        )
        if self.connection.execute(stmt).rowcount != 1:
            raise ResidencyNotFoundError(residency.residency_id)
        self.connection.execute(
            delete(residency_weeks).where(
                residency_weeks.c.residency_id == residency.residency_id
            )
        )
        self._insert_weeks(residency)

    def _insert_weeks(self, residency: Residency) -> None:
        if not residency.weeks:
            return
        self.connection.execute(
            insert(residency_weeks),
            [
                {
                    "residency_id": residency.residency_id,
                    "start_date": seed.week.start,
                    "end_date": seed.week.end,
                    "kind": seed.kind.value,
                    "performances_count": seed.performances_count,
                    "fee_cents": seed.fee_cents,
                }
                for seed in residency.weeks
            ],
        )

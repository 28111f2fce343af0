"""SQLAlchemy-backed Unit of Work for MARQUEE.

Provides a context-managed UnitOfWork using a single SQLAlchemy Connection
shared by the booking request, venue account and residency repositories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marquee.adapters.repositories import (
    SqlAlchemyBookingRequestRepository,
    SqlAlchemyResidencyRepository,
    SqlAlchemyVenueAccountRepository,
)
from marquee.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.requests = SqlAlchemyBookingRequestRepository(self.connection)
        self.venues = SqlAlchemyVenueAccountRepository(self.connection)
        self.residencies = SqlAlchemyResidencyRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()

"""Repository adapters: SQLAlchemy for real databases, in-memory for tests."""

from .in_memory import (
    InMemoryBookingRequestRepository,
    InMemoryResidencyRepository,
    InMemoryVenueAccountRepository,
)
from .memory_store import InMemoryBookingData
from .sqlalchemy_repositories import (
    SqlAlchemyBookingRequestRepository,
    SqlAlchemyResidencyRepository,
    SqlAlchemyVenueAccountRepository,
)

__all__ = [
    "InMemoryBookingData",
    "InMemoryBookingRequestRepository",
    "InMemoryResidencyRepository",
    "InMemoryVenueAccountRepository",
    "SqlAlchemyBookingRequestRepository",
    "SqlAlchemyResidencyRepository",
    "SqlAlchemyVenueAccountRepository",
]

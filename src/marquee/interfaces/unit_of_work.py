"""Unit of Work interface for MARQUEE.

Defines the AbstractUnitOfWork contract: a context-managed transaction that
exposes the repositories and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc

from .repositories import (
    BookingRequestRepository,
    ResidencyRepository,
    VenueAccountRepository,
)


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    requests: BookingRequestRepository
    venues: VenueAccountRepository
    residencies: ResidencyRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Anything not committed is rolled back.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""

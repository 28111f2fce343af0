"""Fixtures for repository contract tests.

Every test runs against each backend: the in-memory repositories, SQLite
(in memory and on file, migrated by Alembic) and Postgres. Postgres cases
are skipped when Docker is not available.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from marquee.adapters.repositories import (
    InMemoryBookingData,
    InMemoryBookingRequestRepository,
    InMemoryResidencyRepository,
    InMemoryVenueAccountRepository,
    SqlAlchemyBookingRequestRepository,
    SqlAlchemyResidencyRepository,
    SqlAlchemyVenueAccountRepository,
)
from marquee.interfaces.repositories import (
    BookingRequestRepository,
    ResidencyRepository,
    VenueAccountRepository,
)

# pylint: disable=redefined-outer-name

ENGINE_FIXTURES = {
    "sqlite_memory": "sqlite_engine_memory",
    "sqlite_file": "sqlite_engine_file",
    "postgres": "postgres_engine",
}


@dataclass
class Repos:
    """The three repositories of one backend, sharing one transaction."""

    requests: BookingRequestRepository
    venues: VenueAccountRepository
    residencies: ResidencyRepository


@pytest.fixture(params=["memory", *ENGINE_FIXTURES])
def repos(request: pytest.FixtureRequest) -> Iterator[Repos]:
    """Repositories for the requested backend.

    SQL backends share one connection whose transaction is rolled back
    after the test. Engine fixtures are resolved lazily so a missing Docker
    daemon only skips the Postgres cases.
    """
    if request.param == "memory":
        data = InMemoryBookingData()
        yield Repos(
            requests=InMemoryBookingRequestRepository(data),
            venues=InMemoryVenueAccountRepository(data),
            residencies=InMemoryResidencyRepository(data),
        )
        return

    engine = request.getfixturevalue(ENGINE_FIXTURES[request.param])
    with engine.connect() as conn:
        yield Repos(
            requests=SqlAlchemyBookingRequestRepository(conn),
            venues=SqlAlchemyVenueAccountRepository(conn),
            residencies=SqlAlchemyResidencyRepository(conn),
        )
        conn.rollback()


@pytest.fixture
def seeded(repos: Repos) -> Repos:
    """Repositories with venue V1 on the starter plan and V2 without a plan."""
    repos.venues.add("V1", "starter")
    repos.venues.add("V2", None)
    return repos

"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from marquee.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from marquee.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "uuid4", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """A fresh IdGenerator of each implementation."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case "simple":
            yield SimpleIdGenerator(prefix="R")
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")

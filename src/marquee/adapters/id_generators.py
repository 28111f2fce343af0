"""ID generators for booking requests and residencies."""

import threading
import uuid

from ulid import monotonic

from marquee.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs sort by creation time, so listing requests by ID lists them
    oldest first. Uses the `ulid-py` monotonic provider.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 identifiers; unordered."""

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded IDs with an optional prefix.

    Note:
        Not suitable for production use; primarily for tests and demos.
    """

    def __init__(self, prefix: str = "", length: int = 6) -> None:
        self._counter = 0
        self._prefix = prefix
        self._length = length

    def new_id(self) -> str:
        """Return the next ID in sequence."""
        self._counter += 1
        return f"{self._prefix}{self._counter:0{self._length}d}"

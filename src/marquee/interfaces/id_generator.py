"""Port for identifier generation.

Booking requests and residencies get their identifiers from an injected
generator so tests can use predictable IDs.
"""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Produces unique string identifiers."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an identifier never returned before by this generator."""

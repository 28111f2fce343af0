"""In-memory shared data store for repository adapters."""

from dataclasses import dataclass, field

from marquee.domain.booking import BookingRequest
from marquee.domain.residency import Residency


@dataclass(slots=True)
class InMemoryBookingData:
    """Shared in-memory backing store for the in-memory repositories.

    A single instance is passed to all in-memory repositories so that a
    unit of work sees requests, venues and residencies from one place,
    the way the SQLAlchemy repositories share one connection.
    """

    # keyed by request_id, in insertion order
    requests: dict[str, BookingRequest] = field(default_factory=dict)

    # keyed by venue_id; value is the raw plan identifier
    venue_plans: dict[str, str | None] = field(default_factory=dict)

    # keyed by (venue_id, "YYYY-MM")
    usage: dict[tuple[str, str], int] = field(default_factory=dict)

    # keyed by residency_id
    residencies: dict[str, Residency] = field(default_factory=dict)

"""Relational schema for MARQUEE.

| Table              | Holds                                            |
|--------------------|--------------------------------------------------|
| venue_accounts     | venue id and raw subscription plan identifier    |
| venue_usage        | confirmed events per venue and ``YYYY-MM`` period |
| booking_requests   | current state of every booking request           |
| residencies        | one row per confirmed request                    |
| residency_weeks    | the partitioned weeks of a residency             |

Constraints enforced here mirror the domain invariants so that a bug in an
adapter cannot persist a range that ends before it starts or a week that is
not seven days long.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    PrimaryKeyConstraint,
    String,
    Table,
    text,
)

from marquee.domain.booking import Status
from marquee.domain.weeks import WeekKind

from .metadata import metadata
from .sa_types import CalendarDateType, UTCDateTime

__all__ = [
    "venue_accounts",
    "venue_usage",
    "booking_requests",
    "residencies",
    "residency_weeks",
]

ID_LENGTH = 64

_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in Status)
_KIND_VALUES = ", ".join(f"'{kind.value}'" for kind in WeekKind)


venue_accounts = Table(
    "venue_accounts",
    metadata,
    Column("venue_id", String(ID_LENGTH), primary_key=True),
    Column(
        "plan",
        String(32),
        nullable=True,
        comment="Raw plan identifier; unknown values are read as 'free'.",
    ),
    Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    comment="Venue accounts and their subscription plan.",
)

venue_usage = Table(
    "venue_usage",
    metadata,
    Column(
        "venue_id",
        String(ID_LENGTH),
        ForeignKey("venue_accounts.venue_id"),
        nullable=False,
    ),
    Column("period", String(7), nullable=False, comment="YYYY-MM"),
    Column("confirmed_count", Integer, nullable=False, server_default="0"),
    PrimaryKeyConstraint("venue_id", "period"),
    CheckConstraint("confirmed_count >= 0", name="non_negative_count"),
    comment="Confirmed events per venue and month; incremented conditionally.",
)

booking_requests = Table(
    "booking_requests",
    metadata,
    Column("request_id", String(ID_LENGTH), primary_key=True),
    Column(
        "venue_id",
        String(ID_LENGTH),
        ForeignKey("venue_accounts.venue_id"),
        nullable=False,
    ),
    Column("format_ref", String(200), nullable=False),
    Column("artist_id", String(ID_LENGTH), nullable=True),
    Column("start_date", CalendarDateType(), nullable=False),
    Column("end_date", CalendarDateType(), nullable=False),
    Column("fee_cents", Integer, nullable=True),
    Column("status", String(16), nullable=False),
    Column("modifications_used", Integer, nullable=False, server_default="0"),
    Column(
        "updated_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
    CheckConstraint("start_date <= end_date", name="ordered_dates"),
    CheckConstraint(f"status IN ({_STATUS_VALUES})", name="known_status"),
    CheckConstraint("modifications_used >= 0", name="non_negative_modifications"),
    CheckConstraint("fee_cents IS NULL OR fee_cents >= 0", name="non_negative_fee"),
    Index("ix_booking_requests_venue_id_status", "venue_id", "status"),
    comment="Booking requests; never deleted, terminal statuses end their life.",
)

residencies = Table(
    "residencies",
    metadata,
    Column("residency_id", String(ID_LENGTH), primary_key=True),
    Column(
        "request_id",
        String(ID_LENGTH),
        ForeignKey("booking_requests.request_id"),
        nullable=False,
        unique=True,
    ),
    Column("venue_id", String(ID_LENGTH), nullable=False),
    Column("start_date", CalendarDateType(), nullable=False),
    Column("end_date", CalendarDateType(), nullable=False),
    Column("anchor", String(9), nullable=False, comment="Weekday name, e.g. SUNDAY."),
    CheckConstraint("start_date <= end_date", name="ordered_dates"),
    comment="Confirmed engagements spawned by booking requests.",
)

residency_weeks = Table(
    "residency_weeks",
    metadata,
    Column(
        "residency_id",
        String(ID_LENGTH),
        ForeignKey("residencies.residency_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("start_date", CalendarDateType(), nullable=False),
    Column("end_date", CalendarDateType(), nullable=False),
    Column("kind", String(8), nullable=False),
    Column("performances_count", Integer, nullable=False),
    Column("fee_cents", Integer, nullable=False),
    PrimaryKeyConstraint("residency_id", "start_date"),
    CheckConstraint("start_date < end_date", name="ordered_dates"),
    CheckConstraint(f"kind IN ({_KIND_VALUES})", name="known_kind"),
    comment="Weeks of a residency; rewritten whenever its dates change.",
)

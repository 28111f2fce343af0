"""create booking tables

Revision ID: 3f9c1a7e52d4
Revises:
Create Date: 2025-10-20 09:14:37.518204

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from marquee.adapters.db.sa_types import CalendarDateType, UTCDateTime

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9c1a7e52d4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "venue_accounts",
        sa.Column("venue_id", sa.String(length=64), nullable=False),
        sa.Column(
            "plan",
            sa.String(length=32),
            nullable=True,
            comment="Raw plan identifier; unknown values are read as 'free'.",
        ),
        sa.Column(
            "created_at",
            UTCDateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("venue_id", name=op.f("pk_venue_accounts")),
        comment="Venue accounts and their subscription plan.",
    )

    op.create_table(
        "venue_usage",
        sa.Column("venue_id", sa.String(length=64), nullable=False),
        sa.Column("period", sa.String(length=7), nullable=False, comment="YYYY-MM"),
        sa.Column(
            "confirmed_count", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.CheckConstraint(
            "confirmed_count >= 0", name=op.f("ck_venue_usage_non_negative_count")
        ),
        sa.ForeignKeyConstraint(
            ["venue_id"],
            ["venue_accounts.venue_id"],
            name=op.f("fk_venue_usage_venue_id_venue_accounts"),
        ),
        sa.PrimaryKeyConstraint("venue_id", "period", name=op.f("pk_venue_usage")),
        comment="Confirmed events per venue and month; incremented conditionally.",
    )

    op.create_table(
        "booking_requests",
        sa.Column("request_id", sa.String(length=64), nullable=False),
        sa.Column("venue_id", sa.String(length=64), nullable=False),
        sa.Column("format_ref", sa.String(length=200), nullable=False),
        sa.Column("artist_id", sa.String(length=64), nullable=True),
        sa.Column("start_date", CalendarDateType(), nullable=False),
        sa.Column("end_date", CalendarDateType(), nullable=False),
        sa.Column("fee_cents", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column(
            "modifications_used", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "updated_at",
            UTCDateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.CheckConstraint(
            "start_date <= end_date", name=op.f("ck_booking_requests_ordered_dates")
        ),
        sa.CheckConstraint(
            "status IN ('OPEN', 'PENDING', 'ACCEPTED', 'REJECTED', "
            "'CONFIRMED', 'DECLINED', 'CANCELLED')",
            name=op.f("ck_booking_requests_known_status"),
        ),
        sa.CheckConstraint(
            "modifications_used >= 0",
            name=op.f("ck_booking_requests_non_negative_modifications"),
        ),
        sa.CheckConstraint(
            "fee_cents IS NULL OR fee_cents >= 0",
            name=op.f("ck_booking_requests_non_negative_fee"),
        ),
        sa.ForeignKeyConstraint(
            ["venue_id"],
            ["venue_accounts.venue_id"],
            name=op.f("fk_booking_requests_venue_id_venue_accounts"),
        ),
        sa.PrimaryKeyConstraint("request_id", name=op.f("pk_booking_requests")),
        comment="Booking requests; never deleted, terminal statuses end their life.",
    )
    op.create_index(
        op.f("ix_booking_requests_venue_id_status"),
        "booking_requests",
        ["venue_id", "status"],
        unique=False,
    )

    op.create_table(
        "residencies",
        sa.Column("residency_id", sa.String(length=64), nullable=False),
        sa.Column("request_id", sa.String(length=64), nullable=False),
        sa.Column("venue_id", sa.String(length=64), nullable=False),
        sa.Column("start_date", CalendarDateType(), nullable=False),
        sa.Column("end_date", CalendarDateType(), nullable=False),
        sa.Column(
            "anchor",
            sa.String(length=9),
            nullable=False,
            comment="Weekday name, e.g. SUNDAY.",
        ),
        sa.CheckConstraint(
            "start_date <= end_date", name=op.f("ck_residencies_ordered_dates")
        ),
        sa.ForeignKeyConstraint(
            ["request_id"],
            ["booking_requests.request_id"],
            name=op.f("fk_residencies_request_id_booking_requests"),
        ),
        sa.PrimaryKeyConstraint("residency_id", name=op.f("pk_residencies")),
        sa.UniqueConstraint("request_id", name=op.f("uq_residencies_request_id")),
        comment="Confirmed engagements spawned by booking requests.",
    )

    op.create_table(
        "residency_weeks",
        sa.Column("residency_id", sa.String(length=64), nullable=False),
        sa.Column("start_date", CalendarDateType(), nullable=False),
        sa.Column("end_date", CalendarDateType(), nullable=False),
        sa.Column("kind", sa.String(length=8), nullable=False),
        sa.Column("performances_count", sa.Integer(), nullable=False),
        sa.Column("fee_cents", sa.Integer(), nullable=False),
        sa.CheckConstraint(
            "start_date < end_date", name=op.f("ck_residency_weeks_ordered_dates")
        ),
        sa.CheckConstraint(
            "kind IN ('CALM', 'BUSY')", name=op.f("ck_residency_weeks_known_kind")
        ),
        sa.ForeignKeyConstraint(
            ["residency_id"],
            ["residencies.residency_id"],
            name=op.f("fk_residency_weeks_residency_id_residencies"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "residency_id", "start_date", name=op.f("pk_residency_weeks")
        ),
        comment="Weeks of a residency; rewritten whenever its dates change.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("residency_weeks")
    op.drop_table("residencies")
    op.drop_index(
        op.f("ix_booking_requests_venue_id_status"), table_name="booking_requests"
    )
    op.drop_table("booking_requests")
    op.drop_table("venue_usage")
    op.drop_table("venue_accounts")

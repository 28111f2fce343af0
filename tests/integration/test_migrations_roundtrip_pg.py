"""Alembic round-trip smoke test for PostgreSQL.

Uses the session Postgres container (already at head): downgrades to base,
checks the tables are gone, then upgrades back so later tests still find
them. Skipped when Docker is not available.
"""

from alembic import command
from sqlalchemy import create_engine, text

from marquee import config

TABLES = ("venue_accounts", "venue_usage", "booking_requests", "residencies", "residency_weeks")


def _existing(url: str) -> set[str]:
    eng = create_engine(url, pool_pre_ping=True)
    try:
        with eng.connect() as conn:
            return {
                name
                for name in TABLES
                if conn.execute(
                    text("SELECT to_regclass(:name) IS NOT NULL"), {"name": f"public.{name}"}
                ).scalar()
            }
    finally:
        eng.dispose()


def test_alembic_roundtrip_postgres(pg_url: str):
    """downgrade base drops every table; upgrade head restores them."""
    command.downgrade(config.build_alembic_config(pg_url), "base")
    assert _existing(pg_url) == set()

    command.upgrade(config.build_alembic_config(pg_url), "head")
    assert _existing(pg_url) == set(TABLES)

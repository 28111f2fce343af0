"""Database engine factory.

All engines are created here so every connection is configured the same way.
SQLite connections get PRAGMAs that enforce foreign keys (residency weeks
cascade with their residency) and enable WAL; other backends are left as is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import StaticPool

from .dialects import DialectName, UnsupportedDialect

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    try:
        return DialectName.from_string(make_url(str(url)).drivername) is DialectName.SQLITE
    except UnsupportedDialect:
        return False


def is_memory_sqlite(url: str | URL) -> bool:
    """Return True for an in-memory SQLite URL."""
    return is_sqlite(url) and make_url(str(url)).database in (None, "", ":memory:")


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    SQLite engines run ``foreign_keys=ON``, ``journal_mode=WAL``,
    ``synchronous=NORMAL`` and ``temp_store=MEMORY`` on every connection.
    In-memory SQLite shares one connection so the schema survives across
    units of work.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """
    if is_memory_sqlite(url):
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore # pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine

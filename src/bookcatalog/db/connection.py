# ABOUTME: SQLite database connection management for the book catalog.
# ABOUTME: Opens or creates the database, applies schema, and provides connection context.

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from bookcatalog.config import DEFAULT_DB_PATH
from bookcatalog.db.schema import SCHEMA_V1


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def _apply_schema(conn: sqlite3.Connection) -> None:
    """Execute the DDL to create all tables and indexes."""
    conn.executescript(SCHEMA_V1)


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the catalog database.

    Creates the database file and parent directories if they don't exist.
    Applies the schema on first creation. Sets WAL journal mode, enables
    foreign keys, and uses the sqlite3.Row factory for dict-like access.

    The connection is not bound to the creating thread: the HTTP layer opens
    it in a dependency and uses it from the request's worker thread.

    Args:
        path: Path to the database file. Defaults to ~/.bookcatalog/catalog.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")

    if not _schema_exists(conn):
        _apply_schema(conn)

    return conn


@contextmanager
def catalog_connection(path: Path | None = None) -> Iterator[sqlite3.Connection]:
    """Context manager around open_catalog() that always closes the connection."""
    conn = open_catalog(path)
    try:
        yield conn
    finally:
        conn.close()

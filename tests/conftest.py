# ABOUTME: Shared pytest fixtures for bookcatalog tests.
# ABOUTME: Provides a temporary catalog database, the store and service over it, and CSV files.

import sqlite3
from collections.abc import Callable, Iterator
from datetime import date
from pathlib import Path

import pytest

from bookcatalog.core.catalog_service import BookCatalogService
from bookcatalog.core.types import BookInput
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.connection import open_catalog


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a catalog database that does not exist yet."""
    return tmp_path / "catalog.db"


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """An open connection to a freshly created catalog."""
    connection = open_catalog(db_path)
    yield connection
    connection.close()


@pytest.fixture
def store(conn: sqlite3.Connection) -> CatalogStore:
    return CatalogStore(conn)


@pytest.fixture
def service(store: CatalogStore) -> BookCatalogService:
    return BookCatalogService(store)


@pytest.fixture
def rose_input() -> BookInput:
    """A fully-populated create request."""
    return BookInput(
        isbn="978-0-15-600131-1",
        title="The Name of the Rose",
        authors=["Umberto Eco"],
        publishers=["Harcourt"],
        publication_date=date(1983, 10, 1),
    )


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes text to a file under tmp_path and returns its path."""

    def _write(content: str, name: str = "books.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write

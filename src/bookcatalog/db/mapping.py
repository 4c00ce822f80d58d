# ABOUTME: Entity dataclasses for the catalog and their conversion from SQLite rows.
# ABOUTME: Dates are stored as ISO strings and converted to datetime.date on the way out.

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass
class Author:
    """A stored author. Identity is the row id."""

    id: int | None
    name: str
    registration_date: str | None = None


@dataclass
class Publisher:
    """A stored publisher. Identity is the row id."""

    id: int | None
    name: str
    registration_date: str | None = None


@dataclass
class Book:
    """A cataloged book with its author and publisher associations.

    ``id`` and ``registration_date`` are None until the book is first saved;
    registration_date is never changed afterwards.
    """

    isbn: str
    title: str
    id: int | None = None
    authors: list[Author] = field(default_factory=list)
    publishers: list[Publisher] = field(default_factory=list)
    publication_date: date | None = None
    registration_date: str | None = None


def date_to_column(value: date | None) -> str | None:
    """Serialize a date for a TEXT column."""
    return value.isoformat() if value else None


def column_to_date(value: str | None) -> date | None:
    """Deserialize a TEXT column written by date_to_column()."""
    return date.fromisoformat(value) if value else None


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book to a dict suitable for INSERT.

    Associations are stored in their own tables and are not part of the row.
    """
    return {
        "isbn": book.isbn,
        "title": book.title,
        "publication_date": date_to_column(book.publication_date),
    }


def row_to_author(row: Any) -> Author:
    return Author(id=row["id"], name=row["name"], registration_date=row["registration_date"])


def row_to_publisher(row: Any) -> Publisher:
    return Publisher(id=row["id"], name=row["name"], registration_date=row["registration_date"])


def row_to_book(
    row: Any,
    authors: list[Author] | None = None,
    publishers: list[Publisher] | None = None,
) -> Book:
    """Convert a books row (plus already-loaded associations) to a Book."""
    return Book(
        id=row["id"],
        isbn=row["isbn"],
        title=row["title"],
        authors=list(authors or []),
        publishers=list(publishers or []),
        publication_date=column_to_date(row["publication_date"]),
        registration_date=row["registration_date"],
    )

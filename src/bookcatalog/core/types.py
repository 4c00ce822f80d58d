# ABOUTME: Input and view records exchanged between the catalog service and its callers.
# ABOUTME: BookView flattens a stored Book; BookInput carries names, not entities.

from dataclasses import dataclass, field
from datetime import date

from bookcatalog.db.mapping import Book


@dataclass
class BookInput:
    """A create-or-update request: ISBN, title, and author/publisher names."""

    isbn: str | None
    title: str | None
    authors: list[str] = field(default_factory=list)
    publishers: list[str] = field(default_factory=list)
    publication_date: date | None = None


@dataclass
class NamedRef:
    """An author or publisher as shown to callers."""

    id: int | None
    name: str


@dataclass
class BookView:
    """Flattened, read-only representation of a stored book."""

    id: int | None
    isbn: str
    title: str
    authors: list[NamedRef] = field(default_factory=list)
    publishers: list[NamedRef] = field(default_factory=list)
    publication_date: date | None = None

    @classmethod
    def from_book(cls, book: Book) -> "BookView":
        return cls(
            id=book.id,
            isbn=book.isbn,
            title=book.title,
            authors=[NamedRef(id=a.id, name=a.name) for a in book.authors],
            publishers=[NamedRef(id=p.id, name=p.name) for p in book.publishers],
            publication_date=book.publication_date,
        )

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(a.name for a in self.authors)

    @property
    def publisher(self) -> str:
        """Convenience property: joined publisher string for display."""
        return ", ".join(p.name for p in self.publishers)

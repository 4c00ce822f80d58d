# ABOUTME: Book catalog service: find, create-or-update, delete, and filtered search.
# ABOUTME: Validates input, resolves author/publisher names, and delegates storage to CatalogStore.

import logging
import re
from datetime import date

from bookcatalog.core.relations import resolve_references
from bookcatalog.core.types import BookInput, BookView
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.mapping import Book
from bookcatalog.metadata.isbn import normalize_isbn, validate_isbn

logger = logging.getLogger(__name__)

_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class NotFoundError(Exception):
    """Raised when a requested book does not exist or a search matches nothing."""


class BadRequestError(Exception):
    """Raised when a request is missing required data or carries malformed values."""


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` date.

    Raises:
        ValueError: For any other shape, or an impossible calendar date.
    """
    text = value.strip()
    if not _ISO_DATE_RE.match(text):
        raise ValueError(f"Invalid date '{value}': expected yyyy-MM-dd")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}': {exc}") from exc


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class BookCatalogService:
    """Orchestrates book operations over a CatalogStore."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def find_by_id(self, book_id: int) -> BookView:
        """Return one book.

        Raises:
            NotFoundError: If no book has this ID.
        """
        return BookView.from_book(self._require(book_id))

    def create_or_update(self, data: BookInput) -> BookView:
        """Create a book, or update the one with the same ISBN.

        Title and publication date are always overwritten. Authors and
        publishers named in ``data`` are resolved (get-or-create) and added
        to the book; existing associations are kept.

        Raises:
            BadRequestError: If ISBN or title is missing or blank.
            InvalidIsbnError: If the ISBN fails validation.
        """
        if _blank(data.isbn) or _blank(data.title):
            raise BadRequestError("ISBN and title are required")

        isbn = validate_isbn(data.isbn)
        book = self._store.get_book_by_isbn(isbn)
        if book is None:
            book = Book(isbn=isbn, title="")

        book.title = data.title.strip()
        book.publication_date = data.publication_date

        resolve_references(
            data.authors, book.authors,
            self._store.get_author_by_name, self._store.add_author,
        )
        resolve_references(
            data.publishers, book.publishers,
            self._store.get_publisher_by_name, self._store.add_publisher,
        )

        if book.id is None:
            self._store.add_book(book)
            logger.info("Created book %d (isbn=%s)", book.id, isbn)
        else:
            self._store.update_book(book)
            logger.info("Updated book %d (isbn=%s)", book.id, isbn)

        return BookView.from_book(book)

    def delete_by_id(self, book_id: int) -> None:
        """Delete a book after clearing its author and publisher links.

        Raises:
            NotFoundError: If no book has this ID. Nothing is written.
        """
        book = self._require(book_id)

        book.authors.clear()
        book.publishers.clear()
        self._store.clear_associations(book_id)
        self._store.delete_book(book_id)
        logger.info("Deleted book %d", book_id)

    def find_by_parameters(
        self,
        book_id: int | None = None,
        isbn: str | None = None,
        title: str | None = None,
        author: str | None = None,
        publisher: str | None = None,
        publication_date: str | date | None = None,
    ) -> list[BookView]:
        """Search books; every filter is optional and blank strings are ignored.

        Raises:
            BadRequestError: If publication_date is a string but not YYYY-MM-DD.
            NotFoundError: If nothing matches.
        """
        if isinstance(publication_date, str):
            if _blank(publication_date):
                publication_date = None
            else:
                try:
                    publication_date = parse_iso_date(publication_date)
                except ValueError as exc:
                    raise BadRequestError(str(exc)) from exc

        books = self._store.find_books(
            book_id=book_id,
            isbn=None if _blank(isbn) else normalize_isbn(isbn),
            title=None if _blank(title) else title.strip(),
            author=None if _blank(author) else author.strip(),
            publisher=None if _blank(publisher) else publisher.strip(),
            publication_date=publication_date,
        )

        if not books:
            raise NotFoundError("No results found for the given parameters.")

        return [BookView.from_book(book) for book in books]

    def _require(self, book_id: int) -> Book:
        book = self._store.get_book(book_id)
        if book is None:
            raise NotFoundError(f"Book not found with ID [{book_id}].")
        return book

# ABOUTME: CRUD and filtered search for books, authors, and publishers in SQLite.
# ABOUTME: CatalogStore is the persistence port used by the catalog service.

import sqlite3
from datetime import date

from bookcatalog.db.mapping import (
    Author,
    Book,
    Publisher,
    book_to_row,
    date_to_column,
    row_to_author,
    row_to_book,
    row_to_publisher,
)


class DuplicateBookError(Exception):
    """Raised when attempting to add a book with an ISBN that already exists."""


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


class CatalogStore:
    """Wraps a sqlite3 connection and provides typed CRUD for the catalog tables."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        # Unicode-aware case folding; SQLite's lower() only handles ASCII.
        self._conn.create_function("casefold", 1, _casefold, deterministic=True)

    # --- Books ---

    def get_book(self, book_id: int) -> Book | None:
        """Retrieve a book, with its associations, by row ID."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return self._load(row) if row else None

    def get_book_by_isbn(self, isbn: str) -> Book | None:
        """Retrieve a book, with its associations, by ISBN."""
        cursor = self._conn.execute("SELECT * FROM books WHERE isbn = ?", (isbn,))
        row = cursor.fetchone()
        return self._load(row) if row else None

    def list_books(self) -> list[Book]:
        """Return all books in the catalog, ordered by ID."""
        cursor = self._conn.execute("SELECT * FROM books ORDER BY id")
        return [self._load(row) for row in cursor.fetchall()]

    def find_books(
        self,
        *,
        book_id: int | None = None,
        isbn: str | None = None,
        title: str | None = None,
        author: str | None = None,
        publisher: str | None = None,
        publication_date: date | None = None,
    ) -> list[Book]:
        """Search books by any combination of filters.

        Filters that are None are ignored; the rest are AND-ed. title, author
        and publisher match case-insensitive substrings; the others match
        exactly. Each book appears once even when it matches through several
        authors or publishers. With no filters every book is returned.
        """
        joins: list[str] = []
        clauses: list[str] = []
        params: list[object] = []

        if book_id is not None:
            clauses.append("b.id = ?")
            params.append(book_id)
        if isbn is not None:
            clauses.append("b.isbn = ?")
            params.append(isbn)
        if title is not None:
            clauses.append("instr(casefold(b.title), ?) > 0")
            params.append(title.casefold())
        if author is not None:
            joins.append(
                "LEFT JOIN book_authors ba ON ba.book_id = b.id "
                "LEFT JOIN authors a ON a.id = ba.author_id"
            )
            clauses.append("instr(casefold(a.name), ?) > 0")
            params.append(author.casefold())
        if publisher is not None:
            joins.append(
                "LEFT JOIN book_publishers bp ON bp.book_id = b.id "
                "LEFT JOIN publishers p ON p.id = bp.publisher_id"
            )
            clauses.append("instr(casefold(p.name), ?) > 0")
            params.append(publisher.casefold())
        if publication_date is not None:
            clauses.append("b.publication_date = ?")
            params.append(date_to_column(publication_date))

        sql = "SELECT DISTINCT b.* FROM books b"
        if joins:
            sql += " " + " ".join(joins)
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY b.id"

        cursor = self._conn.execute(sql, params)
        return [self._load(row) for row in cursor.fetchall()]

    def add_book(self, book: Book) -> Book:
        """Insert a new book and its associations.

        Sets ``book.id`` and ``book.registration_date`` from the stored row.

        Returns:
            The same Book instance, now persisted.

        Raises:
            DuplicateBookError: If a book with this ISBN already exists.
        """
        row = book_to_row(book)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        try:
            cursor = self._conn.execute(
                f"INSERT INTO books ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            if "UNIQUE constraint failed: books.isbn" in str(exc):
                raise DuplicateBookError(f"Book with ISBN {book.isbn} already exists") from exc
            raise

        book.id = cursor.lastrowid
        self._write_associations(book)
        self._conn.commit()

        stored = self._conn.execute(
            "SELECT registration_date FROM books WHERE id = ?", (book.id,)
        ).fetchone()
        book.registration_date = stored["registration_date"]
        return book

    def update_book(self, book: Book) -> None:
        """Write title, publication date, and associations of a stored book.

        The association tables are made to match ``book.authors`` and
        ``book.publishers`` exactly. ISBN and registration date are not
        touched.

        Raises:
            ValueError: If the book has no ID or the ID does not exist.
        """
        if book.id is None:
            raise ValueError("Cannot update a book that has not been saved")

        cursor = self._conn.execute(
            "UPDATE books SET title = ?, publication_date = ? WHERE id = ?",
            (book.title, date_to_column(book.publication_date), book.id),
        )
        if cursor.rowcount == 0:
            self._conn.rollback()
            raise ValueError(f"Book with id {book.id} not found")

        self._delete_associations(book.id)
        self._write_associations(book)
        self._conn.commit()

    def clear_associations(self, book_id: int) -> None:
        """Remove every author and publisher link of a book."""
        self._delete_associations(book_id)
        self._conn.commit()

    def delete_book(self, book_id: int) -> None:
        """Delete a book row. Its associations must already be cleared.

        Raises:
            ValueError: If the book_id does not exist.
            sqlite3.IntegrityError: If association rows still reference it.
        """
        cursor = self._conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
        self._conn.commit()

        if cursor.rowcount == 0:
            raise ValueError(f"Book with id {book_id} not found")

    # --- Authors and publishers ---

    def get_author_by_name(self, name: str) -> Author | None:
        """Retrieve an author by exact name."""
        cursor = self._conn.execute("SELECT * FROM authors WHERE name = ?", (name,))
        row = cursor.fetchone()
        return row_to_author(row) if row else None

    def add_author(self, name: str) -> Author:
        """Insert an author, or return the existing one if another writer got there first."""
        self._insert_named("authors", name)
        author = self.get_author_by_name(name)
        if author is None:
            raise ValueError(f"Author '{name}' could not be stored")
        return author

    def get_publisher_by_name(self, name: str) -> Publisher | None:
        """Retrieve a publisher by exact name."""
        cursor = self._conn.execute("SELECT * FROM publishers WHERE name = ?", (name,))
        row = cursor.fetchone()
        return row_to_publisher(row) if row else None

    def add_publisher(self, name: str) -> Publisher:
        """Insert a publisher, or return the existing one if another writer got there first."""
        self._insert_named("publishers", name)
        publisher = self.get_publisher_by_name(name)
        if publisher is None:
            raise ValueError(f"Publisher '{name}' could not be stored")
        return publisher

    # --- Internals ---

    def _insert_named(self, table: str, name: str) -> None:
        try:
            self._conn.execute(f"INSERT INTO {table} (name) VALUES (?)", (name,))
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            if f"UNIQUE constraint failed: {table}.name" not in str(exc):
                raise

    def _delete_associations(self, book_id: int) -> None:
        self._conn.execute("DELETE FROM book_authors WHERE book_id = ?", (book_id,))
        self._conn.execute("DELETE FROM book_publishers WHERE book_id = ?", (book_id,))

    def _write_associations(self, book: Book) -> None:
        self._conn.executemany(
            "INSERT OR IGNORE INTO book_authors (book_id, author_id) VALUES (?, ?)",
            [(book.id, author.id) for author in book.authors],
        )
        self._conn.executemany(
            "INSERT OR IGNORE INTO book_publishers (book_id, publisher_id) VALUES (?, ?)",
            [(book.id, publisher.id) for publisher in book.publishers],
        )

    def _authors_for(self, book_id: int) -> list[Author]:
        cursor = self._conn.execute(
            "SELECT a.* FROM authors a "
            "JOIN book_authors ba ON a.id = ba.author_id "
            "WHERE ba.book_id = ? "
            "ORDER BY ba.rowid",
            (book_id,),
        )
        return [row_to_author(row) for row in cursor.fetchall()]

    def _publishers_for(self, book_id: int) -> list[Publisher]:
        cursor = self._conn.execute(
            "SELECT p.* FROM publishers p "
            "JOIN book_publishers bp ON p.id = bp.publisher_id "
            "WHERE bp.book_id = ? "
            "ORDER BY bp.rowid",
            (book_id,),
        )
        return [row_to_publisher(row) for row in cursor.fetchall()]

    def _load(self, row: sqlite3.Row) -> Book:
        book_id = row["id"]
        return row_to_book(row, self._authors_for(book_id), self._publishers_for(book_id))

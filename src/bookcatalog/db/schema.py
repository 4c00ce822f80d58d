# ABOUTME: SQL DDL statements for the bookcatalog database schema.
# ABOUTME: Defines books, authors, publishers, and their association tables.

SCHEMA_V1 = """
-- Core book catalog table
CREATE TABLE books (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    isbn              TEXT NOT NULL UNIQUE,
    title             TEXT NOT NULL,
    publication_date  TEXT,
    registration_date TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE INDEX idx_books_publication_date ON books(publication_date)
    WHERE publication_date IS NOT NULL;

CREATE TABLE authors (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    name              TEXT NOT NULL UNIQUE,
    registration_date TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE TABLE publishers (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    name              TEXT NOT NULL UNIQUE,
    registration_date TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- Associations: no ON DELETE CASCADE, rows must be cleared before a book is removed
CREATE TABLE book_authors (
    book_id   INTEGER NOT NULL REFERENCES books(id),
    author_id INTEGER NOT NULL REFERENCES authors(id),
    PRIMARY KEY (book_id, author_id)
);

CREATE TABLE book_publishers (
    book_id      INTEGER NOT NULL REFERENCES books(id),
    publisher_id INTEGER NOT NULL REFERENCES publishers(id),
    PRIMARY KEY (book_id, publisher_id)
);

CREATE INDEX idx_book_authors_author ON book_authors(author_id);
CREATE INDEX idx_book_publishers_publisher ON book_publishers(publisher_id);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

# ABOUTME: Public API for the bookcatalog database layer.
# ABOUTME: Exports connection management, the catalog store, and entity types.

from bookcatalog.db.catalog import CatalogStore, DuplicateBookError
from bookcatalog.db.connection import catalog_connection, open_catalog
from bookcatalog.db.mapping import Author, Book, Publisher

__all__ = [
    "Author",
    "Book",
    "CatalogStore",
    "DuplicateBookError",
    "Publisher",
    "catalog_connection",
    "open_catalog",
]

# ABOUTME: Metadata package: ISBN validation and the Open Library lookup client.
# ABOUTME: Exports the BookMetadata record and the errors raised by lookups.

from bookcatalog.metadata.http import ExternalServiceError, MetadataNotFoundError
from bookcatalog.metadata.isbn import InvalidIsbnError, normalize_isbn, validate_isbn
from bookcatalog.metadata.openlibrary import OpenLibraryClient
from bookcatalog.metadata.types import BookMetadata

__all__ = [
    "BookMetadata",
    "ExternalServiceError",
    "InvalidIsbnError",
    "MetadataNotFoundError",
    "OpenLibraryClient",
    "normalize_isbn",
    "validate_isbn",
]

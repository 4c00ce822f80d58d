# ABOUTME: Parsing functions for Open Library ISBN endpoint JSON responses.
# ABOUTME: Tolerant parsing, so every field is optional and bad sub-fields become None or [].

from datetime import date, datetime
from typing import Any

from bookcatalog.metadata.types import BookMetadata

# Open Library edition dates look like "March 5, 2001".
_PUBLISH_DATE_FORMAT = "%B %d, %Y"


def parse_title(data: dict[str, Any]) -> str | None:
    """Return the edition title, or None when absent or not a string."""
    title = data.get("title")
    return title if isinstance(title, str) else None


def parse_publishers(data: dict[str, Any]) -> list[str]:
    """Return publisher names, skipping any entry that is not a string."""
    publishers = data.get("publishers")
    if not isinstance(publishers, list):
        return []
    return [name for name in publishers if isinstance(name, str)]


def parse_publish_date(data: dict[str, Any]) -> date | None:
    """Parse the free-text ``publish_date`` field.

    Only the full "Month D, YYYY" form is understood. Bare years, "May 2001"
    and anything else yield None rather than an error.
    """
    raw = data.get("publish_date")
    if not isinstance(raw, str):
        return None
    try:
        return datetime.strptime(raw.strip(), _PUBLISH_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_isbn_response(data: dict[str, Any], isbn: str) -> BookMetadata:
    """Parse an Open Library ISBN endpoint response into BookMetadata.

    The ISBN is taken from the caller (already validated) rather than from
    the payload, whose isbn_10/isbn_13 lists may hold several variants.
    """
    return BookMetadata(
        isbn=isbn,
        title=parse_title(data),
        publishers=parse_publishers(data),
        publication_date=parse_publish_date(data),
    )

# ABOUTME: Data structure for book metadata returned by external lookup services.
# ABOUTME: BookMetadata is what the OpenLibrary client hands back to the API and CLI.

from dataclasses import dataclass, field
from datetime import date


@dataclass
class BookMetadata:
    """Edition-level metadata from an external source.

    Every field except isbn may be missing from the remote record, so title
    and publication_date are optional and publishers may be empty.
    """

    isbn: str
    title: str | None = None
    publishers: list[str] = field(default_factory=list)
    publication_date: date | None = None

    @property
    def publisher(self) -> str:
        """Convenience property: joined publisher string for display."""
        return ", ".join(self.publishers)

# ABOUTME: Rich renderables shared by the CLI commands.
# ABOUTME: Builds a summary table for many books and a field table for one.

from rich.table import Table

from bookcatalog.core.types import BookView
from bookcatalog.metadata.types import BookMetadata


def books_table(books: list[BookView]) -> Table:
    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("ISBN")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Published", width=10)

    for book in books:
        table.add_row(
            str(book.id),
            book.isbn,
            book.title,
            book.author or "[dim]unknown[/dim]",
            book.publication_date.isoformat() if book.publication_date else "?",
        )
    return table


def book_detail(book: BookView) -> Table:
    """Field/value table for a single stored book."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("ISBN", book.isbn)
    table.add_row("Title", book.title)
    table.add_row("Authors", book.author or "unknown")
    if book.publisher:
        table.add_row("Publishers", book.publisher)
    if book.publication_date:
        table.add_row("Published", book.publication_date.isoformat())
    return table


def metadata_detail(metadata: BookMetadata) -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ISBN", metadata.isbn)
    table.add_row("Title", metadata.title or "unknown")
    if metadata.publishers:
        table.add_row("Publishers", metadata.publisher)
    if metadata.publication_date:
        table.add_row("Published", metadata.publication_date.isoformat())
    return table

# ABOUTME: The `bookcatalog info` command for displaying one cataloged book.
# ABOUTME: Shows ISBN, title, authors, publishers, and publication date by ID.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.options import db_option, resolve_db_path
from bookcatalog.cli.render import book_detail
from bookcatalog.core.catalog_service import BookCatalogService, NotFoundError
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.connection import catalog_connection

console = Console()


@click.command("info")
@click.argument("book_id", type=int)
@db_option
def info(book_id: int, db_path: Path | None) -> None:
    """Show a book by ID."""
    with catalog_connection(resolve_db_path(db_path)) as conn:
        service = BookCatalogService(CatalogStore(conn))
        try:
            book = service.find_by_id(book_id)
        except NotFoundError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc

    console.print(book_detail(book))

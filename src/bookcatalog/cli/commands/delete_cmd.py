# ABOUTME: The `bookcatalog delete` command for removing a book from the catalog.
# ABOUTME: Clears the book's author and publisher links, then deletes it.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.options import db_option, resolve_db_path
from bookcatalog.core.catalog_service import BookCatalogService, NotFoundError
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.connection import catalog_connection

console = Console()


@click.command("delete")
@click.argument("book_id", type=int)
@db_option
def delete(book_id: int, db_path: Path | None) -> None:
    """Delete a book by ID."""
    with catalog_connection(resolve_db_path(db_path)) as conn:
        service = BookCatalogService(CatalogStore(conn))
        try:
            service.delete_by_id(book_id)
        except NotFoundError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc

    console.print(f"[green]Deleted book {book_id}.[/green]")

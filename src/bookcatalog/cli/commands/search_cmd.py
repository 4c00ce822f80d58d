# ABOUTME: The `bookcatalog search` command for filtered catalog queries.
# ABOUTME: Every filter is optional; text filters match case-insensitive substrings.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.options import db_option, resolve_db_path
from bookcatalog.cli.render import books_table
from bookcatalog.core.catalog_service import BadRequestError, BookCatalogService, NotFoundError
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.connection import catalog_connection

console = Console()


@click.command("search")
@click.option("--id", "book_id", type=int, default=None, help="Exact book ID.")
@click.option("--isbn", default=None, help="Exact ISBN; hyphens and spaces are ignored.")
@click.option("--title", default=None, help="Substring of the title.")
@click.option("--author", default=None, help="Substring of an author name.")
@click.option("--publisher", default=None, help="Substring of a publisher name.")
@click.option("--date", "publication_date", default=None, help="Exact publication date (yyyy-MM-dd).")
@db_option
def search(
    book_id: int | None,
    isbn: str | None,
    title: str | None,
    author: str | None,
    publisher: str | None,
    publication_date: str | None,
    db_path: Path | None,
) -> None:
    """Search the catalog. With no filters, lists every book."""
    with catalog_connection(resolve_db_path(db_path)) as conn:
        service = BookCatalogService(CatalogStore(conn))
        try:
            results = service.find_by_parameters(
                book_id=book_id,
                isbn=isbn,
                title=title,
                author=author,
                publisher=publisher,
                publication_date=publication_date,
            )
        except BadRequestError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc
        except NotFoundError:
            console.print("[yellow]No results found.[/yellow]")
            return

    console.print(books_table(results))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")

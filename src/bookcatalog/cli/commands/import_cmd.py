# ABOUTME: The `bookcatalog import` command for bulk-loading books from a CSV file.
# ABOUTME: Runs the import pipeline on a local file and prints stored books and rejected lines.

import mimetypes
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.options import db_option, resolve_db_path
from bookcatalog.cli.render import books_table
from bookcatalog.core.catalog_service import BookCatalogService
from bookcatalog.core.importer import FileImportError, UploadedFile, import_file
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.connection import catalog_connection

console = Console()


@click.command("import")
@click.argument(
    "csv_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@db_option
def import_command(csv_file: Path, db_path: Path | None) -> None:
    """Import books from a CSV file (isbn;title;authors;publishers;yyyy-MM-dd)."""
    content_type, _ = mimetypes.guess_type(csv_file.name)

    with catalog_connection(resolve_db_path(db_path)) as conn:
        service = BookCatalogService(CatalogStore(conn))
        with csv_file.open("rb") as stream:
            upload = UploadedFile(filename=csv_file.name, stream=stream, content_type=content_type)
            try:
                report = import_file(upload, service)
            except FileImportError as exc:
                console.print(f"[red]{escape(str(exc))}[/red]")
                raise SystemExit(1) from exc

    if report.books:
        console.print(books_table(report.books))

    parts = [f"[green]{len(report.books)} imported[/green]"]
    if report.errors:
        parts.append(f"[red]{len(report.errors)} error(s)[/red]")
    console.print(", ".join(parts))

    if report.errors:
        console.print("\n[yellow]Rejected lines:[/yellow]")
        for error in report.errors:
            console.print(f"  [dim]line {error.line_number}:[/dim] {escape(error.message)}")

# ABOUTME: The `bookcatalog lookup` command for querying Open Library by ISBN.
# ABOUTME: Prints the remote edition's title, publishers, and publication date.

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.render import metadata_detail
from bookcatalog.config import load_settings
from bookcatalog.metadata.http import CatalogHttpClient, ExternalServiceError, MetadataNotFoundError
from bookcatalog.metadata.isbn import InvalidIsbnError
from bookcatalog.metadata.openlibrary import OpenLibraryClient

console = Console()


def _build_client() -> OpenLibraryClient:
    settings = load_settings()
    return OpenLibraryClient(
        CatalogHttpClient(timeout=settings.http_timeout),
        base_url=settings.open_library_base_url,
    )


@click.command("lookup")
@click.argument("isbn")
def lookup(isbn: str) -> None:
    """Look up an ISBN on Open Library."""
    client = _build_client()
    try:
        metadata = client.find_by_isbn(isbn)
    except (InvalidIsbnError, MetadataNotFoundError, ExternalServiceError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    console.print(metadata_detail(metadata))

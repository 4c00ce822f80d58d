# ABOUTME: CLI package for bookcatalog, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from bookcatalog.cli.commands import (
    delete_cmd,
    import_cmd,
    info_cmd,
    lookup_cmd,
    search_cmd,
    serve_cmd,
)


@click.group()
@click.version_option(package_name="bookcatalog")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """bookcatalog - a book catalog with Open Library lookups."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


cli.add_command(import_cmd.import_command)
cli.add_command(info_cmd.info)
cli.add_command(search_cmd.search)
cli.add_command(delete_cmd.delete)
cli.add_command(lookup_cmd.lookup)
cli.add_command(serve_cmd.serve)

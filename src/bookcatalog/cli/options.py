# ABOUTME: Shared Click options for bookcatalog CLI commands.
# ABOUTME: Provides the --db flag and resolves it against the configured default.

from pathlib import Path

import click

from bookcatalog.config import load_settings

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to catalog database (default: $BOOKCATALOG_DB or ~/.bookcatalog/catalog.db)",
)


def resolve_db_path(db_path: Path | None) -> Path:
    """Return the --db value, or the database path from settings."""
    return db_path or load_settings().db_path

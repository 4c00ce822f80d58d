# ABOUTME: The `bookcatalog serve` command for running the HTTP API.
# ABOUTME: Builds the FastAPI app from settings and hands it to uvicorn.

from dataclasses import replace
from pathlib import Path

import click
import uvicorn

from bookcatalog.api.app import create_app
from bookcatalog.cli.options import db_option
from bookcatalog.config import load_settings


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", type=int, default=8000, show_default=True, help="Port to listen on.")
@db_option
def serve(host: str, port: int, db_path: Path | None) -> None:
    """Serve the catalog HTTP API."""
    settings = load_settings()
    if db_path is not None:
        settings = replace(settings, db_path=db_path)

    uvicorn.run(create_app(settings), host=host, port=port)

# ABOUTME: Runtime configuration for bookcatalog, read from the environment.
# ABOUTME: Loads a .env file when present and exposes a frozen Settings object.

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_OPEN_LIBRARY_BASE_URL = "https://openlibrary.org/isbn/"
DEFAULT_DB_PATH = Path.home() / ".bookcatalog" / "catalog.db"
DEFAULT_HTTP_TIMEOUT = 5.0


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        open_library_base_url: Prefix for ISBN lookups; the normalized ISBN
            and ".json" are appended to it.
        db_path: SQLite database file.
        http_timeout: Connect and read timeout for outbound calls, in seconds.
    """

    open_library_base_url: str = DEFAULT_OPEN_LIBRARY_BASE_URL
    db_path: Path = DEFAULT_DB_PATH
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def load_settings() -> Settings:
    """Build Settings from environment variables (and .env, if any)."""
    load_dotenv()

    db_env = os.getenv("BOOKCATALOG_DB")
    return Settings(
        open_library_base_url=os.getenv("OPEN_LIBRARY_BASE_URL", DEFAULT_OPEN_LIBRARY_BASE_URL),
        db_path=Path(db_env).expanduser() if db_env else DEFAULT_DB_PATH,
        http_timeout=float(os.getenv("BOOKCATALOG_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))),
    )

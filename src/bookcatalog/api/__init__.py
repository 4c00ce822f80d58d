# ABOUTME: HTTP API package for the book catalog, built on FastAPI.
# ABOUTME: Exports the application factory and the error-handler registration.

from bookcatalog.api.app import create_app
from bookcatalog.api.errors import ERROR_MAPPING, register_error_handlers

__all__ = ["ERROR_MAPPING", "create_app", "register_error_handlers"]

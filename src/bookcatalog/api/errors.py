# ABOUTME: Maps domain exceptions to HTTP status codes and the shared error body.
# ABOUTME: Every error path answers with {status, error, message, path, timestamp}.

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookcatalog.api.schemas import ErrorResponse
from bookcatalog.core.catalog_service import BadRequestError, NotFoundError
from bookcatalog.core.importer import FileImportError
from bookcatalog.metadata.http import ExternalServiceError, MetadataNotFoundError
from bookcatalog.metadata.isbn import InvalidIsbnError

logger = logging.getLogger(__name__)

ERROR_MAPPING: dict[type[Exception], tuple[int, str]] = {
    InvalidIsbnError: (status.HTTP_400_BAD_REQUEST, "ISBN_INVALIDO"),
    MetadataNotFoundError: (status.HTTP_400_BAD_REQUEST, "ISBN_NAO_ENCONTRADO"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    BadRequestError: (status.HTTP_400_BAD_REQUEST, "BAD_REQUEST"),
    FileImportError: (status.HTTP_400_BAD_REQUEST, "READ_FILE_ERROR"),
    ExternalServiceError: (status.HTTP_502_BAD_GATEWAY, "EXTERNAL_SERVICE_ERROR"),
}


def build_error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    """Build the error body for the current request."""
    body = ErrorResponse(
        status=status_code,
        error=code,
        message=message,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    status_code, code = next(
        ERROR_MAPPING[cls] for cls in type(exc).__mro__ if cls in ERROR_MAPPING
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return build_error_response(request, status_code, code, str(exc))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return build_error_response(
        request, status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", "; ".join(messages) or "Invalid request",
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed unexpectedly", request.method, request.url.path, exc_info=exc)
    return build_error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", "Unexpected error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install one handler per mapped exception, request validation and a 500 fallback."""
    for exc_class in ERROR_MAPPING:
        app.add_exception_handler(exc_class, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

# ABOUTME: Open Library ISBN lookup client.
# ABOUTME: Validates the ISBN, fetches {base_url}{isbn}.json and parses the edition record.

import logging
import time

from bookcatalog.config import DEFAULT_OPEN_LIBRARY_BASE_URL
from bookcatalog.metadata.http import (
    CatalogHttpClient,
    ExternalServiceError,
    HttpClient,
    MetadataNotFoundError,
)
from bookcatalog.metadata.isbn import validate_isbn
from bookcatalog.metadata.openlibrary_parser import parse_isbn_response
from bookcatalog.metadata.types import BookMetadata

logger = logging.getLogger(__name__)


class OpenLibraryClient:
    """Looks up edition metadata on Open Library by ISBN.

    Uses a dependency-injected HttpClient for testability; the default is a
    CatalogHttpClient with 5 second connect and read timeouts.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        base_url: str = DEFAULT_OPEN_LIBRARY_BASE_URL,
    ) -> None:
        self._http = http_client or CatalogHttpClient()
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "openlibrary"

    def find_by_isbn(self, isbn: str | None) -> BookMetadata:
        """Fetch metadata for one ISBN.

        Raises:
            InvalidIsbnError: If the ISBN fails validation (no request is made).
            MetadataNotFoundError: If Open Library has no edition for the ISBN.
            ExternalServiceError: On any other HTTP, transport, or JSON failure.
        """
        logger.info("[OPEN_LIBRARY] start | isbn=%s", isbn)
        start = time.monotonic()
        try:
            valid_isbn = validate_isbn(isbn)
            url = f"{self._base_url}{valid_isbn}.json"
            try:
                data = self._http.get(url)
            except MetadataNotFoundError:
                logger.warning("[OPEN_LIBRARY] not found | isbn=%s", valid_isbn)
                raise MetadataNotFoundError("ISBN not found on OpenLibrary") from None
            except ExternalServiceError as exc:
                logger.error("[OPEN_LIBRARY] failure | isbn=%s | %s", valid_isbn, exc)
                raise

            metadata = parse_isbn_response(data, valid_isbn)
            logger.info("[OPEN_LIBRARY] found | isbn=%s | title=%s", valid_isbn, metadata.title)
            return metadata
        finally:
            elapsed_ms = (time.monotonic() - start) * 1000
            logger.info("[OPEN_LIBRARY] end | isbn=%s | %.0f ms", isbn, elapsed_ms)

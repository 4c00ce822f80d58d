# ABOUTME: HTTP client abstraction for metadata provider API calls.
# ABOUTME: Maps HTTP status and transport failures to domain errors; injectable transport for tests.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


class MetadataNotFoundError(Exception):
    """Raised when the metadata service has no record for the requested key (HTTP 404)."""


class ExternalServiceError(Exception):
    """Raised when the metadata service fails, answers with an unexpected status, or sends bad JSON."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against metadata APIs."""

    def get(self, url: str) -> dict[str, Any]: ...


class CatalogHttpClient:
    """HTTP client for metadata lookups.

    Every call opens its own httpx.Client inside a ``with`` block, so the
    underlying connection is released on every exit path: success, each
    error status, and unexpected exceptions alike.
    """

    def __init__(
        self,
        *,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout, connect=timeout, read=timeout)
        self._transport = transport

    def _open(self) -> httpx.Client:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "bookcatalog/0.1.0", "Accept": "application/json"},
            "timeout": self._timeout,
        }
        if self._transport is not None:
            client_kwargs["transport"] = self._transport
        return httpx.Client(**client_kwargs)

    def get(self, url: str) -> dict[str, Any]:
        """Send a GET request and return the decoded JSON object.

        Raises:
            MetadataNotFoundError: On HTTP 404.
            ExternalServiceError: On any other non-200 status, on transport
                errors, and when the body is not a JSON object.
        """
        with self._open() as client:
            try:
                response = client.get(url)
            except httpx.HTTPError as exc:
                raise ExternalServiceError(f"Request failed: {url}: {exc}") from exc

            if response.status_code == 404:
                raise MetadataNotFoundError(f"Not found: {url}")

            if response.status_code != 200:
                raise ExternalServiceError(
                    f"HTTP {response.status_code} from {url}",
                    status_code=response.status_code,
                )

            try:
                data = response.json()
            except ValueError as exc:
                raise ExternalServiceError(f"Malformed JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise ExternalServiceError(f"Expected a JSON object from {url}")
        return data

# ABOUTME: Unit tests for OpenLibraryClient.find_by_isbn.
# ABOUTME: Uses a fake httpx transport to check URLs, error mapping, and logging.

import logging
from datetime import date

import httpx
import pytest

from bookcatalog.metadata.http import CatalogHttpClient, ExternalServiceError, MetadataNotFoundError
from bookcatalog.metadata.isbn import InvalidIsbnError
from bookcatalog.metadata.openlibrary import OpenLibraryClient
from tests.fixtures.http_transport import FakeTransport
from tests.fixtures.openlibrary_responses import ISBN_RESPONSE, ISBN_RESPONSE_NO_DATE


def _client(transport: FakeTransport, **kwargs) -> OpenLibraryClient:
    return OpenLibraryClient(CatalogHttpClient(transport=transport), **kwargs)


class TestFindByIsbn:
    """Tests for a successful lookup."""

    def test_returns_metadata(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(200, json=ISBN_RESPONSE)])
        meta = _client(transport).find_by_isbn("9780156001311")
        assert meta.title == "The Name of the Rose"
        assert meta.publishers == ["Harcourt"]
        assert meta.publication_date == date(1983, 10, 1)

    def test_requests_isbn_json_url(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(200, json=ISBN_RESPONSE)])
        _client(transport).find_by_isbn("9780156001311")
        assert str(transport.requests[0].url) == "https://openlibrary.org/isbn/9780156001311.json"

    def test_hyphenated_isbn_is_normalized_in_url(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(200, json=ISBN_RESPONSE)])
        meta = _client(transport).find_by_isbn("978-0-15-600131-1")
        assert transport.requests[0].url.path == "/isbn/9780156001311.json"
        assert meta.isbn == "9780156001311"

    def test_custom_base_url(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(200, json=ISBN_RESPONSE)])
        _client(transport, base_url="http://mirror.test/books/").find_by_isbn("0156001314")
        assert str(transport.requests[0].url) == "http://mirror.test/books/0156001314.json"

    def test_missing_publish_date(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(200, json=ISBN_RESPONSE_NO_DATE)])
        meta = _client(transport).find_by_isbn("0306406152")
        assert meta.publication_date is None

    def test_name(self) -> None:
        assert OpenLibraryClient(CatalogHttpClient()).name == "openlibrary"


class TestFindByIsbnErrors:
    """Tests for the failure paths."""

    def test_invalid_isbn_makes_no_request(self) -> None:
        transport = FakeTransport()
        with pytest.raises(InvalidIsbnError):
            _client(transport).find_by_isbn("9780306406158")
        assert transport.call_count == 0

    def test_missing_isbn(self) -> None:
        transport = FakeTransport()
        with pytest.raises(InvalidIsbnError, match="not provided"):
            _client(transport).find_by_isbn(None)

    def test_404_raises_not_found(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(404, json={"error": "notfound"})])
        with pytest.raises(MetadataNotFoundError, match="ISBN not found on OpenLibrary"):
            _client(transport).find_by_isbn("9780306406157")

    def test_server_error_raises_external_error(self) -> None:
        transport = FakeTransport(responses=[httpx.Response(500)])
        with pytest.raises(ExternalServiceError) as exc_info:
            _client(transport).find_by_isbn("9780306406157")
        assert exc_info.value.status_code == 500

    def test_malformed_body_raises_external_error(self) -> None:
        response = httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})
        with pytest.raises(ExternalServiceError):
            _client(FakeTransport(responses=[response])).find_by_isbn("9780306406157")


class TestLookupLogging:
    """Each lookup logs its start, outcome, and elapsed time."""

    def test_success_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = FakeTransport(responses=[httpx.Response(200, json=ISBN_RESPONSE)])
        with caplog.at_level(logging.INFO, logger="bookcatalog.metadata.openlibrary"):
            _client(transport).find_by_isbn("9780156001311")
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("[OPEN_LIBRARY] start") for m in messages)
        assert any(m.startswith("[OPEN_LIBRARY] found") for m in messages)
        assert any(m.startswith("[OPEN_LIBRARY] end") and m.endswith("ms") for m in messages)

    def test_not_found_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = FakeTransport(responses=[httpx.Response(404)])
        with caplog.at_level(logging.INFO, logger="bookcatalog.metadata.openlibrary"):
            with pytest.raises(MetadataNotFoundError):
                _client(transport).find_by_isbn("9780306406157")
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings and "not found" in warnings[0].getMessage()
        assert any(r.getMessage().startswith("[OPEN_LIBRARY] end") for r in caplog.records)

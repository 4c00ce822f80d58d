# ABOUTME: FastAPI application exposing the book catalog and the Open Library lookup.
# ABOUTME: Builds the app from Settings; each request gets its own SQLite connection.

import logging
from collections.abc import Iterator

from fastapi import Depends, FastAPI, File, Path, Query, Request, Response, UploadFile, status

from bookcatalog.api.errors import register_error_handlers
from bookcatalog.api.schemas import BookPayload, BookResponse, ImportReportResponse
from bookcatalog.config import Settings, load_settings
from bookcatalog.core.catalog_service import BookCatalogService
from bookcatalog.core.importer import UploadedFile, import_file
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.db.connection import catalog_connection
from bookcatalog.metadata.http import CatalogHttpClient
from bookcatalog.metadata.openlibrary import OpenLibraryClient

logger = logging.getLogger(__name__)

# Book ids are SQLite INTEGER primary keys.
MAX_BOOK_ID = 2**63 - 1


def get_service(request: Request) -> Iterator[BookCatalogService]:
    """Yield a catalog service bound to a connection that closes after the request."""
    settings: Settings = request.app.state.settings
    with catalog_connection(settings.db_path) as conn:
        yield BookCatalogService(CatalogStore(conn))


def get_metadata_client(request: Request) -> OpenLibraryClient:
    return request.app.state.metadata_client


def create_app(
    settings: Settings | None = None,
    metadata_client: OpenLibraryClient | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        settings: Runtime settings; read from the environment when omitted.
        metadata_client: Open Library client; built from settings when omitted.
    """
    settings = settings or load_settings()
    if metadata_client is None:
        metadata_client = OpenLibraryClient(
            CatalogHttpClient(timeout=settings.http_timeout),
            base_url=settings.open_library_base_url,
        )

    app = FastAPI(title="Book Catalog API", version="0.1.0")
    app.state.settings = settings
    app.state.metadata_client = metadata_client
    register_error_handlers(app)
    logger.info("Catalog API using database %s", settings.db_path)

    @app.get("/book/{book_id}", response_model=BookResponse)
    def get_book(
        book_id: int = Path(le=MAX_BOOK_ID),
        service: BookCatalogService = Depends(get_service),
    ):
        return BookResponse.from_view(service.find_by_id(book_id))

    @app.get("/book", response_model=list[BookResponse])
    def search_books(
        book_id: int | None = Query(default=None, alias="id", le=MAX_BOOK_ID),
        isbn: str | None = None,
        title: str | None = None,
        author: str | None = None,
        publisher: str | None = None,
        publication_date: str | None = Query(default=None, alias="publicationDate"),
        service: BookCatalogService = Depends(get_service),
    ):
        views = service.find_by_parameters(
            book_id=book_id,
            isbn=isbn,
            title=title,
            author=author,
            publisher=publisher,
            publication_date=publication_date,
        )
        return [BookResponse.from_view(view) for view in views]

    @app.post("/book", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
    def create_or_update_book(
        payload: BookPayload, service: BookCatalogService = Depends(get_service),
    ):
        return BookResponse.from_view(service.create_or_update(payload.to_input()))

    @app.delete("/book/{book_id}")
    def delete_book(
        book_id: int = Path(le=MAX_BOOK_ID),
        service: BookCatalogService = Depends(get_service),
    ):
        service.delete_by_id(book_id)
        return Response(status_code=status.HTTP_200_OK)

    @app.post("/book/import", response_model=ImportReportResponse)
    def import_books(
        file: UploadFile | None = File(default=None),
        service: BookCatalogService = Depends(get_service),
    ):
        upload = None
        if file is not None:
            upload = UploadedFile(
                filename=file.filename, stream=file.file, content_type=file.content_type,
            )
        return ImportReportResponse.from_report(import_file(upload, service))

    @app.get("/open-library", response_model=BookResponse)
    def lookup_isbn(
        isbn: str | None = None,
        client: OpenLibraryClient = Depends(get_metadata_client),
    ):
        return BookResponse.from_metadata(client.find_by_isbn(isbn))

    return app

# ABOUTME: Core business logic: catalog service, relationship resolution, and CSV import.
# ABOUTME: Exports the service, the import entry point, and the records they exchange.

from bookcatalog.core.catalog_service import BadRequestError, BookCatalogService, NotFoundError
from bookcatalog.core.importer import (
    FileImportError,
    ImportLineError,
    ImportReport,
    UploadedFile,
    import_file,
)
from bookcatalog.core.types import BookInput, BookView, NamedRef

__all__ = [
    "BadRequestError",
    "BookCatalogService",
    "BookInput",
    "BookView",
    "FileImportError",
    "ImportLineError",
    "ImportReport",
    "NamedRef",
    "NotFoundError",
    "UploadedFile",
    "import_file",
]

# ABOUTME: CSV import pipeline for cataloging books in bulk.
# ABOUTME: Validates the upload, parses each line, and reports per-line successes and failures.

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO

from bookcatalog.core.catalog_service import BadRequestError, BookCatalogService, parse_iso_date
from bookcatalog.core.types import BookInput, BookView
from bookcatalog.metadata.isbn import InvalidIsbnError

logger = logging.getLogger(__name__)

_CSV_CONTENT_TYPES = {"text/csv", "application/csv", "application/vnd.ms-excel"}
_MIN_COLUMNS = 5


class FileImportError(Exception):
    """Raised when an uploaded file is missing, is not a CSV, is empty, or cannot be read."""


class LineParseError(ValueError):
    """Raised when a CSV line does not follow the isbn;title;authors;publishers;date layout."""


@dataclass
class UploadedFile:
    """An uploaded file: the declared name and type plus a binary stream."""

    filename: str | None
    stream: BinaryIO
    content_type: str | None = None


@dataclass(frozen=True)
class ImportLineError:
    """One rejected line of an import."""

    line_number: int
    line: str
    message: str


@dataclass(frozen=True)
class ImportReport:
    """Summary of an import: books stored, in file order, and rejected lines.

    Built once when the import finishes and never changed afterwards.
    """

    books: tuple[BookView, ...] = ()
    errors: tuple[ImportLineError, ...] = ()


def _split_names(value: str) -> list[str]:
    if not value.strip():
        return []
    return [name.strip() for name in value.split(",")]


def parse_line(line: str) -> BookInput:
    """Convert one CSV line into a BookInput.

    Layout: ``isbn;title;author1,author2;publisher1,publisher2;yyyy-MM-dd``.
    Columns past the fifth are ignored; an empty date column means no date.

    Raises:
        LineParseError: If there are fewer than five columns or the date is
            not a valid yyyy-MM-dd value.
    """
    columns = line.split(";")
    if len(columns) < _MIN_COLUMNS:
        raise LineParseError(
            f"Invalid layout: expected at least {_MIN_COLUMNS} columns "
            f"separated by ';', found {len(columns)}"
        )

    raw_date = columns[4].strip()
    publication_date = None
    if raw_date:
        try:
            publication_date = parse_iso_date(raw_date)
        except ValueError as exc:
            raise LineParseError(str(exc)) from exc

    return BookInput(
        isbn=columns[0].strip(),
        title=columns[1].strip(),
        authors=_split_names(columns[2]),
        publishers=_split_names(columns[3]),
        publication_date=publication_date,
    )


def _is_csv(upload: UploadedFile) -> bool:
    if upload.filename and upload.filename.strip().lower().endswith(".csv"):
        return True
    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    return content_type in _CSV_CONTENT_TYPES


def _read_text(upload: UploadedFile) -> str:
    try:
        content = upload.stream.read()
    except OSError as exc:
        raise FileImportError(f"Error reading the file: {exc}") from exc

    if not content:
        raise FileImportError("The uploaded file is empty")

    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise FileImportError(f"Error reading the file: not valid UTF-8 ({exc})") from exc


def import_file(upload: UploadedFile | None, service: BookCatalogService) -> ImportReport:
    """Import books from an uploaded CSV file.

    Each non-blank line is parsed and handed to
    ``service.create_or_update``. A line that is blank, malformed, or
    rejected by the service is recorded in the report and skipped; it never
    stops the rest of the file.

    Args:
        upload: The uploaded file, or None when the request carried none.
        service: Catalog service used to store each book.

    Returns:
        ImportReport with the stored books and the per-line errors.

    Raises:
        FileImportError: If the file is missing, not a CSV, empty, or unreadable.
    """
    if upload is None:
        raise FileImportError("No file was provided")

    if not _is_csv(upload):
        raise FileImportError("The uploaded file is not a CSV")

    text = _read_text(upload)
    books: list[BookView] = []
    errors: list[ImportLineError] = []

    # newline=None folds \r\n and \r into \n, like a line reader would.
    for line_number, raw in enumerate(io.StringIO(text, newline=None), start=1):
        line = raw.rstrip("\n")

        if not line.strip():
            errors.append(ImportLineError(
                line_number, line,
                f"Line {line_number} is empty and contains no information.",
            ))
            continue

        try:
            book = service.create_or_update(parse_line(line))
        except (LineParseError, InvalidIsbnError, BadRequestError) as exc:
            errors.append(ImportLineError(line_number, line, str(exc)))
            continue
        except Exception as exc:
            # Storage failures are reported per line too; the rest of the file still imports.
            logger.warning("Line %d of %s failed: %r", line_number, upload.filename or "upload", exc)
            errors.append(ImportLineError(line_number, line, str(exc) or type(exc).__name__))
            continue

        books.append(book)

    logger.info(
        "Imported %d book(s) from %s, %d line(s) rejected",
        len(books), upload.filename or "upload", len(errors),
    )
    return ImportReport(books=tuple(books), errors=tuple(errors))

# ABOUTME: Pydantic request and response models for the HTTP API.
# ABOUTME: Camel-case wire names (publicationDate, lineNumber, lineContent) are aliases over snake-case fields.

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from bookcatalog.core.importer import ImportReport
from bookcatalog.core.types import BookInput, BookView
from bookcatalog.metadata.types import BookMetadata


class NamedPayload(BaseModel):
    """An author or publisher reference in a request body; only the name is used."""

    id: int | None = None
    name: str


class BookPayload(BaseModel):
    """Body of ``POST /book``.

    ISBN and title are optional here so that a missing value reaches the
    service and is reported as ``BAD_REQUEST`` with the service's message.
    """

    model_config = ConfigDict(populate_by_name=True)

    isbn: str | None = None
    title: str | None = None
    authors: list[NamedPayload] = Field(default_factory=list)
    publishers: list[NamedPayload] = Field(default_factory=list)
    publication_date: date | None = Field(default=None, alias="publicationDate")

    def to_input(self) -> BookInput:
        return BookInput(
            isbn=self.isbn,
            title=self.title,
            authors=[a.name for a in self.authors],
            publishers=[p.name for p in self.publishers],
            publication_date=self.publication_date,
        )


class NamedResponse(BaseModel):
    id: int | None = None
    name: str


class BookResponse(BaseModel):
    """A book as returned by the catalog endpoints and the OpenLibrary lookup."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    isbn: str
    title: str | None = None
    authors: list[NamedResponse] = Field(default_factory=list)
    publishers: list[NamedResponse] = Field(default_factory=list)
    publication_date: date | None = Field(default=None, alias="publicationDate")

    @classmethod
    def from_view(cls, view: BookView) -> "BookResponse":
        return cls(
            id=view.id,
            isbn=view.isbn,
            title=view.title,
            authors=[NamedResponse(id=a.id, name=a.name) for a in view.authors],
            publishers=[NamedResponse(id=p.id, name=p.name) for p in view.publishers],
            publication_date=view.publication_date,
        )

    @classmethod
    def from_metadata(cls, metadata: BookMetadata) -> "BookResponse":
        # External records carry no catalog ids and no author names.
        return cls(
            isbn=metadata.isbn,
            title=metadata.title,
            publishers=[NamedResponse(name=name) for name in metadata.publishers],
            publication_date=metadata.publication_date,
        )


class ImportErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    line_number: int = Field(alias="lineNumber")
    line: str = Field(alias="lineContent")
    message: str


class ImportReportResponse(BaseModel):
    books: list[BookResponse] = Field(default_factory=list)
    errors: list[ImportErrorResponse] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: ImportReport) -> "ImportReportResponse":
        return cls(
            books=[BookResponse.from_view(view) for view in report.books],
            errors=[
                ImportErrorResponse(line_number=e.line_number, line=e.line, message=e.message)
                for e in report.errors
            ],
        )


class ErrorResponse(BaseModel):
    """Body of every error response."""

    status: int
    error: str
    message: str
    path: str
    timestamp: datetime

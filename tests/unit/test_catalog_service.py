# ABOUTME: Unit tests for BookCatalogService.
# ABOUTME: Exercises create-or-update, lookups, deletion, and parameter search over a temporary catalog.

from datetime import date
from unittest.mock import MagicMock

import pytest

from bookcatalog.core.catalog_service import (
    BadRequestError,
    BookCatalogService,
    NotFoundError,
    parse_iso_date,
)
from bookcatalog.core.types import BookInput
from bookcatalog.db.catalog import CatalogStore
from bookcatalog.metadata.isbn import InvalidIsbnError


class TestCreateOrUpdate:
    """Tests for BookCatalogService.create_or_update."""

    def test_creates_book(self, service: BookCatalogService, rose_input: BookInput) -> None:
        view = service.create_or_update(rose_input)
        assert view.id is not None
        assert view.isbn == "9780156001311"
        assert view.title == "The Name of the Rose"
        assert [a.name for a in view.authors] == ["Umberto Eco"]
        assert [p.name for p in view.publishers] == ["Harcourt"]
        assert view.publication_date == date(1983, 10, 1)

    def test_isbn_stored_normalized(
        self, service: BookCatalogService, store: CatalogStore, rose_input: BookInput,
    ) -> None:
        service.create_or_update(rose_input)
        assert store.get_book_by_isbn("9780156001311") is not None

    def test_same_isbn_updates_in_place(
        self, service: BookCatalogService, store: CatalogStore, rose_input: BookInput,
    ) -> None:
        first = service.create_or_update(rose_input)
        second = service.create_or_update(BookInput(
            isbn="9780156001311", title="Il nome della rosa", publication_date=date(1980, 1, 1),
        ))
        assert second.id == first.id
        assert second.title == "Il nome della rosa"
        assert second.publication_date == date(1980, 1, 1)
        assert len(store.list_books()) == 1

    def test_update_overwrites_date_with_none(
        self, service: BookCatalogService, rose_input: BookInput,
    ) -> None:
        service.create_or_update(rose_input)
        view = service.create_or_update(BookInput(isbn=rose_input.isbn, title=rose_input.title))
        assert view.publication_date is None

    def test_update_keeps_existing_associations(
        self, service: BookCatalogService, rose_input: BookInput,
    ) -> None:
        service.create_or_update(rose_input)
        view = service.create_or_update(BookInput(
            isbn=rose_input.isbn, title=rose_input.title, authors=["William Weaver"],
        ))
        assert [a.name for a in view.authors] == ["Umberto Eco", "William Weaver"]
        assert [p.name for p in view.publishers] == ["Harcourt"]

    def test_repeat_names_not_duplicated(
        self, service: BookCatalogService, store: CatalogStore, rose_input: BookInput,
    ) -> None:
        service.create_or_update(rose_input)
        view = service.create_or_update(rose_input)
        assert len(view.authors) == 1
        assert store.get_author_by_name("Umberto Eco").id == view.authors[0].id

    def test_authors_shared_between_books(
        self, service: BookCatalogService, rose_input: BookInput,
    ) -> None:
        rose = service.create_or_update(rose_input)
        other = service.create_or_update(BookInput(
            isbn="0306406152", title="Foucault's Pendulum", authors=["Umberto Eco"],
        ))
        assert other.authors[0].id == rose.authors[0].id

    @pytest.mark.parametrize(
        ("isbn", "title"),
        [(None, "Title"), ("", "Title"), ("0306406152", None), ("0306406152", "   ")],
    )
    def test_missing_isbn_or_title(
        self, service: BookCatalogService, isbn: str | None, title: str | None,
    ) -> None:
        with pytest.raises(BadRequestError, match="ISBN and title are required"):
            service.create_or_update(BookInput(isbn=isbn, title=title))

    def test_invalid_isbn(self, service: BookCatalogService, store: CatalogStore) -> None:
        with pytest.raises(InvalidIsbnError):
            service.create_or_update(BookInput(isbn="9780306406158", title="Bad checksum"))
        assert store.list_books() == []


class TestFindById:
    """Tests for BookCatalogService.find_by_id."""

    def test_found(self, service: BookCatalogService, rose_input: BookInput) -> None:
        created = service.create_or_update(rose_input)
        assert service.find_by_id(created.id) == created

    def test_missing(self, service: BookCatalogService) -> None:
        with pytest.raises(NotFoundError, match=r"Book not found with ID \[42\]"):
            service.find_by_id(42)


class TestDeleteById:
    """Tests for BookCatalogService.delete_by_id."""

    def test_deletes_book(self, service: BookCatalogService, rose_input: BookInput) -> None:
        created = service.create_or_update(rose_input)
        service.delete_by_id(created.id)
        with pytest.raises(NotFoundError):
            service.find_by_id(created.id)

    def test_authors_and_publishers_kept(
        self, service: BookCatalogService, store: CatalogStore, rose_input: BookInput,
    ) -> None:
        created = service.create_or_update(rose_input)
        service.delete_by_id(created.id)
        assert store.get_author_by_name("Umberto Eco") is not None
        assert store.get_publisher_by_name("Harcourt") is not None

    def test_missing_makes_no_writes(self) -> None:
        store = MagicMock(spec=CatalogStore)
        store.get_book.return_value = None
        service = BookCatalogService(store)

        with pytest.raises(NotFoundError):
            service.delete_by_id(7)

        store.get_book.assert_called_once_with(7)
        store.clear_associations.assert_not_called()
        store.delete_book.assert_not_called()


class TestFindByParameters:
    """Tests for BookCatalogService.find_by_parameters."""

    @pytest.fixture()
    def seeded(self, service: BookCatalogService, rose_input: BookInput) -> BookCatalogService:
        service.create_or_update(rose_input)
        service.create_or_update(BookInput(
            isbn="9780131103627",
            title="The C Programming Language",
            authors=["Brian Kernighan", "Dennis Ritchie"],
            publishers=["Prentice Hall"],
            publication_date=date(1988, 4, 1),
        ))
        return service

    def test_no_filters_returns_all(self, seeded: BookCatalogService) -> None:
        assert len(seeded.find_by_parameters()) == 2

    def test_blank_filters_ignored(self, seeded: BookCatalogService) -> None:
        assert len(seeded.find_by_parameters(title="  ", author="", publication_date="")) == 2

    def test_title_substring(self, seeded: BookCatalogService) -> None:
        (view,) = seeded.find_by_parameters(title="rose")
        assert view.title == "The Name of the Rose"

    def test_hyphenated_isbn(self, seeded: BookCatalogService) -> None:
        (view,) = seeded.find_by_parameters(isbn="978-0-13-110362-7")
        assert view.title == "The C Programming Language"

    def test_date_string(self, seeded: BookCatalogService) -> None:
        (view,) = seeded.find_by_parameters(publication_date="1988-04-01")
        assert view.isbn == "9780131103627"

    def test_date_object(self, seeded: BookCatalogService) -> None:
        (view,) = seeded.find_by_parameters(publication_date=date(1983, 10, 1))
        assert view.isbn == "9780156001311"

    def test_bad_date(self, seeded: BookCatalogService) -> None:
        with pytest.raises(BadRequestError, match="yyyy-MM-dd"):
            seeded.find_by_parameters(publication_date="01/04/1988")

    def test_nothing_found(self, seeded: BookCatalogService) -> None:
        with pytest.raises(NotFoundError, match="No results found"):
            seeded.find_by_parameters(author="Tolkien")

    def test_empty_catalog(self, service: BookCatalogService) -> None:
        with pytest.raises(NotFoundError):
            service.find_by_parameters()


class TestParseIsoDate:
    """Tests for parse_iso_date."""

    def test_valid(self) -> None:
        assert parse_iso_date("2020-02-29") == date(2020, 2, 29)

    @pytest.mark.parametrize(
        "value",
        ["2020-2-29", "29/02/2020", "20200229", "2020-02-29T00:00", "\u0662\u0660\u0662\u0660-\u0660\u0662-\u0662\u0669"],
    )
    def test_wrong_shape(self, value: str) -> None:
        with pytest.raises(ValueError, match="yyyy-MM-dd"):
            parse_iso_date(value)

    def test_impossible_date(self) -> None:
        with pytest.raises(ValueError, match="Invalid date"):
            parse_iso_date("2021-02-29")

"""Consolidated data layer tests.

End-to-end behaviour of the record store and the entity repositories against
a real SQLite database:
- insert / select / pattern search / delete round trip for a book
- case-insensitive substring search and literal wildcards
- update and delete semantics for missing rows and empty patches
- concurrent updates touching disjoint attributes
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlmodel import SQLModel

from src.paperwings.core.services import (
    DbConnectionService,
    InvalidArgumentError,
    MatchMode,
    RecordStore,
)
from src.paperwings.core.types.tables import TableName
from src.paperwings.entities import BookRepository
from src.paperwings.runtime.config.config_data import DatabaseConfig


class TestBookLifecycle:
    """A book travels through every record store operation."""

    def test_dune_round_trip(self, record_store: RecordStore):
        inserted = record_store.insert(
            TableName.BOOK, {"title": "Dune", "author": "Herbert"}
        )
        assert inserted.affected_rows == 1
        assert isinstance(inserted.inserted_id, int)

        rows = record_store.select_by_equality(TableName.BOOK, "id", inserted.inserted_id)
        assert len(rows) == 1
        assert rows[0]["title"] == "Dune"
        assert rows[0]["author"] == "Herbert"

        matches = record_store.select_by_pattern(TableName.BOOK, "author", "Herb")
        assert [row["id"] for row in matches] == [inserted.inserted_id]

        deleted = record_store.delete(TableName.BOOK, "id", inserted.inserted_id)
        assert deleted.affected_rows == 1

        assert record_store.select_by_equality(TableName.BOOK, "id", inserted.inserted_id) == []

    def test_insert_stores_only_non_null_attributes(self, record_store: RecordStore):
        inserted = record_store.insert(
            TableName.BOOK,
            {"title": "Emma", "author": None, "language": "English"},
        )

        row = record_store.select_by_equality(TableName.BOOK, "id", inserted.inserted_id)[0]
        assert row["title"] == "Emma"
        assert row["language"] == "English"
        assert row["author"] is None  # column default, not the caller's None


class TestPatternSearch:
    """LIKE searches match substrings and never treat input as wildcards."""

    @pytest.fixture
    def books(self, book_repository: BookRepository):
        for title, author in [
            ("The Hobbit", "J.R.R. Tolkien"),
            ("The Silmarillion", "Christopher TOLKIEN"),
            ("Dune", "Frank Herbert"),
            ("100% Wolf", "Jayne Lyons"),
            ("snake_case", "A. Programmer"),
        ]:
            book_repository.add({"title": title, "author": author})

    def test_author_search_is_case_insensitive(self, books, book_repository: BookRepository):
        rows = book_repository.search_by_author("Tolkien")

        assert {row["title"] for row in rows} == {"The Hobbit", "The Silmarillion"}

    def test_percent_matches_literally(self, books, book_repository: BookRepository):
        rows = book_repository.search_by_title("100%")

        assert [row["title"] for row in rows] == ["100% Wolf"]

    def test_percent_alone_is_not_a_wildcard(self, books, book_repository: BookRepository):
        assert [row["title"] for row in book_repository.search_by_title("%")] == [
            "100% Wolf"
        ]

    def test_underscore_matches_literally(self, books, record_store: RecordStore):
        rows = record_store.select_by_pattern(TableName.BOOK, "title", "e_c")

        assert [row["title"] for row in rows] == ["snake_case"]

    def test_prefix_search(self, books, record_store: RecordStore):
        rows = record_store.select_by_pattern(
            TableName.BOOK, "title", "The", MatchMode.PREFIX
        )

        assert {row["title"] for row in rows} == {"The Hobbit", "The Silmarillion"}


class TestWriteSemantics:
    def test_delete_missing_row_reports_zero(self, record_store: RecordStore):
        result = record_store.delete(TableName.BOOK, "id", 999)

        assert result.affected_rows == 0

    def test_update_missing_row_reports_zero(self, record_store: RecordStore):
        result = record_store.update(TableName.BOOK, "id", 999, {"stock": 3})

        assert result.affected_rows == 0

    def test_update_with_unchanged_values_counts_matched_row(self, record_store: RecordStore):
        book_id = record_store.insert(TableName.BOOK, {"title": "Dune"}).inserted_id

        result = record_store.update(TableName.BOOK, "id", book_id, {"title": "Dune"})

        assert result.affected_rows == 1

    @pytest.mark.parametrize("patch", [{}, {"title": None, "stock": None}])
    def test_empty_patch_is_rejected(self, record_store: RecordStore, patch):
        book_id = record_store.insert(TableName.BOOK, {"title": "Dune"}).inserted_id

        with pytest.raises(InvalidArgumentError):
            record_store.update(TableName.BOOK, "id", book_id, patch)

        row = record_store.select_by_equality(TableName.BOOK, "id", book_id)[0]
        assert row["title"] == "Dune"


class TestConcurrentUpdates:
    def test_disjoint_updates_both_apply(self, tmp_path):
        config = DatabaseConfig(url=f"sqlite:///{tmp_path / 'books.db'}")
        service = DbConnectionService(config)
        SQLModel.metadata.create_all(service.engine)
        store = RecordStore(service)
        book_id = store.insert(TableName.BOOK, {"title": "Dune", "stock": 1}).inserted_id

        patches = [{"price": 9.99}, {"stock": 42}]
        try:
            with ThreadPoolExecutor(max_workers=2) as executor:
                results = list(
                    executor.map(
                        lambda patch: store.update(TableName.BOOK, "id", book_id, patch),
                        patches,
                    )
                )

            assert [result.affected_rows for result in results] == [1, 1]
            row = store.select_by_equality(TableName.BOOK, "id", book_id)[0]
            assert row["price"] == pytest.approx(9.99)
            assert row["stock"] == 42
            assert row["title"] == "Dune"
        finally:
            service.dispose()

"""Book data access."""

from collections.abc import Mapping
from typing import Any

from src.paperwings.core.services.database.errors import InvalidArgumentError
from src.paperwings.core.services.database.record_store import MatchMode, WriteResult
from src.paperwings.core.types.tables import TableName
from src.paperwings.entities._base import EntityRepository, Row

# Order in which search parameters are considered; the first one present wins.
SEARCH_FIELDS = ("title", "author", "language", "category", "isbn")


class BookRepository(EntityRepository):
    """Data-access layer for books."""

    table = TableName.BOOK

    def get_by_id(self, book_id: Any) -> list[Row]:
        return self.get_by_key(book_id)

    def search_by_title(self, title: str) -> list[Row]:
        return self._store.select_by_pattern(self.table, "title", title)

    def search_by_author(self, author: str) -> list[Row]:
        return self._store.select_by_pattern(self.table, "author", author)

    def search_by_language(self, language: str) -> list[Row]:
        return self._store.select_by_pattern(self.table, "language", language)

    def search_by_category(self, category: str) -> list[Row]:
        return self._store.select_by_pattern(self.table, "category", category)

    def search_by_isbn(self, isbn: str) -> list[Row]:
        return self._store.select_by_pattern(self.table, "isbn", isbn, MatchMode.PREFIX)

    def search(self, criteria: Mapping[str, str | None]) -> list[Row]:
        """Search on the first of ``SEARCH_FIELDS`` that has a value in ``criteria``.

        Raises:
            InvalidArgumentError: If none of the search fields is given.
        """
        searches = {
            "title": self.search_by_title,
            "author": self.search_by_author,
            "language": self.search_by_language,
            "category": self.search_by_category,
            "isbn": self.search_by_isbn,
        }
        for field in SEARCH_FIELDS:
            value = criteria.get(field)
            if value:
                return searches[field](value)

        raise InvalidArgumentError(
            f"A search parameter is required: one of {', '.join(SEARCH_FIELDS)}"
        )

    def delete_by_id(self, book_id: Any) -> WriteResult:
        return self.delete_by_key(book_id)

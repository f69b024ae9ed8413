from collections.abc import Mapping
from typing import Any, ClassVar

from src.paperwings.core.services.database.record_store import (
    InsertResult,
    RecordStore,
    WriteResult,
)
from src.paperwings.core.types.tables import TableName

Row = dict[str, Any]


class EntityRepository:
    """Binds the record store to one table.

    Subclasses fix ``table`` and the column identifying a row (``key_column``)
    and expose the subset of operations that makes sense for the entity.
    """

    table: ClassVar[TableName]
    key_column: ClassVar[str] = "id"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def add(self, attributes: Mapping[str, Any]) -> InsertResult:
        return self._store.insert(self.table, attributes)

    def list_all(self) -> list[Row]:
        return self._store.select_all(self.table)

    def get_by_key(self, value: Any) -> list[Row]:
        return self._store.select_by_equality(self.table, self.key_column, value)

    def update(
        self, key_column: str, key_value: Any, patch: Mapping[str, Any]
    ) -> WriteResult:
        return self._store.update(self.table, key_column, key_value, patch)

    def delete_by_key(self, value: Any) -> WriteResult:
        return self._store.delete(self.table, self.key_column, value)


class OwnedEntityRepository(EntityRepository):
    """Repository for rows that belong to a user through their ``uid``."""

    owner_column: ClassVar[str] = "uid"

    def get_by_id(self, item_id: Any) -> list[Row]:
        return self.get_by_key(item_id)

    def get_by_uid(self, uid: str) -> list[Row]:
        return self._store.select_by_equality(self.table, self.owner_column, uid)

    def delete_by_id(self, item_id: Any) -> WriteResult:
        return self.delete_by_key(item_id)

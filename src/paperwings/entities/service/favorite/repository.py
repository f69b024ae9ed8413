"""Favorite data access."""

from typing import Any

from src.paperwings.core.services.database.record_store import WriteResult
from src.paperwings.core.types.tables import TableName
from src.paperwings.entities._base import OwnedEntityRepository


class FavoriteRepository(OwnedEntityRepository):
    """Data-access layer for a user's favorite books."""

    table = TableName.FAVORITE

    def delete_by_uid_and_book(self, uid: str, id_book: Any) -> WriteResult:
        return self._store.delete_matching(self.table, {"uid": uid, "id_book": id_book})

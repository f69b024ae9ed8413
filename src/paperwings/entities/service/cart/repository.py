"""Cart data access."""

from typing import Any

from src.paperwings.core.services.database.record_store import WriteResult
from src.paperwings.core.types.tables import TableName
from src.paperwings.entities._base import OwnedEntityRepository


class CartRepository(OwnedEntityRepository):
    """Data-access layer for cart entries."""

    table = TableName.CART

    def delete_by_uid_and_book(self, uid: str, id_book: Any) -> WriteResult:
        """Remove a book from a user's cart."""
        return self._store.delete_matching(self.table, {"uid": uid, "id_book": id_book})

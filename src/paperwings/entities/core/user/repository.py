"""User data access."""

from typing import Any

from src.paperwings.core.services.database.record_store import WriteResult
from src.paperwings.core.types.tables import TableName
from src.paperwings.entities._base import EntityRepository, Row


class UserRepository(EntityRepository):
    """Users are identified by ``uid`` rather than a numeric id."""

    table = TableName.USER
    key_column = "uid"

    def get_by_uid(self, uid: str) -> list[Row]:
        return self.get_by_key(uid)

    def delete_by_uid(self, uid: Any) -> WriteResult:
        return self.delete_by_key(uid)

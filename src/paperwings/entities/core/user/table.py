"""User database table model."""

from sqlmodel import Field, SQLModel

from src.paperwings.core.types.tables import TableName


class UserTable(SQLModel, table=True):
    """Columns of the ``USER`` table.

    ``uid`` comes from the identity provider and is supplied by the caller.
    """

    __tablename__ = TableName.USER.value

    uid: str = Field(primary_key=True, max_length=128)
    name: str | None = Field(default=None, max_length=100)
    lastname: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    address: str | None = Field(default=None, max_length=255)

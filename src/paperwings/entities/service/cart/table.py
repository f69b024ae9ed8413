"""Cart database table model."""

from sqlmodel import Field, SQLModel

from src.paperwings.core.types.tables import TableName


class CartTable(SQLModel, table=True):
    """Columns of the ``CART`` table: one row per book in a user's cart."""

    __tablename__ = TableName.CART.value

    id: int | None = Field(default=None, primary_key=True)
    uid: str = Field(index=True, max_length=128)
    id_book: int
    quantity: int | None = Field(default=1, sa_column_kwargs={"server_default": "1"})

"""Favorite database table model."""

from sqlmodel import Field, SQLModel

from src.paperwings.core.types.tables import TableName


class FavoriteTable(SQLModel, table=True):
    __tablename__ = TableName.FAVORITE.value

    id: int | None = Field(default=None, primary_key=True)
    uid: str = Field(index=True, max_length=128)
    id_book: int

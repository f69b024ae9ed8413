"""Book database table model."""

from datetime import date

from sqlmodel import Field, SQLModel

from src.paperwings.core.types.tables import TableName


class BookTable(SQLModel, table=True):
    """Columns of the ``BOOK`` table."""

    __tablename__ = TableName.BOOK.value

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    author: str | None = Field(default=None, max_length=255)
    language: str | None = Field(default=None, max_length=50)
    category: str | None = Field(default=None, max_length=100)
    isbn: str | None = Field(default=None, max_length=20)
    price: float | None = None
    stock: int | None = None
    publication_date: date | None = None
    description: str | None = None
    image: str | None = Field(default=None, max_length=500)

"""Ticket database table model."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from src.paperwings.core.types.tables import TableName


class TicketTable(SQLModel, table=True):
    """Columns of the ``TICKET`` table: one row per purchase."""

    __tablename__ = TableName.TICKET.value

    id: int | None = Field(default=None, primary_key=True)
    uid: str = Field(index=True, max_length=128)
    total: float | None = None
    # MySQL DATETIME: naive, stored as sent
    purchase_date: datetime | None = Field(default=None, sa_type=DateTime)
    status: str | None = Field(default=None, max_length=30)

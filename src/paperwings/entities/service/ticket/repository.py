"""Ticket data access."""

from src.paperwings.core.types.tables import TableName
from src.paperwings.entities._base import OwnedEntityRepository


class TicketRepository(OwnedEntityRepository):
    """Data-access layer for purchase tickets."""

    table = TableName.TICKET

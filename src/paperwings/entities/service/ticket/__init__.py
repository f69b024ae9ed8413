"""Entity package: Ticket."""

from .repository import TicketRepository
from .table import TicketTable

__all__ = ["TicketRepository", "TicketTable"]

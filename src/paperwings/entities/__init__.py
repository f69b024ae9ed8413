"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- table.py: columns of the backing table, registered in the SQLModel metadata
- repository.py: data access bound to that table through the record store

Importing this package registers every table the record store can address.
"""

from .core.user import UserRepository, UserTable
from .service.book import BookRepository, BookTable
from .service.cart import CartRepository, CartTable
from .service.favorite import FavoriteRepository, FavoriteTable
from .service.ticket import TicketRepository, TicketTable

__all__ = [
    "UserTable",
    "UserRepository",
    "BookTable",
    "BookRepository",
    "CartTable",
    "CartRepository",
    "FavoriteTable",
    "FavoriteRepository",
    "TicketTable",
    "TicketRepository",
]

"""User entity module.

- UserTable: columns of the ``USER`` table
- UserRepository: data access bound to that table
"""

from .repository import UserRepository
from .table import UserTable

__all__ = ["UserTable", "UserRepository"]

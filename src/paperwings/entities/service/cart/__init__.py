"""Entity package: Cart."""

from .repository import CartRepository
from .table import CartTable

__all__ = ["CartRepository", "CartTable"]

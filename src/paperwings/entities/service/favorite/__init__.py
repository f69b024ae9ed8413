"""Entity package: Favorite."""

from .repository import FavoriteRepository
from .table import FavoriteTable

__all__ = ["FavoriteRepository", "FavoriteTable"]

"""Entity package: Book."""

from .repository import SEARCH_FIELDS, BookRepository
from .table import BookTable

__all__ = ["BookRepository", "BookTable", "SEARCH_FIELDS"]

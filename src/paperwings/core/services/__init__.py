"""Core services exports."""

from .database.db_connection import DbConnectionService, QueryResult
from .database.errors import (
    DatabaseError,
    DatabaseUnavailableError,
    InvalidArgumentError,
    QueryError,
)
from .database.record_store import InsertResult, MatchMode, RecordStore, WriteResult

__all__ = [
    # Database Service
    "DbConnectionService",
    "QueryResult",
    # Record Store
    "RecordStore",
    "MatchMode",
    "InsertResult",
    "WriteResult",
    # Errors
    "DatabaseError",
    "DatabaseUnavailableError",
    "InvalidArgumentError",
    "QueryError",
]

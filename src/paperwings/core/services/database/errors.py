"""Errors raised by the database layer and the policy used to classify driver failures."""

from enum import Enum

from sqlalchemy import exc as sa_exc


class DatabaseError(Exception):
    """Base class for failures surfaced by the database layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class QueryError(DatabaseError):
    """A statement was sent to the database and failed.

    ``retryable`` is set when the failure was caused by a lost connection,
    meaning the same statement may succeed once the caller tries again.
    """

    def __init__(self, message: str, *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class DatabaseUnavailableError(DatabaseError):
    """The database could not be reached within the configured retry budget."""


class InvalidArgumentError(ValueError):
    """The caller asked for something that cannot be turned into a valid statement."""


class ErrorKind(str, Enum):
    """Outcome of classifying a driver failure."""

    RETRYABLE = "retryable"
    FATAL = "fatal"


def classify_error(error: BaseException, *, connecting: bool = False) -> ErrorKind:
    """Classify a failure as retryable or fatal.

    Lost connections and pool checkout timeouts are always retryable. While a
    connection is being established, operational and interface errors (host
    unreachable, server restarting, handshake failures) are retryable too.
    Anything else is fatal.
    """
    if isinstance(error, (sa_exc.DisconnectionError, sa_exc.TimeoutError)):
        return ErrorKind.RETRYABLE

    if isinstance(error, sa_exc.DBAPIError):
        if error.connection_invalidated:
            return ErrorKind.RETRYABLE
        if connecting and isinstance(
            error, (sa_exc.OperationalError, sa_exc.InterfaceError)
        ):
            return ErrorKind.RETRYABLE

    return ErrorKind.FATAL


def describe_error(error: BaseException) -> str:
    """Return the driver message of ``error`` without SQLAlchemy's statement echo."""
    if isinstance(error, sa_exc.DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error)


def is_connection_lost(error: BaseException) -> bool:
    """Whether ``error`` means the connection itself is gone.

    Pool checkout timeouts are retryable but leave the pool intact.
    """
    if isinstance(error, sa_exc.DisconnectionError):
        return True
    return isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated

"""Database engine ownership, connection supervision and statement execution."""

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import Executable
from sqlmodel import create_engine

from src.paperwings.core.services.database.errors import (
    DatabaseUnavailableError,
    ErrorKind,
    QueryError,
    classify_error,
    describe_error,
    is_connection_lost,
)
from src.paperwings.runtime.config.config_data import DatabaseConfig
from src.paperwings.runtime.context import get_config


@dataclass
class QueryResult:
    """Outcome of a single statement."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    affected_rows: int = 0
    inserted_id: Any | None = None


class DbConnectionService:
    """Owns the process' database engine and its bounded connection pool.

    The service is created once at startup and injected wherever statements
    are executed. Stale pooled connections are replaced transparently
    (``pool_pre_ping``); a connection lost in the middle of a statement
    disposes the pool and re-runs the supervised ``connect`` loop.
    """

    def __init__(
        self,
        config: DatabaseConfig | None = None,
        engine: Engine | None = None,
    ) -> None:
        self._config = config or get_config().database

        if engine is None:
            logger.info("Setting up database engine for backend: {}", self._config.backend)
            engine = self._create_engine(self._config)
        self._engine = engine

        if engine.dialect.name == "mysql" and self._config.session_timeout:
            event.listen(self._engine, "connect", self._configure_session)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _create_engine(self, config: DatabaseConfig) -> Engine:
        engine_kwargs: dict[str, Any] = {
            "pool_pre_ping": True,  # Validate connections before use
            "echo": False,
            "connect_args": self._get_connect_args(config),
        }

        url = make_url(config.connection_string)
        if config.backend == "sqlite" and url.database in (None, "", ":memory:"):
            # An in-memory database only exists on its one connection
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": config.pool_size,
                    "max_overflow": config.max_overflow,
                    "pool_timeout": config.pool_timeout,
                    "pool_recycle": config.pool_recycle,
                }
            )

        return create_engine(config.connection_string, **engine_kwargs)

    def _get_connect_args(self, config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if config.backend == "mysql":
            connect_args.update({"connect_timeout": 10, "charset": "utf8mb4"})

        elif config.backend == "sqlite":
            connect_args.update(
                {
                    "check_same_thread": False,  # Shared with the request threadpool
                    "timeout": 20,  # Lock timeout
                }
            )
            if get_config().app.environment == "production":
                logger.warning("SQLite is not recommended for production use.")

        return connect_args

    def _configure_session(self, dbapi_connection, connection_record) -> None:
        """Raise the idle timeouts of every new MySQL session."""
        timeout = int(self._config.session_timeout)
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"SET SESSION wait_timeout = {timeout}")
            cursor.execute(f"SET SESSION interactive_timeout = {timeout}")
        finally:
            cursor.close()
        logger.debug("Session timeouts set to {}s", timeout)

    def connect(self) -> None:
        """Verify that the database is reachable, retrying with backoff.

        Raises:
            DatabaseUnavailableError: On a fatal failure, or when every
                attempt allowed by the retry policy failed.
        """
        policy = self._config.retry
        delay = policy.retry_delay

        for attempt in range(1, policy.max_attempts + 1):
            try:
                with self._engine.connect() as connection:
                    connection.execute(text("SELECT 1"))
            except sa_exc.SQLAlchemyError as e:
                kind = classify_error(e, connecting=True)
                logger.bind(
                    error_type=type(e).__name__,
                    attempt=attempt,
                    max_attempts=policy.max_attempts,
                ).warning("Database connection failed: {}", describe_error(e))

                if kind is ErrorKind.FATAL:
                    raise DatabaseUnavailableError(describe_error(e)) from e
                if attempt == policy.max_attempts:
                    break

                logger.info("Retrying database connection in {:.1f}s", delay)
                time.sleep(delay)
                delay = min(delay * policy.backoff_factor, policy.max_delay)
            else:
                logger.info("Database connected after {} attempt(s)", attempt)
                return

        logger.critical(
            "Database unreachable after {} attempts; giving up", policy.max_attempts
        )
        raise DatabaseUnavailableError(
            f"Database unreachable after {policy.max_attempts} attempts"
        )

    def execute(
        self,
        statement: Executable,
        parameters: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """Run one statement in its own transaction and collect its outcome.

        Raises:
            QueryError: When the statement fails. Failures caused by a lost
                connection are flagged ``retryable`` after the pool has been
                rebuilt; the statement itself is not re-sent. A pool checkout
                timeout is flagged ``retryable`` and leaves the pool as it is.
        """
        try:
            with self._engine.begin() as connection:
                if parameters:
                    result = connection.execute(statement, dict(parameters))
                else:
                    result = connection.execute(statement)

                if result.returns_rows:
                    rows = [dict(row._mapping) for row in result]
                    return QueryResult(rows=rows, affected_rows=len(rows))

                inserted_id = None
                if result.is_insert:
                    primary_key = result.inserted_primary_key
                    if primary_key is not None and len(primary_key) == 1:
                        inserted_id = primary_key[0]
                return QueryResult(affected_rows=result.rowcount, inserted_id=inserted_id)

        except sa_exc.SQLAlchemyError as e:
            message = describe_error(e)
            if is_connection_lost(e):
                logger.warning("Database connection lost: {}; reconnecting", message)
                self._engine.dispose()
                self.connect()
                raise QueryError(message, retryable=True) from e
            if classify_error(e) is ErrorKind.RETRYABLE:
                logger.warning("Statement not executed: {}", message)
                raise QueryError(message, retryable=True) from e

            logger.bind(error_type=type(e).__name__).error("Statement failed: {}", message)
            raise QueryError(message) from e

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except sa_exc.SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", describe_error(e)
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("Disposing database connection pool")
        self._engine.dispose()

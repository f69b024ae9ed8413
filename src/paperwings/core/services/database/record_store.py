"""Table-parametric CRUD primitives shared by every entity repository."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

import sqlalchemy as sa
from sqlalchemy import MetaData
from sqlmodel import SQLModel

from src.paperwings.core.services.database.db_connection import DbConnectionService
from src.paperwings.core.services.database.errors import InvalidArgumentError
from src.paperwings.core.types.tables import TableName


class MatchMode(str, Enum):
    """Where the wildcard goes in a ``LIKE`` search."""

    CONTAINS = "contains"
    PREFIX = "prefix"


@dataclass(frozen=True)
class InsertResult:
    affected_rows: int
    inserted_id: Any | None


@dataclass(frozen=True)
class WriteResult:
    affected_rows: int


def drop_empty(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``attributes`` without the keys whose value is None."""
    return {key: value for key, value in attributes.items() if value is not None}


def _normalize_value(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _normalize_row(row: Mapping[str, Any]) -> dict[str, Any]:
    return {key: _normalize_value(value) for key, value in row.items()}


class RecordStore:
    """Builds and runs parameterized statements against a closed set of tables.

    Tables are resolved from ``TableName`` through the SQLModel metadata the
    entity table models register into. Column names are checked against the
    resolved table before any statement is built and every value is bound
    as a parameter.
    """

    def __init__(
        self,
        connection: DbConnectionService,
        metadata: MetaData | None = None,
    ) -> None:
        self._connection = connection
        self._metadata = metadata if metadata is not None else SQLModel.metadata

    # ------------------------------------------------------------------
    # Resolution helpers
    # ------------------------------------------------------------------

    def _table(self, table: TableName) -> sa.Table:
        if not isinstance(table, TableName):
            raise InvalidArgumentError(f"Unknown table: {table!r}")
        resolved = self._metadata.tables.get(table.value)
        if resolved is None:
            raise InvalidArgumentError(f"Table {table.value} is not registered")
        return resolved

    def _column(self, table: sa.Table, name: str) -> sa.Column:
        column = table.c.get(name) if isinstance(name, str) else None
        if column is None:
            raise InvalidArgumentError(f"Unknown column '{name}' for table {table.name}")
        return column

    def _coerce(self, column: sa.Column, value: Any) -> Any:
        """Convert text input to the Python type the column binds."""
        if not isinstance(value, str):
            return value

        column_type = column.type
        # SQLModel wraps some types (UTCDateTime, AutoString) in a TypeDecorator
        while isinstance(column_type, sa.types.TypeDecorator):
            column_type = column_type.impl

        try:
            if isinstance(column_type, sa.Boolean):
                return value.strip().lower() in ("1", "true", "yes")
            if isinstance(column_type, sa.DateTime):
                return datetime.fromisoformat(value)
            if isinstance(column_type, sa.Date):
                return date.fromisoformat(value)
            if isinstance(column_type, sa.Integer):
                return int(value)
            if isinstance(column_type, (sa.Float, sa.Numeric)):
                return float(value)
        except ValueError as e:
            raise InvalidArgumentError(
                f"Invalid value {value!r} for column '{column.name}'"
            ) from e
        return value

    def _bind(self, table: sa.Table, attributes: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: self._coerce(self._column(table, name), value)
            for name, value in attributes.items()
        }

    def _criteria(self, table: sa.Table, criteria: Mapping[str, Any]) -> list:
        if not criteria:
            raise InvalidArgumentError("At least one key column is required")
        clauses = []
        for name, value in criteria.items():
            if value is None:
                raise InvalidArgumentError(f"Key column '{name}' needs a value")
            column = self._column(table, name)
            clauses.append(column == self._coerce(column, value))
        return clauses

    @staticmethod
    def _store_assigned_keys(table: sa.Table) -> set[str]:
        return {
            column.name
            for column in table.primary_key.columns
            if isinstance(column.type, sa.Integer)
        }

    def _select(self, statement) -> list[dict[str, Any]]:
        result = self._connection.execute(statement)
        return [_normalize_row(row) for row in result.rows]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def insert(self, table: TableName, attributes: Mapping[str, Any]) -> InsertResult:
        """Insert one row built from the non-None ``attributes``."""
        target = self._table(table)
        data = drop_empty(attributes)
        if not data:
            raise InvalidArgumentError("Nothing to insert: every attribute is empty")

        assigned = self._store_assigned_keys(target) & data.keys()
        if assigned:
            raise InvalidArgumentError(
                f"Column(s) {sorted(assigned)} are assigned by the database"
            )

        result = self._connection.execute(sa.insert(target).values(self._bind(target, data)))
        return InsertResult(
            affected_rows=result.affected_rows, inserted_id=result.inserted_id
        )

    def select_all(self, table: TableName) -> list[dict[str, Any]]:
        return self._select(sa.select(self._table(table)))

    def select_by_equality(
        self, table: TableName, column: str, value: Any
    ) -> list[dict[str, Any]]:
        target = self._table(table)
        return self._select(sa.select(target).where(*self._criteria(target, {column: value})))

    def select_by_pattern(
        self,
        table: TableName,
        column: str,
        value: str,
        mode: MatchMode = MatchMode.CONTAINS,
    ) -> list[dict[str, Any]]:
        """Select rows whose ``column`` matches ``value`` with ``LIKE``.

        ``%`` and ``_`` inside ``value`` are escaped, so they only ever match
        themselves. Case sensitivity follows the column's collation.
        """
        target = self._table(table)
        field = self._column(target, column)
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError("A non-empty search value is required")
        try:
            mode = MatchMode(mode)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown match mode: {mode!r}") from e

        if mode is MatchMode.PREFIX:
            predicate = field.startswith(value, autoescape=True)
        else:
            predicate = field.contains(value, autoescape=True)
        return self._select(sa.select(target).where(predicate))

    def update(
        self,
        table: TableName,
        key_column: str,
        key_value: Any,
        patch: Mapping[str, Any],
    ) -> WriteResult:
        """Apply the non-None attributes of ``patch`` to rows where ``key_column == key_value``."""
        return self.update_matching(table, {key_column: key_value}, patch)

    def update_matching(
        self,
        table: TableName,
        criteria: Mapping[str, Any],
        patch: Mapping[str, Any],
    ) -> WriteResult:
        """Apply ``patch`` to the rows matching every ``criteria`` column."""
        target = self._table(table)
        data = drop_empty(patch)
        if not data:
            raise InvalidArgumentError("Nothing to update: every attribute is empty")

        keys = {column.name for column in target.primary_key.columns} & data.keys()
        if keys:
            raise InvalidArgumentError(f"Primary key column(s) {sorted(keys)} are immutable")

        statement = (
            sa.update(target)
            .where(*self._criteria(target, criteria))
            .values(self._bind(target, data))
        )
        return WriteResult(affected_rows=self._connection.execute(statement).affected_rows)

    def delete(self, table: TableName, key_column: str, key_value: Any) -> WriteResult:
        return self.delete_matching(table, {key_column: key_value})

    def delete_matching(self, table: TableName, criteria: Mapping[str, Any]) -> WriteResult:
        """Delete the rows matching every ``criteria`` column (composite keys)."""
        target = self._table(table)
        statement = sa.delete(target).where(*self._criteria(target, criteria))
        return WriteResult(affected_rows=self._connection.execute(statement).affected_rows)

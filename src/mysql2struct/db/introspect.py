"""MySQL column introspection with normalized output models."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import pymysql

from mysql2struct.db.connection import ConnectionParams, connect_readonly
from mysql2struct.db.queries import COLUMNS_QUERY

logger = logging.getLogger(__name__)

# COLUMN_DEFAULT is NULL: kept distinct from "" (no default text at all).
NULL_DEFAULT = "null"


class IntrospectionError(RuntimeError):
    """Raised when column introspection fails."""


class QueryError(IntrospectionError):
    """Raised when the catalog query is rejected or its rows cannot be read."""


class NoSuchTableError(IntrospectionError):
    """Raised when the catalog has no columns for the requested table."""


def parse_nullable(is_nullable: str | None) -> bool:
    return (is_nullable or "").upper() == "YES"


def normalize_default(value: object) -> str:
    """Resolve a raw COLUMN_DEFAULT value to its textual form."""
    if value is None:
        return NULL_DEFAULT
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    declared_type: str
    key: str
    extra: str
    base_type: str
    nullable: bool
    default_value: str
    comment: str

    @classmethod
    def from_row(cls, row: Sequence[object]) -> ColumnDescriptor:
        """Build a descriptor from one ``COLUMNS_QUERY`` result row."""
        if len(row) != 8:
            raise QueryError(
                f"Catalog row has {len(row)} fields, expected 8: {row!r}"
            )
        name, declared_type, key, extra, base_type, is_nullable, default, comment = row
        return cls(
            name=_text(name),
            declared_type=_text(declared_type),
            key=_text(key),
            extra=_text(extra),
            base_type=_text(base_type),
            nullable=parse_nullable(_text(is_nullable)),
            default_value=normalize_default(default),
            comment=_text(comment),
        )


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def read_table_columns(params: ConnectionParams, table: str) -> list[ColumnDescriptor]:
    """Return the columns of ``params.database``.``table`` in ordinal order.

    Raises ``DatabaseConnectionError`` when the server cannot be reached,
    ``QueryError`` when the catalog query fails and ``NoSuchTableError`` when
    it yields no rows. No partial result is ever returned.
    """
    logger.debug("running: %s [%s, %s]", COLUMNS_QUERY.strip(), params.database, table)

    with connect_readonly(params) as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(COLUMNS_QUERY, (params.database, table))
                columns = [ColumnDescriptor.from_row(row) for row in cur]
        except pymysql.MySQLError as exc:
            raise QueryError(
                f"Could not read columns of {params.database}.{table}: {exc}"
            ) from exc

    if not columns:
        raise NoSuchTableError(
            f"Table '{params.database}.{table}' was not found or has no "
            "accessible columns. Check the schema and table names."
        )

    logger.info("Read %d columns from %s.%s", len(columns), params.database, table)
    return columns

"""Database helpers for mysql2struct."""

from mysql2struct.db.connection import (
    ConnectionParams,
    DatabaseConnectionError,
    HealthcheckResult,
    check_mysql_health,
    connect_readonly,
)
from mysql2struct.db.introspect import (
    NULL_DEFAULT,
    ColumnDescriptor,
    IntrospectionError,
    NoSuchTableError,
    QueryError,
    read_table_columns,
)

__all__ = [
    "NULL_DEFAULT",
    "ColumnDescriptor",
    "ConnectionParams",
    "DatabaseConnectionError",
    "HealthcheckResult",
    "IntrospectionError",
    "NoSuchTableError",
    "QueryError",
    "check_mysql_health",
    "connect_readonly",
    "read_table_columns",
]

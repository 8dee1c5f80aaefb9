"""MySQL to Go type mapping rules."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

GO_INT = "int32"
GO_INT64 = "int64"
GO_STRING = "string"
GO_TIME = "time.Time"
GO_FLOAT32 = "float32"
GO_FLOAT64 = "float64"
GO_BYTES = "[]byte"

SQL_NULL_INT = "sql.NullInt64"
SQL_NULL_STRING = "sql.NullString"
SQL_NULL_FLOAT = "sql.NullFloat64"

GUREGU_NULL_INT = "null.Int"
GUREGU_NULL_STRING = "null.String"
GUREGU_NULL_TIME = "null.Time"
GUREGU_NULL_FLOAT = "null.Float"

# Emitted as-is for base types with no mapping; shows up as a gap in the output.
UNKNOWN_TYPE = ""


class TypeFamily(NamedTuple):
    plain: str
    sql_nullable: str
    guregu_nullable: str


_FAMILIES: tuple[tuple[tuple[str, ...], TypeFamily], ...] = (
    (
        ("tinyint", "int", "smallint", "mediumint"),
        TypeFamily(GO_INT, SQL_NULL_INT, GUREGU_NULL_INT),
    ),
    (
        ("bigint",),
        TypeFamily(GO_INT64, SQL_NULL_INT, GUREGU_NULL_INT),
    ),
    (
        ("char", "enum", "varchar", "longtext", "mediumtext", "text", "tinytext"),
        TypeFamily(GO_STRING, SQL_NULL_STRING, GUREGU_NULL_STRING),
    ),
    (
        # database/sql has no nullable time wrapper.
        ("date", "datetime", "time", "timestamp"),
        TypeFamily(GO_TIME, GO_TIME, GUREGU_NULL_TIME),
    ),
    (
        ("decimal", "double"),
        TypeFamily(GO_FLOAT64, SQL_NULL_FLOAT, GUREGU_NULL_FLOAT),
    ),
    (
        ("float",),
        TypeFamily(GO_FLOAT32, SQL_NULL_FLOAT, GUREGU_NULL_FLOAT),
    ),
    (
        ("binary", "blob", "longblob", "mediumblob", "varbinary"),
        TypeFamily(GO_BYTES, GO_BYTES, GO_BYTES),
    ),
)


def _build_type_map() -> Mapping[tuple[str, bool, bool], str]:
    table: dict[tuple[str, bool, bool], str] = {}
    for base_types, family in _FAMILIES:
        for base_type in base_types:
            table[(base_type, False, False)] = family.plain
            table[(base_type, False, True)] = family.plain
            table[(base_type, True, False)] = family.sql_nullable
            table[(base_type, True, True)] = family.guregu_nullable
    return MappingProxyType(table)


GO_TYPE_MAP: Mapping[tuple[str, bool, bool], str] = _build_type_map()


def mysql_type_to_go_type(base_type: str, nullable: bool, guregu_types: bool) -> str:
    """Return the Go type for a MySQL ``DATA_TYPE``, or ``UNKNOWN_TYPE``."""
    return GO_TYPE_MAP.get((base_type, nullable, guregu_types), UNKNOWN_TYPE)

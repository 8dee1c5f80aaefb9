"""Go struct body generation from column descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from mysql2struct.codegen.types import UNKNOWN_TYPE, mysql_type_to_go_type
from mysql2struct.db.introspect import ColumnDescriptor

PRIMARY_KEY = "PRI"
AUTO_INCREMENT = "auto_increment"


def export_field_name(column_name: str) -> str:
    """Upper-case the first character so Go exports the field."""
    return column_name[:1].upper() + column_name[1:]


@dataclass(frozen=True)
class GenerationConfig:
    """Per-invocation options for struct generation."""

    json_tags: bool = False
    gorm_tags: bool = False
    guregu_types: bool = False
    field_name_style: Callable[[str], str] = export_field_name


def gorm_tag(column: ColumnDescriptor) -> str:
    parts = [f"column:{column.name}"]
    if column.key.upper() == PRIMARY_KEY:
        parts.append("primary_key")
    if column.extra.lower() == AUTO_INCREMENT:
        parts.append("autoincrement")
    parts.append(f"default:'{column.default_value}'")
    return 'gorm:"' + ";".join(parts) + '"'


def json_tag(column: ColumnDescriptor) -> str:
    return f'json:"{column.name}"'


def field_line(column: ColumnDescriptor, config: GenerationConfig) -> str:
    """Render one struct field, without indentation or leading newline."""
    go_type = mysql_type_to_go_type(column.base_type, column.nullable, config.guregu_types)
    field_name = config.field_name_style(column.name)

    tags: list[str] = []
    if config.gorm_tags:
        tags.append(gorm_tag(column))
    if config.json_tags:
        tags.append(json_tag(column))

    if tags:
        return f"{field_name} {go_type} `{' '.join(tags)}` // {column.comment}"
    return f"{field_name} {go_type} // {column.comment}"


def generate_struct(
    columns: Sequence[ColumnDescriptor],
    depth: int = 0,
    config: GenerationConfig | None = None,
) -> str:
    """Generate an anonymous Go ``struct { ... }`` for the given columns.

    Fields follow the column order. ``depth`` is the nesting level of the
    struct: field lines get ``depth`` tabs and the closing brace one less.
    Columns with an unmapped type are still emitted, with an empty type.
    """
    config = config or GenerationConfig()
    indent = "\t" * depth
    structure = "struct {"
    for column in columns:
        structure += f"\n{indent}{field_line(column, config)}"
    structure += "\n" + "\t" * max(depth - 1, 0) + "}"
    return structure


def find_unmapped_columns(columns: Sequence[ColumnDescriptor]) -> list[str]:
    """Names of columns whose base type has no Go mapping."""
    return [
        column.name
        for column in columns
        if mysql_type_to_go_type(column.base_type, False, False) == UNKNOWN_TYPE
    ]

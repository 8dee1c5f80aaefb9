"""Go code generation from MySQL column metadata."""

from mysql2struct.codegen.emitter import (
    GenerationConfig,
    export_field_name,
    find_unmapped_columns,
    generate_struct,
)
from mysql2struct.codegen.source import render_go_source, to_struct_name
from mysql2struct.codegen.types import GO_TYPE_MAP, UNKNOWN_TYPE, mysql_type_to_go_type

__all__ = [
    "GO_TYPE_MAP",
    "UNKNOWN_TYPE",
    "GenerationConfig",
    "export_field_name",
    "find_unmapped_columns",
    "generate_struct",
    "mysql_type_to_go_type",
    "render_go_source",
    "to_struct_name",
]

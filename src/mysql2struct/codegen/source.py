"""Wrap a generated struct body into a complete Go source file."""

from __future__ import annotations

import json
import re
from typing import Sequence

from mysql2struct.codegen.emitter import GenerationConfig, generate_struct
from mysql2struct.codegen.types import mysql_type_to_go_type
from mysql2struct.db.introspect import ColumnDescriptor

_NAME_SPLIT = re.compile(r"[\W_]+")

_STDLIB_IMPORTS = (
    ("sql.", "database/sql"),
    ("time.", "time"),
)
_THIRD_PARTY_IMPORTS = (("null.", "github.com/guregu/null"),)


def to_struct_name(table: str) -> str:
    """``user_accounts`` -> ``UserAccounts``; ``2fa_codes`` -> ``T2faCodes``."""
    name = "".join(
        part[:1].upper() + part[1:] for part in _NAME_SPLIT.split(table) if part
    )
    # Go identifiers must start with a letter.
    if not name[:1].isalpha():
        name = "T" + name
    return name


def _imports_for(go_types: set[str]) -> str:
    def used(prefixes: tuple[tuple[str, str], ...]) -> list[str]:
        return sorted(
            path
            for prefix, path in prefixes
            if any(go_type.startswith(prefix) for go_type in go_types)
        )

    groups = [group for group in (used(_STDLIB_IMPORTS), used(_THIRD_PARTY_IMPORTS)) if group]
    if not groups:
        return ""
    body = "\n\n".join("\n".join(f'\t"{path}"' for path in group) for group in groups)
    return f"import (\n{body}\n)\n\n"


def render_go_source(
    columns: Sequence[ColumnDescriptor],
    table: str,
    struct_name: str | None = None,
    package: str = "newpackage",
    config: GenerationConfig | None = None,
) -> str:
    """Render a Go file declaring one struct type for ``table``."""
    config = config or GenerationConfig()
    struct_name = struct_name or to_struct_name(table)
    go_types = {
        mysql_type_to_go_type(column.base_type, column.nullable, config.guregu_types)
        for column in columns
    }

    source = f"package {package}\n\n"
    source += _imports_for(go_types)
    source += f"type {struct_name} {generate_struct(columns, depth=1, config=config)}\n"

    if config.gorm_tags:
        receiver = struct_name[:1].lower() or "t"
        source += (
            "\n// TableName sets the insert table name for this struct type\n"
            f"func ({receiver} *{struct_name}) TableName() string {{\n"
            f"\treturn {json.dumps(table, ensure_ascii=False)}\n"
            "}\n"
        )
    return source

"""Build INSERT ... ON DUPLICATE KEY UPDATE statements from a table schema."""

import re
from collections.abc import Mapping
from typing import Any

from mysql_datastream.errors import ArgumentError, MissingColumnError
from mysql_datastream.models.column import ColumnInfo

_IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_]+")

# MySQL reserved words that are also plausible table or column names.
_RESERVED_WORDS = frozenset(
    {
        "add", "all", "alter", "and", "as", "asc", "before", "between", "both",
        "by", "call", "case", "change", "check", "column", "condition",
        "constraint", "create", "cross", "current_date", "current_time",
        "current_timestamp", "current_user", "database", "default", "delete",
        "desc", "describe", "distinct", "div", "drop", "each", "else", "exists",
        "explain", "false", "fetch", "for", "foreign", "from", "function",
        "grant", "group", "groups", "having", "if", "ignore", "in", "index",
        "inner", "insert", "interval", "into", "is", "join", "key", "keys",
        "kill", "lag", "lead", "leading", "left", "like", "limit", "lines",
        "load", "lock", "long", "match", "mod", "natural", "not", "null",
        "of", "on", "option", "or", "order", "out", "outer", "partition",
        "primary", "range", "rank", "read", "references", "regexp", "release",
        "rename", "repeat", "replace", "require", "restrict", "return",
        "revoke", "right", "rlike", "row", "rows", "schema", "select", "set",
        "show", "signal", "system", "table", "then", "to", "trailing",
        "trigger", "true", "union", "unique", "unlock", "update", "usage",
        "use", "using", "values", "when", "where", "while", "window", "with",
        "write", "xor",
    }
)


def is_identifier(name: object) -> bool:
    """Return True if ``name`` is safe to embed in SQL text unquoted."""
    return isinstance(name, str) and _IDENTIFIER_RE.fullmatch(name) is not None


def check_identifier(name: object, kind: str = "identifier") -> str:
    """Return ``name`` unchanged, or raise ArgumentError if it isn't [A-Za-z0-9_]+."""
    if not is_identifier(name):
        raise ArgumentError(
            f"Invalid {kind}: {name!r}. Names can only contain [A-Za-z0-9_]"
        )
    return name  # type: ignore[return-value]


def _check_unquoted(name: object, kind: str) -> str:
    check_identifier(name, kind)
    if name.lower() in _RESERVED_WORDS:  # type: ignore[union-attr]
        raise ArgumentError(f"Invalid {kind}: {name!r} is a MySQL reserved word")
    return name  # type: ignore[return-value]


def build_upsert(
    table: str, columns: Mapping[str, ColumnInfo], record: Mapping[str, Any]
) -> tuple[str, list[Any]]:
    """Build an upsert of ``record`` into ``table``.

    Every required column (not nullable, no default, not auto-increment)
    must be present in ``record``. Keys that aren't columns of the table are
    ignored, so one record can be written to several tables. Columns appear
    in schema order and values are always bound as parameters.

    Identifiers are written unquoted, so a table or column named after a
    MySQL reserved word (``order``, ``key``, ``group``) is rejected with
    ArgumentError rather than producing a syntax error at execution.
    """
    if not isinstance(record, Mapping):
        raise ArgumentError("Records must be mappings of column name to value")
    _check_unquoted(table, "table name")

    for name, column in columns.items():
        if column.required and name not in record:
            raise MissingColumnError(name)

    names = [name for name in columns if name in record]
    if not names:
        raise ArgumentError(f"Record has no columns in common with table {table}")
    for name in names:
        _check_unquoted(name, "column name")

    column_list = ", ".join(names)
    placeholders = ", ".join("?" for _ in names)
    updates = ", ".join(f"{name} = VALUES({name})" for name in names)
    sql = (
        f"INSERT INTO {table} ({column_list}) VALUES ({placeholders}) "
        f"ON DUPLICATE KEY UPDATE {updates}"
    )
    return sql, [record[name] for name in names]

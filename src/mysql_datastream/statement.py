"""Statement argument parsing and log rendering."""

import json
import re
from datetime import datetime
from typing import Any

from mysql_datastream.errors import ArgumentError

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
_ESCAPE_RE = re.compile(r"[\\\n\r\t\0]")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)


def normalize_arguments(arguments: tuple[Any, ...]) -> tuple[str, list[Any]]:
    """Split ``(sql, *args)`` into the SQL text and a flat parameter list.

    A single list/tuple argument is taken as the whole parameter list. List
    or tuple arguments are spliced in place so that ``IN (?, ?, ?)`` can be
    fed from a sequence::

        normalize_arguments(("... a = ? AND b IN (?, ?)", 1, [2, 3]))
        # -> ("... a = ? AND b IN (?, ?)", [1, 2, 3])
    """
    if not arguments:
        raise ArgumentError("No arguments: a SQL statement is required")
    sql, *rest = arguments
    if not isinstance(sql, str) or not sql.strip():
        raise ArgumentError(f"SQL statement must be a non-empty string, got {sql!r}")
    if len(rest) == 1 and _is_sequence(rest[0]):
        rest = list(rest[0])
    params: list[Any] = []
    for arg in rest:
        if _is_sequence(arg):
            params.extend(arg)
        else:
            params.append(arg)
    return sql, params


def escape_str(text: str) -> str:
    """Escape control characters so a statement fits on one log line."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


def params_to_str(params: list[Any]) -> str:
    """Render a parameter list for the log."""
    return json.dumps(params, default=repr, ensure_ascii=False)


def statement_line(sql: str, params: list[Any], now: datetime | None = None) -> str:
    """Format the log line recorded for an executed statement."""
    stamp = (now or datetime.now().astimezone()).isoformat(timespec="seconds")
    return f"{stamp} SQL: {escape_str(sql)} << {params_to_str(params)}"

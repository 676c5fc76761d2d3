"""PyMySQL implementation of the DriverAdapter protocol.

Uses buffered ``DictCursor`` cursors so that a schema lookup or a write can
run while a search result is still being read. Statements use ``?``
placeholders; this adapter translates them to PyMySQL's ``%s`` when it
executes them.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import pymysql
import pymysql.cursors

from mysql_datastream.db.backend import END_OF_RESULTS, EndOfResults, Row
from mysql_datastream.errors import DatabaseConnectionError
from mysql_datastream.models.status import GENERAL_ERROR_CODE, ErrorStatus

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"[?%]")

# MySQL error number → SQLSTATE for the errors applications commonly probe for.
_SQLSTATE_BY_ERRNO = {
    1044: "42000",
    1045: "28000",
    1048: "23000",
    1049: "42000",
    1054: "42S22",
    1062: "23000",
    1064: "42000",
    1091: "42000",
    1142: "42000",
    1146: "42S02",
    1213: "40001",
    1216: "23000",
    1217: "23000",
    1364: "HY000",
    1406: "22001",
    1451: "23000",
    1452: "23000",
    2006: "08S01",
    2013: "08S01",
}


def _translate_placeholders(sql: str) -> str:
    """Convert ``?`` placeholders to ``%s`` and escape literal ``%`` for PyMySQL."""
    return _PLACEHOLDER_RE.sub(lambda m: "%s" if m.group(0) == "?" else "%%", sql)


def _status_from_exception(exc: pymysql.err.MySQLError) -> ErrorStatus:
    """Turn a PyMySQL exception into an SQLSTATE-shaped status."""
    errno: int | None = None
    message = str(exc)
    if len(exc.args) >= 2 and isinstance(exc.args[0], int):
        errno = exc.args[0]
        message = str(exc.args[1])
    elif len(exc.args) == 1:
        message = str(exc.args[0])
    if not errno:
        # Errors raised by the client itself carry no server error number.
        return ErrorStatus(code=GENERAL_ERROR_CODE, subcode="0", message=message)
    return ErrorStatus(
        code=_SQLSTATE_BY_ERRNO.get(errno, GENERAL_ERROR_CODE),
        subcode=str(errno),
        message=message,
    )


@dataclass
class PyMySQLStatement:
    """A statement bound to its own cursor, plus the status of its last execute."""

    cursor: Any
    sql: str
    status: ErrorStatus = field(default_factory=ErrorStatus.ok)
    executed: bool = False


class PyMySQLAdapter:
    """DriverAdapter backed by PyMySQL.

    Connections are opened with ``autocommit=True`` unless the connect
    parameters say otherwise; transactions are left to the caller.
    """

    def connect(self, params: Mapping[str, Any]) -> pymysql.connections.Connection:
        """Open a PyMySQL connection."""
        options: dict[str, Any] = {"autocommit": True, "charset": "utf8mb4"}
        options.update(params)
        options["cursorclass"] = pymysql.cursors.DictCursor
        try:
            conn = pymysql.connect(**options)
        except pymysql.err.MySQLError as e:
            raise DatabaseConnectionError(f"Cannot connect to MySQL: {e}") from e
        logger.debug("PyMySQL connection opened to %s", options.get("host", "localhost"))
        return conn

    def close(self, handle: pymysql.connections.Connection) -> None:
        """Close a PyMySQL connection; closing twice is harmless."""
        if not handle.open:
            return
        try:
            handle.close()
        except pymysql.err.Error:
            logger.debug("PyMySQL connection already closed", exc_info=True)

    def prepare(self, handle: pymysql.connections.Connection, sql: str) -> PyMySQLStatement:
        """Bind SQL text to a fresh cursor."""
        return PyMySQLStatement(cursor=handle.cursor(), sql=sql)

    def execute(self, statement: PyMySQLStatement, params: Sequence[Any]) -> None:
        """Execute, capturing any database error into the statement's status."""
        statement.executed = False
        try:
            if params:
                statement.cursor.execute(_translate_placeholders(statement.sql), list(params))
            else:
                statement.cursor.execute(statement.sql)
        except pymysql.err.MySQLError as e:
            statement.status = _status_from_exception(e)
            return
        statement.status = ErrorStatus.ok()
        statement.executed = True

    def fetch_row(self, statement: PyMySQLStatement) -> Row | EndOfResults:
        """Fetch the next row of a statement's result set."""
        # Statements that failed or produced no result set have nothing to fetch.
        if not statement.executed or statement.cursor.description is None:
            return END_OF_RESULTS
        row = statement.cursor.fetchone()
        if row is None:
            return END_OF_RESULTS
        return row

    def last_error(self, statement: PyMySQLStatement) -> ErrorStatus:
        """Return the status captured by the statement's last execute."""
        return statement.status

    def list_tables_like(self, handle: pymysql.connections.Connection, pattern: str) -> list[Row]:
        """Run ``SHOW TABLES LIKE`` for a pattern."""
        with handle.cursor() as cursor:
            cursor.execute("SHOW TABLES LIKE %s", (pattern,))
            return list(cursor.fetchall())

    def describe_table(self, handle: pymysql.connections.Connection, name: str) -> list[Row]:
        """Run ``DESCRIBE`` for a table whose name has already been validated."""
        with handle.cursor() as cursor:
            cursor.execute(f"DESCRIBE `{name}`")
            return list(cursor.fetchall())

"""Shared test fixtures."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from mysql_datastream.config import StreamOptions
from mysql_datastream.connection import Connection
from mysql_datastream.db.backend import END_OF_RESULTS
from mysql_datastream.errors import DatabaseConnectionError
from mysql_datastream.models.status import ErrorStatus

USERS_SCHEMA = [
    {"Field": "id", "Type": "int(11)", "Null": "NO", "Default": None, "Extra": "auto_increment"},
    {"Field": "email", "Type": "varchar(255)", "Null": "NO", "Default": None, "Extra": ""},
]


@dataclass
class FakeStatement:
    sql: str
    rows: list[dict[str, Any]] = field(default_factory=list)
    status: ErrorStatus = field(default_factory=ErrorStatus)
    position: int = 0
    fetches: int = 0


class FakeAdapter:
    """In-memory DriverAdapter that serves canned rows and statuses per SQL text.

    Every prepare, execute and fetch is recorded so tests can count how many
    times the "database" was actually asked for something.
    """

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None):
        self.results: dict[str, list[dict[str, Any]]] = {}
        self.statuses: dict[str, ErrorStatus] = {}
        self.tables = tables if tables is not None else {}
        self.executed: list[tuple[str, list[Any]]] = []
        self.statements: list[FakeStatement] = []
        self.connects = 0
        self.closed_handles: list[object] = []
        self.fail_connect = False

    def connect(self, params):
        if self.fail_connect:
            raise DatabaseConnectionError("Cannot connect to MySQL: refused")
        self.connects += 1
        return {"params": dict(params), "id": self.connects}

    def close(self, handle):
        self.closed_handles.append(handle)

    def prepare(self, handle, sql):
        statement = FakeStatement(sql=sql)
        self.statements.append(statement)
        return statement

    def execute(self, statement, params):
        self.executed.append((statement.sql, list(params)))
        statement.status = self.statuses.get(statement.sql, ErrorStatus())
        if statement.status.is_error:
            statement.rows = []
        else:
            statement.rows = [dict(row) for row in self.results.get(statement.sql, [])]
        statement.position = 0

    def fetch_row(self, statement):
        statement.fetches += 1
        if statement.position >= len(statement.rows):
            return END_OF_RESULTS
        row = statement.rows[statement.position]
        statement.position += 1
        return row

    def last_error(self, statement):
        return statement.status

    def list_tables_like(self, handle, pattern):
        name = pattern.replace("\\_", "_").replace("\\%", "%").replace("\\\\", "\\")
        return [{"Tables_in_test": name}] if name in self.tables else []

    def describe_table(self, handle, name):
        return [dict(row) for row in self.tables[name]]


@pytest.fixture
def adapter():
    """Fake driver with a users table."""
    return FakeAdapter(tables={"users": USERS_SCHEMA})


@pytest.fixture
def options():
    """Default options, independent of the environment."""
    return StreamOptions()


@pytest.fixture
def conn(adapter, options):
    """Open connection backed by the fake driver."""
    connection = Connection({"host": "db", "database": "test"}, adapter=adapter, options=options)
    connection.open()
    yield connection
    connection.close()

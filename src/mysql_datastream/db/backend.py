"""Driver adapter protocol: a thin abstraction over a blocking SQL driver.

The connection layer programs against ``DriverAdapter``. Each supported
driver provides one implementation, chosen when the ``Connection`` is
constructed. All SQL handed to an adapter uses ``?`` placeholders; adapters
translate to their driver's paramstyle.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final, Protocol, runtime_checkable

from mysql_datastream.models.status import ErrorStatus

Row = Mapping[str, Any]


class EndOfResults:
    """Marker returned in place of a row once a result set is exhausted.

    It is falsy and distinct from an empty row.
    """

    _instance: EndOfResults | None = None

    def __new__(cls) -> EndOfResults:
        """Return the single shared instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        """End of results is always falsy."""
        return False

    def __repr__(self) -> str:
        """Return the constant's name."""
        return "END_OF_RESULTS"


END_OF_RESULTS: Final = EndOfResults()


@runtime_checkable
class DriverAdapter(Protocol):
    """Blocking SQL driver used by a single ``Connection``.

    ``execute`` must not raise for database errors: the error is captured
    and reported by ``last_error`` so the caller decides whether to raise.
    """

    def connect(self, params: Mapping[str, Any]) -> Any:
        """Open a session and return its handle.

        Raises DatabaseConnectionError when the session cannot be opened.
        """
        ...

    def close(self, handle: Any) -> None:
        """Release a session handle."""
        ...

    def prepare(self, handle: Any, sql: str) -> Any:
        """Prepare a statement from SQL text."""
        ...

    def execute(self, statement: Any, params: Sequence[Any]) -> None:
        """Execute a prepared statement with positional parameters."""
        ...

    def fetch_row(self, statement: Any) -> Row | EndOfResults:
        """Fetch the next row, or END_OF_RESULTS if exhausted."""
        ...

    def last_error(self, statement: Any) -> ErrorStatus:
        """Return the error status of the statement's last execute."""
        ...

    def list_tables_like(self, handle: Any, pattern: str) -> list[Row]:
        """Return one row per table whose name matches a LIKE pattern."""
        ...

    def describe_table(self, handle: Any, name: str) -> list[Row]:
        """Return Field/Type/Null/Default/Extra rows for a table's columns."""
        ...

"""Result cursor: query memo, one-row lookahead and bounded rewind."""

from collections.abc import Callable
from typing import Any

from mysql_datastream.db.backend import END_OF_RESULTS, EndOfResults, Row
from mysql_datastream.errors import ArgumentError

RowFetcher = Callable[[], Row | EndOfResults]


def _exhausted() -> EndOfResults:
    return END_OF_RESULTS


class ResultCursor:
    """Rows of the active query, read one at a time.

    ``_rows`` holds rows already fetched from the driver. The row at
    ``_index`` is the one ``read()`` returns next; it is always fetched
    before it is needed, which is what lets ``empty()`` and ``peek()``
    answer without consuming anything. Only ``depth`` rows are kept behind
    the index, so memory stays bounded on large result sets.
    """

    def __init__(self, depth: int = 1000) -> None:
        """Initialize an idle cursor that keeps ``depth`` rows for rewinding."""
        self.depth = depth
        self._rows: list[Row | EndOfResults] = []
        self._index = 0
        self._fetch: RowFetcher = _exhausted
        self.last_statement: str | None = None
        self.last_params: list[Any] | None = None
        self.succeeded = True

    @property
    def active(self) -> bool:
        """Whether a query has been started since the last reset."""
        return bool(self._rows)

    def matches(self, sql: str, params: list[Any]) -> bool:
        """Whether ``sql`` and ``params`` repeat the last executed query."""
        return self.last_statement == sql and self.last_params == params

    def begin(self, sql: str, params: list[Any]) -> None:
        """Record a new query and drop the previous query's rows."""
        self.reset()
        self.last_statement = sql
        self.last_params = list(params)

    def prime(self, fetch: RowFetcher, succeeded: bool = True) -> None:
        """Fetch the lookahead row of a freshly executed query."""
        self.succeeded = succeeded
        self._fetch = fetch
        self._rows = [fetch()]
        self._index = 0

    def reset(self) -> None:
        """Forget the memo and every buffered row."""
        self.last_statement = None
        self.last_params = None
        self._rows = []
        self._index = 0
        self._fetch = _exhausted
        self.succeeded = True

    def empty(self) -> bool:
        """Whether no rows remain to be read."""
        return self.peek() is END_OF_RESULTS

    def peek(self) -> Row | EndOfResults:
        """Return the next row without consuming it."""
        if not self._rows:
            return END_OF_RESULTS
        return self._rows[self._index]

    def read(self) -> Row | EndOfResults:
        """Return the next row and advance past it."""
        if not self._rows:
            return END_OF_RESULTS
        value = self._rows[self._index]
        if value is END_OF_RESULTS:
            return value
        if self._index == len(self._rows) - 1:
            self._rows.append(self._fetch())
        self._index += 1
        if self._index > self.depth:
            drop = self._index - self.depth
            del self._rows[:drop]
            self._index -= drop
        return value

    def rewind(self, rows: int = 1) -> Row | None:
        """Step back ``rows`` rows and return the row now under the cursor.

        Returns None, leaving the cursor at the oldest buffered row, when
        fewer than ``rows`` rows can be rewound.
        """
        if not isinstance(rows, int) or isinstance(rows, bool) or rows < 1:
            raise ArgumentError(f"Can't rewind {rows!r} rows")
        if rows > self._index:
            self._index = 0
            return None
        self._index -= rows
        return self._rows[self._index]  # type: ignore[return-value]

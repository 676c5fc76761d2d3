"""Exception types raised by mysql-datastream."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mysql_datastream.models.status import ErrorStatus


class DatastreamError(Exception):
    """Base class for all mysql-datastream errors."""


class DatabaseConnectionError(DatastreamError):
    """The driver could not establish a database session."""


class NotReadyReason(StrEnum):
    """Why a connection is not ready for queries."""

    NEVER_OPENED = "never_opened"
    CLOSED = "closed"
    INVALID = "invalid"


_NOT_READY_MESSAGES = {
    NotReadyReason.NEVER_OPENED: "Not connected to database",
    NotReadyReason.CLOSED: "Database connection not ready: closed",
    NotReadyReason.INVALID: "Database connection is not ready",
}


class NotReadyError(DatastreamError):
    """An operation was attempted on a connection that is not connected."""

    def __init__(self, reason: NotReadyReason) -> None:
        """Initialize with the reason the connection is not ready."""
        super().__init__(_NOT_READY_MESSAGES[reason])
        self.reason = reason


class ArgumentError(DatastreamError, ValueError):
    """A call was made with malformed arguments or an invalid identifier."""


class UnknownTableError(ArgumentError):
    """A table named by the caller does not exist in the database."""

    def __init__(self, table: str) -> None:
        """Initialize with the missing table name."""
        super().__init__(f"Table does not exist in database: {table}")
        self.table = table


class MissingColumnError(DatastreamError):
    """A record write omitted a column the table requires."""

    def __init__(self, column: str) -> None:
        """Initialize with the required column name."""
        super().__init__(f"Missing required column during write(): {column}")
        self.column = column


class QueryError(DatastreamError):
    """The database reported a genuine error for a statement."""

    def __init__(self, status: ErrorStatus, statement: str | None = None) -> None:
        """Initialize with the driver status and the last logged statement."""
        message = status.format()
        if statement:
            message += f"\nLast statement was: {statement}"
        super().__init__(message)
        self.status = status
        self.statement = statement

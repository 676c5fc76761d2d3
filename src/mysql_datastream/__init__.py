"""Stateful read/peek/rewind access to MySQL over a single connection."""

from mysql_datastream.config import StreamOptions
from mysql_datastream.connection import Connection, StreamState
from mysql_datastream.db.backend import END_OF_RESULTS, DriverAdapter, EndOfResults
from mysql_datastream.errors import (
    ArgumentError,
    DatabaseConnectionError,
    DatastreamError,
    MissingColumnError,
    NotReadyError,
    NotReadyReason,
    QueryError,
    UnknownTableError,
)

__all__ = [
    "END_OF_RESULTS",
    "ArgumentError",
    "Connection",
    "DatabaseConnectionError",
    "DatastreamError",
    "DriverAdapter",
    "EndOfResults",
    "MissingColumnError",
    "NotReadyError",
    "NotReadyReason",
    "QueryError",
    "StreamOptions",
    "StreamState",
    "UnknownTableError",
]

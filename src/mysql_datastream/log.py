"""In-memory statement log with fan-out to files, streams and other logs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from mysql_datastream.errors import ArgumentError

logger = logging.getLogger(__name__)

ERROR_PREFIX = "MySQL ERROR"


@runtime_checkable
class LogSink(Protocol):
    """Anything that accepts whole log lines."""

    def append(self, line: str) -> None:
        """Append one line."""
        ...


LogDestination = str | os.PathLike[str] | IO[str] | LogSink


class StatementLog:
    """Ordered diagnostic lines for one connection.

    Lines are kept in memory (optionally only the most recent ``retention``
    of them) and copied to every destination added with ``add_destination``.
    """

    def __init__(self) -> None:
        """Initialize an empty log with no destinations."""
        self._lines: list[str] = []
        self._destinations: list[LogDestination] = []
        self.last_line: str | None = None

    @property
    def lines(self) -> list[str]:
        """Lines currently held in memory, oldest first."""
        return list(self._lines)

    def errors(self) -> list[str]:
        """Held lines that record database errors."""
        return [line for line in self._lines if line.startswith(ERROR_PREFIX)]

    def append(self, line: str, retention: int | None = None) -> None:
        """Record a line and send it to every destination."""
        self.last_line = line
        self._lines.append(line)
        if retention is not None:
            if retention < 1:
                self._lines.clear()
            elif len(self._lines) > retention:
                del self._lines[: len(self._lines) - retention]
        for destination in self._destinations:
            _write(destination, line)

    def add_destination(self, destination: LogDestination) -> None:
        """Add a destination and replay the held lines to it."""
        if not isinstance(destination, (str, os.PathLike, LogSink)) and not hasattr(
            destination, "write"
        ):
            raise ArgumentError(f"Unsupported log destination: {destination!r}")
        self._destinations.append(destination)
        logger.debug("Log destination added, replaying %d lines", len(self._lines))
        for line in self._lines:
            _write(destination, line)

    def clear(self) -> None:
        """Drop all held lines; destinations are kept."""
        self._lines.clear()
        self.last_line = None


def _write(destination: LogDestination, line: str) -> None:
    if isinstance(destination, (str, os.PathLike)):
        with Path(destination).open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
    elif isinstance(destination, LogSink):
        destination.append(line)
    else:
        destination.write(line + "\n")

"""Tests for the statement log."""

import io

import pytest

from mysql_datastream.errors import ArgumentError
from mysql_datastream.log import StatementLog


def test_append_and_lines():
    log = StatementLog()
    log.append("one")
    log.append("two")
    assert log.lines == ["one", "two"]
    assert log.last_line == "two"


def test_lines_is_a_copy():
    log = StatementLog()
    log.append("one")
    log.lines.append("sneaky")
    assert log.lines == ["one"]


def test_retention_keeps_most_recent():
    log = StatementLog()
    for i in range(4):
        log.append(str(i), retention=3)
    assert log.lines == ["1", "2", "3"]


def test_retention_below_one_keeps_nothing():
    log = StatementLog()
    log.append("one", retention=0)
    assert log.lines == []
    assert log.last_line == "one"


def test_errors_filter():
    log = StatementLog()
    log.append("2024-01-01T00:00:00+00:00 SQL: SELECT 1 << []")
    log.append("MySQL ERROR 42S02 (1146): Table doesn't exist")
    assert log.errors() == ["MySQL ERROR 42S02 (1146): Table doesn't exist"]


def test_stream_destination_replays():
    log = StatementLog()
    log.append("one")
    stream = io.StringIO()
    log.add_destination(stream)
    log.append("two")
    assert stream.getvalue() == "one\ntwo\n"


def test_path_destination_appends(tmp_path):
    path = tmp_path / "sql.log"
    path.write_text("existing\n")
    log = StatementLog()
    log.add_destination(path)
    log.append("one")
    assert path.read_text() == "existing\none\n"


def test_sink_destination():
    log = StatementLog()
    received: list[str] = []
    log.append("one")
    log.add_destination(received)
    log.append("two")
    assert received == ["one", "two"]


def test_chained_logs():
    first, second = StatementLog(), StatementLog()
    first.add_destination(second)
    first.append("one")
    assert second.lines == ["one"]


def test_unsupported_destination():
    with pytest.raises(ArgumentError):
        StatementLog().add_destination(42)  # type: ignore[arg-type]


def test_clear_keeps_destinations():
    log = StatementLog()
    stream = io.StringIO()
    log.add_destination(stream)
    log.append("one")
    log.clear()
    log.append("two")
    assert log.lines == ["two"]
    assert stream.getvalue() == "one\ntwo\n"

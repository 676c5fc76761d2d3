"""Environment-variable-based configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field


def get_database_url() -> str | None:
    """Return the database URL from MYSQL_DATASTREAM_URL, if set."""
    return os.environ.get("MYSQL_DATASTREAM_URL") or None


def get_log_level() -> str:
    """Return the logging level from MYSQL_DATASTREAM_LOG_LEVEL."""
    return os.environ.get("MYSQL_DATASTREAM_LOG_LEVEL", "WARNING").upper()


def get_throw_on_error() -> bool:
    """Return False only if MYSQL_DATASTREAM_THROW_ON_ERROR is set to FALSE."""
    return os.environ.get("MYSQL_DATASTREAM_THROW_ON_ERROR", "TRUE").upper() != "FALSE"


def get_log_retention() -> int | None:
    """Return the in-memory log line limit from MYSQL_DATASTREAM_LOG_RETENTION."""
    raw = os.environ.get("MYSQL_DATASTREAM_LOG_RETENTION", "")
    return int(raw) if raw else None


def get_rewind_depth() -> int:
    """Return the number of rewindable rows from MYSQL_DATASTREAM_REWIND_DEPTH."""
    return int(os.environ.get("MYSQL_DATASTREAM_REWIND_DEPTH", "1000"))


class StreamOptions(BaseModel):
    """Behaviour flags for a Connection.

    ``throw_on_error``: raise QueryError when the database reports an error.
    When False the error is written to the log and the call returns False.

    ``log_retention``: keep at most this many lines in the in-memory log;
    ``None`` keeps everything and values below 1 keep nothing.

    ``rewind_depth``: how many already-read rows ``rewind()`` can reach.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    throw_on_error: bool = True
    log_retention: int | None = None
    rewind_depth: int = Field(default=1000, ge=1)

    @classmethod
    def from_env(cls, **overrides: object) -> "StreamOptions":
        """Build options from the environment; keyword arguments take precedence."""
        values: dict[str, object] = {
            "throw_on_error": get_throw_on_error(),
            "log_retention": get_log_retention(),
            "rewind_depth": get_rewind_depth(),
        }
        values.update(overrides)
        return cls.model_validate(values)

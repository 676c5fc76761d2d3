"""Driver adapters and connection parameter parsing."""

from mysql_datastream.db.backend import END_OF_RESULTS, DriverAdapter, EndOfResults, Row
from mysql_datastream.db.pymysql_backend import PyMySQLAdapter
from mysql_datastream.db.url import MySQLURL, parse_url

__all__ = [
    "END_OF_RESULTS",
    "DriverAdapter",
    "EndOfResults",
    "MySQLURL",
    "PyMySQLAdapter",
    "Row",
    "parse_url",
]

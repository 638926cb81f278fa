"""
Query Executor - The single capability the dialect needs from a connection.

The schema loader and version probe only ever call
`execute(sql, params) -> rows`, with `:name` placeholders in the SQL and a
dict of values. PyodbcExecutor adapts a pyodbc connection to that contract.
"""
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

# String literals are matched first so placeholders inside them are skipped
_PLACEHOLDER_RE = re.compile(r"'(?:[^']|'')*'|(?<![:\w]):(\w+)")


class QueryExecutor(Protocol):
    """Anything able to run a parameterized query and return dict rows."""

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        ...


def bind_named_parameters(sql: str, params: Optional[Mapping[str, Any]]) -> Tuple[str, Tuple]:
    """
    Rewrite `:name` placeholders to `?` and order the values to match.

    Args:
        sql: SQL text with named placeholders
        params: Values keyed by placeholder name (with or without leading colon)

    Returns:
        (sql with qmark placeholders, positional values)

    Raises:
        KeyError: A placeholder has no value
    """
    values = {}
    for key, value in (params or {}).items():
        values[key.lstrip(":")] = value

    positional = []

    def _replace(match: "re.Match") -> str:
        name = match.group(1)
        if name is None:
            return match.group(0)
        if name not in values:
            raise KeyError(f"Missing value for SQL parameter :{name}")
        positional.append(values[name])
        return "?"

    return _PLACEHOLDER_RE.sub(_replace, sql), tuple(positional)


def scalar(rows: List[Row]) -> Any:
    """First value of the first row, or None."""
    if not rows:
        return None
    return next(iter(rows[0].values()), None)


class PyodbcExecutor:
    """
    QueryExecutor over a pyodbc connection (SQL Anywhere ODBC driver).

    Usage:
        conn = pyodbc.connect("DRIVER={SQL Anywhere 17};HOST=...;UID=dba;PWD=...")
        executor = PyodbcExecutor(conn)
        rows = executor.execute("SELECT @@version AS ver")
    """

    def __init__(self, connection: Any):
        """
        Args:
            connection: pyodbc Connection object
        """
        self.connection = connection

    @classmethod
    def connect(cls, connection_string: str, **kwargs) -> "PyodbcExecutor":
        """Open a pyodbc connection and wrap it."""
        import pyodbc
        connection = pyodbc.connect(connection_string, **kwargs)
        logger.info("Connected to SQL Anywhere through ODBC")
        return cls(connection)

    def close(self):
        """Close the underlying connection."""
        self.connection.close()

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        """Run a query and return its rows as dicts keyed by column label."""
        query, values = bind_named_parameters(sql, params)
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, values)
            if cursor.description is None:
                return []
            labels = [column[0] for column in cursor.description]
            return [dict(zip(labels, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()

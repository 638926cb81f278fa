"""
Database layer - catalog access, dialect and schema loading for SQL Anywhere
"""

from .executor import PyodbcExecutor, QueryExecutor
from .schema import SQLAnywhereSchema

__all__ = [
    "PyodbcExecutor",
    "QueryExecutor",
    "SQLAnywhereSchema",
]

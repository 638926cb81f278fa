"""
Database Dialects - Engine-specific SQL operations

Usage:
    from asa_dialect.database.dialects import create_dialect

    dialect = create_dialect("sqlanywhere", default_schema="dba")

    # Translate generated SQL
    sql = dialect.build_order_by_and_limit("SELECT * FROM t", "", 10, 20)

    # Quote identifiers
    dialect.quote_table_name("dba.Users")

    # Catalog queries for a server version
    queries = dialect.catalog_queries(dialect.family_for_version(17))
"""

from .base import DatabaseDialect

from .sqlanywhere_dialect import DIALECT_NAMES, SQLAnywhereDialect, create_dialect
from .sqlanywhere_types import ColumnTypeMapper, PhysicalType

__all__ = [
    # Base classes
    "DatabaseDialect",

    # Implementations
    "SQLAnywhereDialect",
    "ColumnTypeMapper",
    "PhysicalType",

    # Lookup by driver name
    "DIALECT_NAMES",
    "create_dialect",
]

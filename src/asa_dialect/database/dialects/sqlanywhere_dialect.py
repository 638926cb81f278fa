"""
SQL Anywhere Dialect - SQL Anywhere (ASA) specific SQL operations
"""

from typing import Optional, Tuple

from ...constants import QUOTE_CLOSE, QUOTE_OPEN, VERSION_QUERY
from ...errors import DialectError
from ...utils.sql_pagination import PaginationRewriter
from ..catalog_queries import CatalogQueryFactory, CatalogQuerySet, ServerVersionFamily
from ..models import QualifiedTableName
from .base import DatabaseDialect
from .sqlanywhere_types import ColumnTypeMapper

import logging
logger = logging.getLogger(__name__)


class SQLAnywhereDialect(DatabaseDialect):
    """Dialect for SQL Anywhere 9, 11, 12, 16 and 17."""

    def __init__(self, default_schema: Optional[str] = None):
        super().__init__(default_schema)
        self._type_mapper = ColumnTypeMapper()
        self._pagination = PaginationRewriter(quote_column=self.quote_column_name)

    @property
    def quote_char(self) -> str:
        return QUOTE_OPEN

    @property
    def quote_char_end(self) -> str:
        return QUOTE_CLOSE

    @property
    def type_mapper(self) -> ColumnTypeMapper:
        return self._type_mapper

    @property
    def pagination(self) -> PaginationRewriter:
        return self._pagination

    def select_exists(self, raw_sql: str) -> str:
        """SQL Anywhere has no boolean EXISTS expression in the select list."""
        return self._pagination.select_exists(raw_sql)

    @property
    def version_query(self) -> str:
        return VERSION_QUERY

    def family_for_version(self, major_version: int) -> ServerVersionFamily:
        return CatalogQueryFactory.family_for_version(major_version)

    def catalog_queries(self, family: ServerVersionFamily) -> CatalogQuerySet:
        return CatalogQueryFactory.create(family)

    def rename_table(self, table: str, new_name: str) -> str:
        """ALTER TABLE ... RENAME; the new name cannot carry an owner."""
        new_name = self.unquote_name(new_name).split(".")[-1]
        return f"ALTER TABLE {self.quote_table_name(table)} RENAME {self.quote_simple_table_name(new_name)}"

    def rename_column(self, table: str, name: str, new_name: str) -> str:
        return (
            f"ALTER TABLE {self.quote_table_name(table)} RENAME "
            f"{self.quote_column_name(name)} TO {self.quote_column_name(new_name)}"
        )

    def alter_column(self, table: str, column: str, type_spec: str) -> str:
        """ALTER TABLE ... MODIFY with abstract types converted to physical ones."""
        return (
            f"ALTER TABLE {self.quote_table_name(table)} MODIFY "
            f"{self.quote_column_name(column)} {self.get_column_type(type_spec)}"
        )

    def reset_sequence_sql(self, table: QualifiedTableName, sequence_name: str,
                           value: int) -> Tuple[str, dict]:
        """
        CALL sa_reset_identity for autoincrement columns, ALTER SEQUENCE for
        sequence-backed ones. Either way the next generated value is value + 1.
        """
        if sequence_name:
            return (
                f"ALTER SEQUENCE {self.quote_table_name(sequence_name)} RESTART WITH {value + 1}",
                {},
            )
        return (
            "CALL sa_reset_identity(:tableName, :owner, :value)",
            {"tableName": table.name, "owner": table.schema_name, "value": value},
        )


# Driver names that all mean SQL Anywhere
DIALECT_NAMES = ("sqlanywhere", "asa", "dblib")


def create_dialect(name: str = "sqlanywhere", default_schema: Optional[str] = None) -> SQLAnywhereDialect:
    """
    Create the dialect for a driver name.

    Raises:
        DialectError: The name is not a SQL Anywhere driver name
    """
    if name.lower() not in DIALECT_NAMES:
        raise DialectError(f"No dialect for database type: {name}")
    return SQLAnywhereDialect(default_schema)

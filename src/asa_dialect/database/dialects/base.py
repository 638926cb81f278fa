"""
Base Database Dialect - Capability bundle for one database engine family

Dialects hold everything that differs between engines:
- Identifier quoting ([brackets] vs "quotes")
- Column type mapping (physical <-> abstract)
- Row limiting (LIMIT vs TOP ... START AT)
- Catalog queries, chosen by server version
- DDL templates for renames and column changes

The schema loader and the facade only talk to this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple
import logging

from ..models import QualifiedTableName
from ..schema_loaders.table_names import parse_table_name

logger = logging.getLogger(__name__)


class DatabaseDialect(ABC):
    """
    Abstract base class for database dialects.

    Usage:
        dialect = create_dialect("sqlanywhere", default_schema="dba")
        dialect.quote_table_name("dba.Users")   # [dba].[Users]
        dialect.compare_table_names("[Users]", "users")   # True
    """

    def __init__(self, default_schema: Optional[str] = None):
        """
        Args:
            default_schema: Owner assumed for unqualified table names
        """
        self._default_schema = default_schema

    # ==================== Identifier Quoting ====================

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used to quote identifiers (e.g., '"' or '[')."""
        pass

    @property
    def quote_char_end(self) -> str:
        """Closing quote character (same as quote_char for most databases)."""
        return self.quote_char

    def quote_identifier(self, identifier: str) -> str:
        """Quote a single identifier (table, column, schema name)."""
        return f"{self.quote_char}{identifier}{self.quote_char_end}"

    def quote_simple_table_name(self, name: str) -> str:
        """Quote a table name without schema prefix, unless already quoted."""
        return name if self.quote_char in name else self.quote_identifier(name)

    def quote_simple_column_name(self, name: str) -> str:
        """Quote a column name without prefix; '*' and quoted names are kept."""
        if name == "*" or self.quote_char in name:
            return name
        return self.quote_identifier(name)

    def quote_table_name(self, name: str) -> str:
        """Quote a possibly schema-qualified table name part by part."""
        if "(" in name:
            return name
        return ".".join(self.quote_simple_table_name(part) for part in name.split("."))

    def quote_column_name(self, name: str) -> str:
        """Quote a possibly table-qualified column name part by part."""
        if "(" in name:
            return name
        prefix, _, column = name.rpartition(".")
        if prefix:
            return f"{self.quote_table_name(prefix)}.{self.quote_simple_column_name(column)}"
        return self.quote_simple_column_name(column)

    def unquote_name(self, name: str) -> str:
        """Remove identifier quoting characters."""
        return name.replace(self.quote_char, "").replace(self.quote_char_end, "")

    # ==================== Table Names ====================

    @property
    def default_schema(self) -> str:
        """Owner assumed for unqualified table names."""
        return self._default_schema or ""

    def resolve_table_name(self, raw_name: str) -> QualifiedTableName:
        """Split a table reference into owner and bare name."""
        return parse_table_name(self.unquote_name(raw_name), self.default_schema)

    def compare_table_names(self, name1: str, name2: str) -> bool:
        """
        Check whether two table references name the same table.

        Quoting and case are ignored; an owner equal to the default
        schema is the same as no owner.
        """
        first = self.resolve_table_name(name1.strip())
        second = self.resolve_table_name(name2.strip())
        return (first.schema_name.lower(), first.name.lower()) == \
            (second.schema_name.lower(), second.name.lower())

    # ==================== Type Mapping ====================

    @property
    @abstractmethod
    def type_mapper(self) -> Any:
        """Physical <-> abstract column type mapper."""
        pass

    def get_column_type(self, type_spec: str) -> str:
        """Convert an abstract type string into this engine's physical type."""
        return self.type_mapper.to_physical(type_spec)

    # ==================== Query Translation ====================

    @property
    @abstractmethod
    def pagination(self) -> Any:
        """Rewriter applying ORDER BY / LIMIT / OFFSET to generated SQL."""
        pass

    def build_order_by_and_limit(self, sql: str, order_by: Any,
                                 limit: Optional[int], offset: Optional[int]) -> str:
        """Append ORDER BY and apply row limiting in this engine's syntax."""
        return self.pagination.apply_order_limit_offset(sql, order_by, limit, offset)

    @abstractmethod
    def select_exists(self, raw_sql: str) -> str:
        """SELECT statement returning 1 if raw_sql yields rows, else 0."""
        pass

    # ==================== Catalog ====================

    @property
    @abstractmethod
    def version_query(self) -> str:
        """SQL returning the server version string as a scalar."""
        pass

    @abstractmethod
    def family_for_version(self, major_version: int) -> Any:
        """Map a major server version to a catalog family (raise if unknown)."""
        pass

    @abstractmethod
    def catalog_queries(self, family: Any) -> Any:
        """Catalog query set for a version family (raise if unknown)."""
        pass

    # ==================== DDL Templates ====================

    @abstractmethod
    def rename_table(self, table: str, new_name: str) -> str:
        """SQL renaming a table."""
        pass

    @abstractmethod
    def rename_column(self, table: str, name: str, new_name: str) -> str:
        """SQL renaming a column."""
        pass

    @abstractmethod
    def alter_column(self, table: str, column: str, type_spec: str) -> str:
        """SQL changing a column's type."""
        pass

    @abstractmethod
    def reset_sequence_sql(self, table: QualifiedTableName, sequence_name: str,
                           value: int) -> Tuple[str, dict]:
        """
        SQL (and parameters) making the next generated key value + 1.

        sequence_name is "" for an autoincrement column, otherwise the
        name of the sequence feeding the primary key.
        """
        pass

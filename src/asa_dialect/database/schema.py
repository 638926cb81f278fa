"""
SQL Anywhere Schema - Entry point tying the dialect pieces to a connection

One SQLAnywhereSchema per connection. It owns the version probe (so the
server is asked for its version once), the schema loader and the
descriptor cache.
"""

from typing import List, Optional
import logging

from ..config import DialectConfig
from ..utils.sql_pagination import OrderBy
from .catalog_queries import ServerVersionFamily
from .dialects import DatabaseDialect, create_dialect
from .executor import QueryExecutor, scalar
from .models import TableDescriptor
from .schema_cache import TableSchemaCache
from .schema_loaders import SchemaLoader
from .version_probe import VersionProbe

logger = logging.getLogger(__name__)


class SQLAnywhereSchema:
    """
    Schema introspection and SQL translation for one SQL Anywhere connection.

    Usage:
        executor = PyodbcExecutor.connect("DSN=sales;UID=dba;PWD=sql")
        schema = SQLAnywhereSchema(executor, DialectConfig(username="dba"))

        table = schema.get_table_schema("Orders")
        sql = schema.translate_pagination("SELECT * FROM Orders", "id DESC", 10, 20)
    """

    def __init__(
        self,
        executor: QueryExecutor,
        config: Optional[DialectConfig] = None,
        dialect: Optional[DatabaseDialect] = None,
    ):
        """
        Args:
            executor: Query execution collaborator bound to the connection
            config: Connection settings (defaults apply when omitted)
            dialect: Dialect to use instead of the default SQL Anywhere one
        """
        self.executor = executor
        self.config = config or DialectConfig()
        self.dialect = dialect or create_dialect(
            "sqlanywhere", default_schema=self.config.effective_default_schema
        )
        self.default_schema = self.dialect.default_schema or self.config.effective_default_schema

        self.version_probe = VersionProbe(
            executor,
            self.dialect.version_query,
            self.dialect.family_for_version,
            version_override=self.config.version_override,
        )
        self.loader = SchemaLoader(
            executor,
            self.dialect,
            self.version_probe,
            self.default_schema,
            excluded_owners=self.config.excluded_owners,
        )

        self.cache: Optional[TableSchemaCache] = None
        if self.config.enable_schema_cache:
            self.cache = TableSchemaCache(
                ttl=self.config.schema_cache_duration,
                maxsize=self.config.schema_cache_maxsize,
            )

    # ==================== Version ====================

    def get_server_version_family(self) -> ServerVersionFamily:
        """Version family of the connected server (probed once)."""
        return self.version_probe.resolve()

    # ==================== Table Metadata ====================

    def load_table_schema(self, name: str) -> Optional[TableDescriptor]:
        """Load table metadata from the catalog, bypassing the cache."""
        return self.loader.load_table_schema(name)

    def get_table_schema(self, name: str, refresh: bool = False) -> Optional[TableDescriptor]:
        """
        Table metadata, served from the cache when enabled.

        Args:
            name: Table name, optionally owner-qualified and quoted
            refresh: Reload from the catalog even if cached

        Returns:
            TableDescriptor, or None if the table does not exist
        """
        if self.cache is None:
            return self.load_table_schema(name)

        table_name = self.loader.resolve_table_name(name)
        if refresh:
            self.cache.invalidate(table_name)
        return self.cache.get_or_load(table_name, lambda: self.loader.load_table_schema(name))

    def refresh_table_schema(self, name: str) -> Optional[TableDescriptor]:
        """Reload one table's metadata."""
        return self.get_table_schema(name, refresh=True)

    def invalidate_cache(self, name: Optional[str] = None) -> None:
        """Forget cached metadata for one table, or for all tables."""
        if self.cache is None:
            return
        if name is None:
            self.cache.invalidate()
            logger.debug("Schema cache cleared")
        else:
            self.cache.invalidate(self.loader.resolve_table_name(name))

    def get_table_names(self, schema: str = "", include_views: bool = True) -> List[str]:
        """
        Names of the tables owned by a schema.

        Args:
            schema: Owner name; the default schema when empty
            include_views: Whether views are listed too
        """
        return self.loader.find_table_names(schema, include_views)

    # ==================== SQL Translation ====================

    def translate_pagination(
        self,
        sql: str,
        order_by: OrderBy = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> str:
        """Append ORDER BY and express LIMIT/OFFSET as TOP ... START AT."""
        return self.dialect.build_order_by_and_limit(sql, order_by, limit, offset)

    def select_exists(self, raw_sql: str) -> str:
        """SELECT returning 1 when raw_sql yields rows, else 0."""
        return self.dialect.select_exists(raw_sql)

    def quote_identifier(self, name: str) -> str:
        return self.dialect.quote_identifier(name)

    def quote_table_name(self, name: str) -> str:
        return self.dialect.quote_table_name(name)

    def compare_table_names(self, name1: str, name2: str) -> bool:
        """Whether two table references name the same table."""
        return self.dialect.compare_table_names(name1, name2)

    # ==================== DDL ====================

    def rename_table(self, table: str, new_name: str) -> str:
        """SQL renaming a table."""
        return self.dialect.rename_table(table, new_name)

    def rename_column(self, table: str, name: str, new_name: str) -> str:
        """SQL renaming a column."""
        return self.dialect.rename_column(table, name, new_name)

    def alter_column_type(self, table: str, column: str, type_spec: str) -> str:
        """SQL changing a column's type; abstract types are converted."""
        return self.dialect.alter_column(table, column, type_spec)

    def reset_sequence(self, name: str, value: Optional[int] = None) -> bool:
        """
        Reset the identity counter or sequence behind a table's primary key.

        The next generated key becomes value + 1. Autoincrement columns go
        through sa_reset_identity; sequence-backed keys restart their sequence.

        Args:
            name: Table name
            value: Last used key value; current MAX(pk) when omitted

        Returns:
            True if the table has an identity or sequence and it was reset
        """
        table = self.get_table_schema(name)
        if table is None or table.sequence_name is None or not table.primary_key:
            logger.debug(f"Table {name} has no identity column, nothing to reset")
            return False

        if value is None:
            qualified = f"{table.schema_name}.{table.name}"
            rows = self.executor.execute(
                f"SELECT MAX({self.dialect.quote_column_name(table.primary_key[0])}) "
                f"FROM {self.dialect.quote_table_name(qualified)}"
            )
            value = scalar(rows)

        value = int(value or 0)
        sql, params = self.dialect.reset_sequence_sql(table.qualified_name, table.sequence_name, value)
        self.executor.execute(sql, params)
        kind = f"sequence {table.sequence_name}" if table.sequence_name else "identity"
        logger.info(f"Reset {kind} of {table.schema_name}.{table.name} to {value}")
        return True

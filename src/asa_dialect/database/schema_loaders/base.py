"""
Schema Loader - Build table descriptors from catalog queries

The loader knows nothing about a particular engine: catalog SQL, type
mapping and quoting all come from the dialect. Loading a table runs these
stages in order, each one depending on the previous:

1. resolve the raw name into owner + bare name
2. reject bare names owned by several users (AmbiguousTableNameError)
3. load primary key column names
4. load columns; no rows (or a failing query) means the table is absent
5. load foreign keys
"""

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple
import logging

from ...constants import AUTOINCREMENT_DEFAULTS, NULL_DEFAULT
from ...errors import AmbiguousTableNameError
from ..executor import QueryExecutor
from ..models import ColumnDescriptor, QualifiedTableName, TableDescriptor
from .foreign_keys import ForeignKeyResolver
from .table_names import TableNameResolver

if TYPE_CHECKING:
    from ..dialects.base import DatabaseDialect
    from ..version_probe import VersionProbe

logger = logging.getLogger(__name__)


def _to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class SchemaLoader:
    """
    Loads complete table metadata through a dialect's catalog queries.

    Usage:
        loader = SchemaLoader(executor, dialect, version_probe, "dba")
        table = loader.load_table_schema("Orders")
        if table is None:
            ...  # no such table
    """

    def __init__(
        self,
        executor: QueryExecutor,
        dialect: "DatabaseDialect",
        version_probe: "VersionProbe",
        default_schema: str,
        excluded_owners: Sequence[str] = (),
    ):
        """
        Args:
            executor: Query execution collaborator
            dialect: Dialect providing catalog SQL and type mapping
            version_probe: Resolves the server version family
            default_schema: Owner assumed for unqualified table names
            excluded_owners: Owners whose tables are never listed
        """
        self.executor = executor
        self.dialect = dialect
        self.version_probe = version_probe
        self.default_schema = default_schema
        self.excluded_owners = {owner.lower() for owner in excluded_owners}
        self.name_resolver = TableNameResolver(executor, dialect.unquote_name)

    def _catalog_queries(self):
        return self.dialect.catalog_queries(self.version_probe.resolve())

    def load_table_schema(self, name: str) -> Optional[TableDescriptor]:
        """
        Load the metadata of a table.

        Args:
            name: Table name, optionally owner-qualified and quoted

        Returns:
            TableDescriptor, or None if the table does not exist

        Raises:
            AmbiguousTableNameError: Bare name owned by several users
            UnsupportedVersionError: Unknown server version
        """
        table_name = self.name_resolver.parse(name, self.default_schema)
        queries = self._catalog_queries()

        if not table_name.explicit_schema:
            owners = self.name_resolver.count_owners(queries.owner_count_query, table_name.name)
            if owners > 1:
                raise AmbiguousTableNameError(table_name.name, owners)

        params = queries.table_params(table_name.name, table_name.schema_name)
        primary_key = self.find_primary_keys(queries, params)

        loaded = self.find_columns(queries, params, primary_key)
        if loaded is None:
            logger.debug(f"Table {table_name.schema_name}.{table_name.name} does not exist")
            return None
        columns, sequence_name = loaded

        foreign_keys = self.find_foreign_keys(queries, params)

        return TableDescriptor(
            qualified_name=table_name,
            primary_key=tuple(primary_key),
            columns=columns,
            foreign_keys=foreign_keys,
            sequence_name=sequence_name,
        )

    def find_primary_keys(self, queries, params: Mapping[str, Any]) -> List[str]:
        """Primary key column names; empty for tables without a primary key."""
        rows = self.executor.execute(queries.primary_keys_query, params)
        primary_key = []
        for row in rows:
            field_name = row["field_name"]
            if field_name is not None and field_name not in primary_key:
                primary_key.append(field_name)
        return primary_key

    def find_columns(
        self,
        queries,
        params: Mapping[str, Any],
        primary_key: Sequence[str],
    ) -> Optional[Tuple[Dict[str, ColumnDescriptor], Optional[str]]]:
        """
        Load column descriptors in catalog order.

        The server reports errors for objects that do not exist, so a
        failing query is treated like an empty result.

        Returns:
            (columns by name, table sequence name) or None if the table is absent
        """
        try:
            rows = self.executor.execute(queries.columns_query, params)
            if not rows:
                return None

            primary_key_names = {name.lower() for name in primary_key}
            columns: Dict[str, ColumnDescriptor] = {}
            sequence_name = None

            for row in rows:
                column = self.load_column_schema(row, primary_key_names)
                if column.name in columns:
                    continue
                if column.is_primary_key:
                    if column.auto_increment:
                        sequence_name = ""
                    elif row.get("sequence_name"):
                        sequence_name = str(row["sequence_name"]).strip()
                columns[column.name] = column
        except Exception as e:
            logger.warning(f"Columns of {params.get('schemaName')}.{params.get('tableName')} "
                           f"could not be loaded, treating table as absent: {e}")
            return None

        return columns, sequence_name

    def load_column_schema(self, info: Mapping[str, Any], primary_key_names: set) -> ColumnDescriptor:
        """
        Build one column descriptor from a catalog row.

        Primary key membership is settled first; the typed default depends
        on it.
        """
        mapper = self.dialect.type_mapper
        name = info["column_name"]
        db_type = info.get("base_type") or ""
        parsed = mapper.parse_physical(db_type)

        if parsed.size is not None:
            size, precision, scale = parsed.size, parsed.precision, parsed.scale
        else:
            size = precision = _to_int(info.get("width"))
            scale = _to_int(info.get("scale"))

        is_primary_key = name.lower() in primary_key_names

        raw_default = info.get("default")
        if raw_default is not None:
            raw_default = str(raw_default)
            if raw_default.strip() == NULL_DEFAULT:
                raw_default = None

        auto_increment = raw_default is not None and \
            raw_default.strip().lower() in AUTOINCREMENT_DEFAULTS
        sequence_backed = bool(info.get("sequence_name"))

        if auto_increment or sequence_backed:
            raw_default = None
            default_value = None
        elif is_primary_key or mapper.is_server_generated_default(parsed.abstract_type, raw_default):
            default_value = None
        else:
            default_value = mapper.cast_default(parsed.abstract_type, raw_default)

        return ColumnDescriptor(
            name=name,
            physical_type=db_type,
            abstract_type=parsed.abstract_type,
            python_type=mapper.python_type(parsed.abstract_type),
            size=size,
            precision=precision,
            scale=scale,
            nullable=info.get("nulls") == "Y",
            is_primary_key=is_primary_key,
            auto_increment=auto_increment,
            unsigned=parsed.unsigned,
            default_value_raw=raw_default,
            default_value=default_value,
            comment=info.get("remarks") or "",
        )

    def find_foreign_keys(self, queries, params: Mapping[str, Any]):
        """Foreign keys of a table, grouped per key."""
        rows = self.executor.execute(queries.foreign_keys_query, params)
        resolver = ForeignKeyResolver(queries.aggregates_foreign_key_columns)
        return resolver.resolve(rows)

    def find_table_names(self, schema: str = "", include_views: bool = True) -> List[str]:
        """
        Names of the tables owned by a schema, without owner prefix.

        Args:
            schema: Owner name; the default schema when empty
            include_views: Whether views are listed too
        """
        schema = schema or self.default_schema
        queries = self._catalog_queries()
        rows = self.executor.execute(queries.table_names_query(include_views), {"schema": schema})
        return [
            row["table_name"]
            for row in rows
            if str(row.get("TABLE_SCHEMA") or "").lower() not in self.excluded_owners
        ]

    def resolve_table_name(self, name: str) -> QualifiedTableName:
        """Owner-qualified form of a raw table reference."""
        return self.name_resolver.parse(name, self.default_schema)

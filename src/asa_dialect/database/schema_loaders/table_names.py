"""
Table Name Resolution - Owner-qualified table references

SQL Anywhere has no catalogs: a reference is either "name" or
"owner.name". Several owners may each have a table with the same bare
name, in which case the bare name is ambiguous.
"""
import logging
from typing import Callable

from ..executor import QueryExecutor, scalar
from ..models import QualifiedTableName

logger = logging.getLogger(__name__)


def parse_table_name(name: str, default_schema: str) -> QualifiedTableName:
    """
    Split an unquoted table reference into owner and bare name.

    parse_table_name("dbo.Users", "dbo")  -> ("dbo", "Users", full_name "Users")
    parse_table_name("acme.Users", "dbo") -> ("acme", "Users", full_name "acme.Users")
    parse_table_name("Users", "dbo")      -> ("dbo", "Users", full_name "Users")
    """
    parts = name.split(".")
    if len(parts) == 2:
        schema_name, table_name = parts
        if schema_name != default_schema:
            full_name = f"{schema_name}.{table_name}"
        else:
            full_name = table_name
        return QualifiedTableName(schema_name, table_name, full_name, explicit_schema=True)

    table_name = parts[-1]
    return QualifiedTableName(default_schema, table_name, table_name)


class TableNameResolver:
    """
    Resolves raw table references and counts same-named tables.

    Usage:
        resolver = TableNameResolver(executor, dialect.unquote_name)
        qualified = resolver.parse("[dba].[Users]", "dba")
        owners = resolver.count_owners(owner_count_sql, "Users")
    """

    def __init__(self, executor: QueryExecutor, unquote: Callable[[str], str]):
        """
        Args:
            executor: Query execution collaborator
            unquote: Strips the dialect's identifier quoting
        """
        self.executor = executor
        self.unquote = unquote

    def parse(self, raw_name: str, default_schema: str) -> QualifiedTableName:
        """Strip quoting and split a raw reference into owner and bare name."""
        return parse_table_name(self.unquote(raw_name.strip()), default_schema)

    def count_owners(self, owner_count_query: str, name: str) -> int:
        """Number of distinct owners having a table called `name`."""
        count = scalar(self.executor.execute(owner_count_query, {"tableName": name}))
        return int(count or 0)

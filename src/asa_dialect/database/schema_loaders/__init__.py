"""
Schema Loaders - Table metadata loading from catalog queries

The loader is engine-agnostic; the dialect supplies catalog SQL, type
mapping and quoting.
"""

from .table_names import TableNameResolver, parse_table_name
from .foreign_keys import ForeignKeyResolver
from .base import SchemaLoader

__all__ = [
    "SchemaLoader",
    "TableNameResolver",
    "ForeignKeyResolver",
    "parse_table_name",
]

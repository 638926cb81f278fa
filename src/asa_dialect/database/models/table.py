"""
TableDescriptor model - Complete metadata of one table
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .column import ColumnDescriptor
from .foreign_key import ForeignKeyDescriptor
from .qualified_name import QualifiedTableName


@dataclass(frozen=True)
class TableDescriptor:
    """
    Table metadata assembled by the schema loader.

    columns preserves catalog column order. sequence_name is None when the
    table has no identity column, "" for an identity column without a named
    sequence, or the name of the sequence backing the primary key.
    """
    qualified_name: QualifiedTableName
    primary_key: Tuple[str, ...] = ()
    columns: Mapping[str, ColumnDescriptor] = field(
        default_factory=lambda: MappingProxyType({})
    )
    foreign_keys: Tuple[ForeignKeyDescriptor, ...] = ()
    sequence_name: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.columns, MappingProxyType):
            object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @property
    def name(self) -> str:
        return self.qualified_name.name

    @property
    def schema_name(self) -> str:
        return self.qualified_name.schema_name

    @property
    def full_name(self) -> str:
        return self.qualified_name.full_name

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(self.columns)

    def get_column(self, name: str) -> Optional[ColumnDescriptor]:
        """Find a column by name, ignoring case."""
        column = self.columns.get(name)
        if column is not None:
            return column
        lowered = name.lower()
        for column_name, column in self.columns.items():
            if column_name.lower() == lowered:
                return column
        return None

"""
Data models for table metadata
"""
from .qualified_name import QualifiedTableName
from .column import AbstractType, ColumnDescriptor
from .foreign_key import ForeignKeyDescriptor
from .table import TableDescriptor

__all__ = [
    "QualifiedTableName",
    "AbstractType",
    "ColumnDescriptor",
    "ForeignKeyDescriptor",
    "TableDescriptor",
]

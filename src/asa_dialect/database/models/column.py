"""
Column model - Abstract column types and column metadata
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AbstractType(str, Enum):
    """Portable column type names."""
    PK = "pk"
    UPK = "upk"
    BIGPK = "bigpk"
    UBIGPK = "ubigpk"
    CHAR = "char"
    VARCHAR = "varchar"
    STRING = "string"
    TEXT = "text"
    TINYINT = "tinyint"
    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"
    BINARY = "binary"
    BOOLEAN = "boolean"
    MONEY = "money"


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Metadata of one table column.

    is_primary_key stays None until the column has been cross-referenced
    with the table's primary key list; descriptors returned by the schema
    loader always carry True or False.
    """
    name: str
    physical_type: str
    abstract_type: AbstractType = AbstractType.STRING
    python_type: type = str
    size: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    nullable: bool = True
    is_primary_key: Optional[bool] = None
    auto_increment: bool = False
    unsigned: bool = False
    default_value_raw: Optional[str] = None
    default_value: Any = None
    comment: str = ""

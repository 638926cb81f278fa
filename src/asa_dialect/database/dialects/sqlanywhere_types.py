"""
SQL Anywhere Column Types - Map between physical and abstract column types

Physical type strings come from the catalog (domain names such as
"decimal", "long varchar", "unsigned int") or from DDL ("bit(32)",
"decimal(18,2)"). Abstract types are the portable AbstractType names.
"""
import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from ...constants import CURRENT_TIME_DEFAULTS
from ..models import AbstractType

logger = logging.getLogger(__name__)


# Physical type (full phrase or leading word) -> abstract type
PHYSICAL_TO_ABSTRACT: Dict[str, AbstractType] = {
    # exact numbers
    "bigint": AbstractType.BIGINT,
    "numeric": AbstractType.DECIMAL,
    "bit": AbstractType.SMALLINT,
    "smallint": AbstractType.SMALLINT,
    "decimal": AbstractType.DECIMAL,
    "integer": AbstractType.INTEGER,
    "int": AbstractType.INTEGER,
    "tinyint": AbstractType.SMALLINT,
    "money": AbstractType.MONEY,
    "smallmoney": AbstractType.MONEY,
    # approximate numbers
    "float": AbstractType.FLOAT,
    "double": AbstractType.DOUBLE,
    "real": AbstractType.FLOAT,
    # date and time
    "date": AbstractType.DATE,
    "datetime": AbstractType.DATETIME,
    "smalldatetime": AbstractType.DATETIME,
    "timestamp": AbstractType.TIMESTAMP,
    "time": AbstractType.TIME,
    # character strings
    "char": AbstractType.CHAR,
    "nchar": AbstractType.CHAR,
    "varchar": AbstractType.VARCHAR,
    "nvarchar": AbstractType.STRING,
    "text": AbstractType.TEXT,
    "ntext": AbstractType.TEXT,
    "long varchar": AbstractType.TEXT,
    "long nvarchar": AbstractType.TEXT,
    "xml": AbstractType.TEXT,
    # binary strings
    "binary": AbstractType.BINARY,
    "varbinary": AbstractType.BINARY,
    "long binary": AbstractType.BINARY,
    "image": AbstractType.BINARY,
}

# Abstract type -> physical type used in DDL
ABSTRACT_TO_PHYSICAL: Dict[AbstractType, str] = {
    AbstractType.PK: "int IDENTITY PRIMARY KEY",
    AbstractType.UPK: "int IDENTITY PRIMARY KEY",
    AbstractType.BIGPK: "bigint IDENTITY PRIMARY KEY",
    AbstractType.UBIGPK: "bigint IDENTITY PRIMARY KEY",
    AbstractType.CHAR: "nchar(1)",
    AbstractType.VARCHAR: "varchar(255)",
    AbstractType.STRING: "nvarchar(255)",
    AbstractType.TEXT: "nvarchar(32767)",
    AbstractType.TINYINT: "tinyint",
    AbstractType.SMALLINT: "smallint",
    AbstractType.INTEGER: "int",
    AbstractType.BIGINT: "bigint",
    AbstractType.FLOAT: "float",
    AbstractType.DOUBLE: "float",
    AbstractType.DECIMAL: "decimal(18,0)",
    AbstractType.DATETIME: "datetime",
    AbstractType.TIMESTAMP: "timestamp",
    AbstractType.TIME: "time",
    AbstractType.DATE: "date",
    AbstractType.BINARY: "varbinary(32767)",
    AbstractType.BOOLEAN: "bit",
    AbstractType.MONEY: "decimal(19,2)",
}

PYTHON_TYPES: Dict[AbstractType, type] = {
    AbstractType.TINYINT: int,
    AbstractType.SMALLINT: int,
    AbstractType.INTEGER: int,
    AbstractType.BIGINT: int,
    AbstractType.PK: int,
    AbstractType.UPK: int,
    AbstractType.BIGPK: int,
    AbstractType.UBIGPK: int,
    AbstractType.BOOLEAN: bool,
    AbstractType.FLOAT: float,
    AbstractType.DOUBLE: float,
    AbstractType.DECIMAL: Decimal,
    AbstractType.MONEY: Decimal,
    AbstractType.BINARY: bytes,
}

# Types where an empty default is an empty string rather than "no default"
_STRING_TYPES = (
    AbstractType.CHAR,
    AbstractType.VARCHAR,
    AbstractType.STRING,
    AbstractType.TEXT,
    AbstractType.BINARY,
)

_TEMPORAL_TYPES = (
    AbstractType.TIMESTAMP,
    AbstractType.DATETIME,
    AbstractType.DATE,
    AbstractType.TIME,
)

_TRUE_VALUES = ("1", "true", "y", "yes", "on")
_FALSE_VALUES = ("0", "false", "n", "no", "off")

_PHYSICAL_RE = re.compile(r"^(\w+)((?:\s+\w+)*)\s*(?:\(([^)]+)\))?")
_UNSIGNED_RE = re.compile(r"\bunsigned\b", re.IGNORECASE)
_ABSTRACT_WITH_ARGS_RE = re.compile(r"^(\w+)\((.+?)\)(.*)$", re.DOTALL)
_ABSTRACT_WITH_SUFFIX_RE = re.compile(r"^(\w+)\s+", re.DOTALL)


@dataclass(frozen=True)
class PhysicalType:
    """Result of parsing a physical type string."""
    base_token: str
    abstract_type: AbstractType
    size: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    unsigned: bool = False


class ColumnTypeMapper:
    """
    Bidirectional mapping between SQL Anywhere and abstract column types.

    Pure functions of their arguments; one instance can be shared freely.
    """

    def to_abstract(self, physical_token: str) -> AbstractType:
        """Map a physical type name to its abstract type (STRING if unknown)."""
        if not physical_token:
            return AbstractType.STRING
        token = _UNSIGNED_RE.sub("", physical_token).strip().lower()
        token = re.sub(r"\s+", " ", token.split("(")[0]).strip()
        if token in PHYSICAL_TO_ABSTRACT:
            return PHYSICAL_TO_ABSTRACT[token]
        leading = token.split(" ")[0] if token else ""
        return PHYSICAL_TO_ABSTRACT.get(leading, AbstractType.STRING)

    def parse_physical(self, db_type: str) -> PhysicalType:
        """
        Parse a physical type string such as "decimal(18,2)" or "bit(32)".

        A single argument sets size and precision, a pair also sets scale.
        Width-1 tinyint/bit is boolean; bit(32) is integer and wider bit
        fields are bigint. Unparseable strings map to STRING.
        """
        db_type = (db_type or "").strip()
        unsigned = bool(_UNSIGNED_RE.search(db_type))
        stripped = _UNSIGNED_RE.sub("", db_type).strip()

        match = _PHYSICAL_RE.match(stripped.lower())
        if not match:
            logger.warning(f"Cannot parse physical type {db_type!r}, using string")
            return PhysicalType(base_token="", abstract_type=AbstractType.STRING,
                                unsigned=unsigned)

        base_token = match.group(1)
        abstract_type = self.to_abstract(stripped)
        size = precision = scale = None

        if match.group(3):
            try:
                values = [int(v.strip()) for v in match.group(3).split(",")]
            except ValueError:
                logger.warning(f"Non-numeric size in physical type {db_type!r}")
                values = []
            if values:
                size = precision = values[0]
                if len(values) > 1:
                    scale = values[1]
                abstract_type = self._refine(base_token, size, abstract_type)

        return PhysicalType(
            base_token=base_token,
            abstract_type=abstract_type,
            size=size,
            precision=precision,
            scale=scale,
            unsigned=unsigned,
        )

    @staticmethod
    def _refine(base_token: str, size: int, abstract_type: AbstractType) -> AbstractType:
        """Narrow the abstract type of sized tinyint/bit columns."""
        if size == 1 and base_token in ("tinyint", "bit"):
            return AbstractType.BOOLEAN
        if base_token == "bit":
            if size > 32:
                return AbstractType.BIGINT
            if size == 32:
                return AbstractType.INTEGER
        return abstract_type

    def python_type(self, abstract_type: AbstractType) -> type:
        """Python type holding values of an abstract type."""
        return PYTHON_TYPES.get(abstract_type, str)

    def to_physical(self, type_spec: str) -> str:
        """
        Convert an abstract type string into a physical type.

        "string" -> "nvarchar(255)"
        "string(64)" -> "nvarchar(64)"
        "string not null" -> "nvarchar(255) not null"

        Anything not starting with an abstract type is returned unchanged.
        """
        key = self._abstract_key(type_spec)
        if key is not None:
            return ABSTRACT_TO_PHYSICAL[key]

        match = _ABSTRACT_WITH_ARGS_RE.match(type_spec)
        if match:
            key = self._abstract_key(match.group(1))
            if key is not None:
                physical = re.sub(r"\(.+\)", f"({match.group(2)})", ABSTRACT_TO_PHYSICAL[key])
                return physical + match.group(3)
            return type_spec

        match = _ABSTRACT_WITH_SUFFIX_RE.match(type_spec)
        if match:
            key = self._abstract_key(match.group(1))
            if key is not None:
                return ABSTRACT_TO_PHYSICAL[key] + type_spec[len(match.group(1)):]

        return type_spec

    @staticmethod
    def _abstract_key(name: str) -> Optional[AbstractType]:
        try:
            key = AbstractType(name)
        except ValueError:
            return None
        return key if key in ABSTRACT_TO_PHYSICAL else None

    def is_server_generated_default(self, abstract_type: AbstractType, raw_default: Optional[str]) -> bool:
        """True for temporal columns defaulting to the current time."""
        if raw_default is None or abstract_type not in _TEMPORAL_TYPES:
            return False
        return raw_default.strip().lower() in CURRENT_TIME_DEFAULTS

    def cast_default(self, abstract_type: AbstractType, raw_default: Optional[str]) -> Any:
        """
        Convert a raw catalog default into a Python value.

        Quoted literals are unquoted. Defaults that are expressions rather
        than literals of the column's type are returned unchanged.
        """
        if raw_default is None:
            return None
        if raw_default == "" and abstract_type not in _STRING_TYPES:
            return None

        value = raw_default.strip()
        if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
            value = value[1:-1].replace("''", "'")

        python_type = self.python_type(abstract_type)
        if python_type is str or python_type is bytes:
            return value

        if python_type is bool:
            lowered = value.lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            return raw_default

        try:
            if python_type is int:
                return int(value)
            if python_type is float:
                return float(value)
            return Decimal(value)
        except (ValueError, InvalidOperation):
            logger.debug(f"Default {raw_default!r} is not a {python_type.__name__} literal")
            return raw_default

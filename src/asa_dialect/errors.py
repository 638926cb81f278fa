"""
Exceptions raised by the SQL Anywhere dialect.

A table that does not exist is not an error: loaders return None for it.
"""
from typing import Optional, Union


class DialectError(Exception):
    """Base class for all dialect errors."""


class UnsupportedVersionError(DialectError):
    """The server reports a version whose catalog layout is unknown."""

    def __init__(self, version: Union[int, str, None], message: Optional[str] = None):
        self.version = version
        super().__init__(
            message or f"This version of SQL Anywhere (ver. {version}) is not supported."
        )


class AmbiguousTableNameError(DialectError):
    """A bare table name matches tables of more than one owner."""

    def __init__(self, table_name: str, owner_count: int):
        self.table_name = table_name
        self.owner_count = owner_count
        super().__init__(
            f"There are {owner_count} tables named '{table_name}' owned by different users, "
            f"please specify the owner of the table."
        )


class ConfigError(DialectError):
    """Invalid dialect configuration."""

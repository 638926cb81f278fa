"""
ASA Dialect - SQL Anywhere schema introspection and SQL dialect translation
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("asa-dialect")
except PackageNotFoundError:
    # Package not installed
    __version__ = "0.1.0"

from .config import DialectConfig, load_config
from .errors import (
    DialectError,
    UnsupportedVersionError,
    AmbiguousTableNameError,
    ConfigError,
)
from .database.schema import SQLAnywhereSchema

__all__ = [
    "SQLAnywhereSchema",
    "DialectConfig",
    "load_config",
    "DialectError",
    "UnsupportedVersionError",
    "AmbiguousTableNameError",
    "ConfigError",
    "__version__",
]

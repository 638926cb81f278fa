"""
Dialect Configuration - Connection-level settings read from YAML or dicts.

Example file:

    asa_dialect:
      username: webuser
      default_schema: dba
      version_override: 12
      enable_schema_cache: true
      schema_cache_duration: 600
"""
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .constants import (
    DEFAULT_SCHEMA,
    EXCLUDED_OWNERS,
    SCHEMA_CACHE_DURATION_S,
    SCHEMA_CACHE_MAXSIZE,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)

# Top-level key under which settings may be nested in a shared YAML file
CONFIG_SECTION = "asa_dialect"


@dataclass
class DialectConfig:
    """Settings supplied by the application that owns the connection."""
    username: Optional[str] = None
    default_schema: Optional[str] = None
    version_override: Optional[int] = None
    enable_schema_cache: bool = True
    schema_cache_duration: int = SCHEMA_CACHE_DURATION_S
    schema_cache_maxsize: int = SCHEMA_CACHE_MAXSIZE
    excluded_owners: List[str] = field(default_factory=lambda: list(EXCLUDED_OWNERS))

    def __post_init__(self):
        if self.version_override is not None:
            try:
                self.version_override = int(self.version_override)
            except (TypeError, ValueError):
                raise ConfigError(
                    f"version_override must be an integer, got {self.version_override!r}"
                )
        if self.schema_cache_duration <= 0:
            raise ConfigError("schema_cache_duration must be positive")
        if self.schema_cache_maxsize <= 0:
            raise ConfigError("schema_cache_maxsize must be positive")

    @property
    def effective_default_schema(self) -> str:
        """Owner assumed for unqualified table names."""
        return self.default_schema or self.username or DEFAULT_SCHEMA

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DialectConfig":
        """
        Build a config from a plain mapping.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        excluded = data.get("excluded_owners")
        if excluded is not None and not isinstance(excluded, (list, tuple)):
            raise ConfigError("excluded_owners must be a list")

        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(str(e)) from e


def load_config(path: Union[str, Path]) -> DialectConfig:
    """
    Load dialect configuration from a YAML file.

    Settings may sit at the top level or under an `asa_dialect:` section.

    Args:
        path: Path to the YAML file

    Returns:
        DialectConfig instance
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(data, dict) and CONFIG_SECTION in data:
        data = data[CONFIG_SECTION]

    config = DialectConfig.from_dict(data)
    logger.debug(f"Loaded dialect configuration from {path}")
    return config

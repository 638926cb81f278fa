"""
Version Probe - Detect the server's version family once per connection
"""
import logging
import re
import threading
from typing import Any, Callable, Optional

from ..errors import UnsupportedVersionError
from .executor import QueryExecutor, scalar

logger = logging.getLogger(__name__)

_LEADING_NUMBER_RE = re.compile(r"^\s*(\d+)")


def parse_major_version(version_string: Any) -> int:
    """
    Extract the leading numeric component of a version string.

    "17.0.10.6057" -> 17

    Raises:
        UnsupportedVersionError: No leading number
    """
    if version_string is None:
        raise UnsupportedVersionError(None, "The server did not report a version.")
    match = _LEADING_NUMBER_RE.match(str(version_string))
    if not match:
        raise UnsupportedVersionError(version_string)
    return int(match.group(1))


class VersionProbe:
    """
    Resolves and caches the server version family.

    The cached family is shared by every lookup on the connection and
    only re-resolved after invalidate().
    """

    def __init__(
        self,
        executor: QueryExecutor,
        version_query: str,
        family_for_version: Callable[[int], Any],
        version_override: Optional[int] = None,
    ):
        """
        Args:
            executor: Query execution collaborator
            version_query: SQL returning the version string as a scalar
            family_for_version: Maps a major version to a family (raises if unsupported)
            version_override: Major version to use instead of asking the server
        """
        self.executor = executor
        self.version_query = version_query
        self.family_for_version = family_for_version
        self.version_override = version_override
        self._family = None
        self._major_version: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def major_version(self) -> Optional[int]:
        """Major version of the last successful resolve()."""
        return self._major_version

    def resolve(self):
        """
        Return the server version family, querying the server on first use.

        Raises:
            UnsupportedVersionError: Unknown or unparseable version
        """
        family = self._family
        if family is not None:
            return family

        with self._lock:
            if self._family is not None:
                return self._family

            if self.version_override is not None:
                major = int(self.version_override)
                logger.debug(f"Using configured server version {major}")
            else:
                version_string = scalar(self.executor.execute(self.version_query))
                major = parse_major_version(version_string)
                logger.info(f"Server reports version {version_string}")

            family = self.family_for_version(major)
            self._major_version = major
            self._family = family
            logger.debug(f"Resolved version family {family} for major version {major}")
            return family

    def invalidate(self):
        """Forget the cached family so the next resolve() asks again."""
        with self._lock:
            self._family = None
            self._major_version = None

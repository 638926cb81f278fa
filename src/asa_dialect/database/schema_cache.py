"""
Table Schema Cache - TTL cache of loaded table descriptors.

Entries are keyed by "owner.name" in lower case so that every spelling of
a table reference shares one entry. Absent tables are not cached. The lock
only guards the cache itself; catalog loads happen outside it.
"""
from typing import Callable, Optional
import logging
import threading

from cachetools import TTLCache

from ..constants import SCHEMA_CACHE_DURATION_S, SCHEMA_CACHE_MAXSIZE
from .models import QualifiedTableName, TableDescriptor

logger = logging.getLogger(__name__)


class TableSchemaCache:
    """
    Thread-safe cache of TableDescriptor objects with TTL expiration.

    Usage:
        cache = TableSchemaCache(ttl=600)
        table = cache.get_or_load(qualified, lambda: loader.load_table_schema(name))
        cache.invalidate(qualified)  # or cache.invalidate() for everything
    """

    def __init__(self, ttl: int = SCHEMA_CACHE_DURATION_S, maxsize: int = SCHEMA_CACHE_MAXSIZE):
        """
        Args:
            ttl: Seconds an entry stays valid
            maxsize: Maximum number of cached tables
        """
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl)
        self._lock = threading.RLock()

    def get(self, table_name: QualifiedTableName) -> Optional[TableDescriptor]:
        """Cached descriptor, or None if missing or expired."""
        with self._lock:
            return self._cache.get(table_name.cache_key)

    def put(self, table_name: QualifiedTableName, table: TableDescriptor) -> None:
        """Store a descriptor."""
        with self._lock:
            self._cache[table_name.cache_key] = table

    def get_or_load(
        self,
        table_name: QualifiedTableName,
        loader: Callable[[], Optional[TableDescriptor]],
    ) -> Optional[TableDescriptor]:
        """
        Get from cache or load and cache (None results are not stored).

        The loader runs without holding the lock, so lookups of other
        tables are never blocked by a catalog load. Concurrent loads of the
        same table may both run; the last one stored wins.
        """
        key = table_name.cache_key
        with self._lock:
            table = self._cache.get(key)
        if table is not None:
            logger.debug(f"Schema cache hit: {key}")
            return table

        table = loader()
        if table is not None:
            with self._lock:
                self._cache[key] = table
        return table

    def invalidate(self, table_name: Optional[QualifiedTableName] = None) -> None:
        """
        Drop one table's entry, or every entry when no table is given.
        """
        with self._lock:
            if table_name is None:
                self._cache.clear()
                return
            self._cache.pop(table_name.cache_key, None)

    def __contains__(self, table_name: QualifiedTableName) -> bool:
        with self._lock:
            return table_name.cache_key in self._cache

    def cache_info(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            return {
                "size": len(self._cache),
                "maxsize": self._cache.maxsize,
                "ttl": self._cache.ttl,
                "keys": list(self._cache.keys()),
            }

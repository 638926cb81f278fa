"""
Catalog Query Factory - Pick the catalog SQL for a server version
"""
import logging
from typing import Dict, Type

from ...errors import UnsupportedVersionError
from .base import CatalogQuerySet, ServerVersionFamily

logger = logging.getLogger(__name__)


class CatalogQueryFactory:
    """
    Registry mapping server versions to catalog query sets.

    Usage:
        family = CatalogQueryFactory.family_for_version(12)
        queries = CatalogQueryFactory.create(family)
        rows = executor.execute(queries.columns_query, queries.table_params("Users", "dba"))
    """

    # Major version number -> family
    _versions: Dict[int, ServerVersionFamily] = {}

    # Family -> implementation
    _query_sets: Dict[ServerVersionFamily, Type[CatalogQuerySet]] = {}

    @classmethod
    def family_for_version(cls, major_version: int) -> ServerVersionFamily:
        """
        Map a major server version to its catalog family.

        Raises:
            UnsupportedVersionError: The version has no known catalog layout
        """
        family = cls._versions.get(major_version)
        if family is None:
            raise UnsupportedVersionError(major_version)
        return family

    @classmethod
    def create(cls, family: ServerVersionFamily) -> CatalogQuerySet:
        """
        Create the query set for a family.

        Raises:
            UnsupportedVersionError: No query set is registered for the family
        """
        query_set_class = cls._query_sets.get(family)
        if query_set_class is None:
            raise UnsupportedVersionError(getattr(family, "value", family))
        return query_set_class()

    @classmethod
    def is_supported(cls, major_version: int) -> bool:
        """Check if a major server version is supported."""
        return major_version in cls._versions

    @classmethod
    def supported_versions(cls) -> list:
        """Get the supported major versions."""
        return sorted(cls._versions)

    @classmethod
    def register(cls, query_set_class: Type[CatalogQuerySet], *major_versions: int):
        """
        Register a query set for one or more major versions.

        Args:
            query_set_class: CatalogQuerySet subclass
            major_versions: Server major versions sharing its catalog layout
        """
        cls._query_sets[query_set_class.family] = query_set_class
        for major_version in major_versions:
            cls._versions[major_version] = query_set_class.family
        logger.debug(f"Registered catalog queries for versions: {major_versions}")


def _register_default_query_sets():
    """Register built-in query sets. Called on module import."""
    from .asa9 import ASA9CatalogQueries
    from .asa11 import ASA11CatalogQueries
    from .asa12 import ASA12CatalogQueries

    CatalogQueryFactory.register(ASA9CatalogQueries, 9)
    CatalogQueryFactory.register(ASA11CatalogQueries, 11)
    CatalogQueryFactory.register(ASA12CatalogQueries, 12, 16, 17)


# Register on module import
_register_default_query_sets()

"""
Catalog Queries - Version specific SQL reading the SQL Anywhere catalog

Usage:
    from asa_dialect.database.catalog_queries import CatalogQueryFactory

    family = CatalogQueryFactory.family_for_version(16)
    queries = CatalogQueryFactory.create(family)
"""

from .base import CatalogQuerySet, ServerVersionFamily
from .factory import CatalogQueryFactory

from .asa9 import ASA9CatalogQueries
from .asa11 import ASA11CatalogQueries
from .asa12 import ASA12CatalogQueries

__all__ = [
    "CatalogQuerySet",
    "ServerVersionFamily",
    "CatalogQueryFactory",
    "ASA9CatalogQueries",
    "ASA11CatalogQueries",
    "ASA12CatalogQueries",
]

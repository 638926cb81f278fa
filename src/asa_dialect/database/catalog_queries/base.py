"""
Base Catalog Query Set - Catalog SQL for one server version family

Every implementation returns rows with the same column labels so that the
schema loader never branches on the server version:

- primary keys:  field_name
- columns:       column_name, base_type, width, scale, nulls, unique, pkey,
                 default, sequence_name, remarks
- foreign keys:  FK_KEY_ID, FK_COLUMN_NAME, UQ_TABLE_NAME, UQ_COLUMN_NAME
- table names:   table_name, TABLE_SCHEMA

All queries take the :tableName and :schemaName parameters (table names
take :schema only).
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict


class ServerVersionFamily(Enum):
    """Groups of server versions sharing one catalog layout."""
    V9 = "9"
    V11 = "11"
    V12_16_17 = "12-16-17"


class CatalogQuerySet(ABC):
    """
    Catalog SQL templates for one ServerVersionFamily.

    Adding a family means adding a subclass and registering it in
    CatalogQueryFactory.
    """

    family: ServerVersionFamily

    # Foreign key rows carry comma separated column lists (one row per key)
    aggregates_foreign_key_columns: bool = False

    # Catalog view joined to resolve a table creator's user name
    users_table: str = "SYS.SYSUSER"

    @property
    @abstractmethod
    def primary_keys_query(self) -> str:
        """Primary key column names of a table."""
        pass

    @property
    @abstractmethod
    def columns_query(self) -> str:
        """Column rows of a table, ordered by column_id."""
        pass

    @property
    @abstractmethod
    def foreign_keys_query(self) -> str:
        """Foreign key rows of a table in declared column order."""
        pass

    @property
    def owner_count_query(self) -> str:
        """Number of distinct owners having a table with a given bare name."""
        return (
            "SELECT COUNT(DISTINCT creator) AS cnt FROM SYS.SYSTABLE "
            "WHERE UPPER(table_name) = UPPER(:tableName)"
        )

    def table_names_query(self, include_views: bool = True) -> str:
        """Names of the tables (and views) owned by :schema."""
        condition = "table_type IN ('BASE', 'VIEW')" if include_views else "table_type = 'BASE'"
        return f"""
SELECT trim(table_name) AS table_name, trim(user_name) AS TABLE_SCHEMA
FROM SYS.SYSTABLE
LEFT OUTER JOIN {self.users_table} ON
    creator = user_id
WHERE
    UPPER(user_name) = UPPER(:schema) AND
    creator <> 0 AND
    {condition}
ORDER BY table_name
"""

    @staticmethod
    def table_params(table_name: str, schema_name: str) -> Dict[str, str]:
        """Bound values for the per-table templates."""
        return {"tableName": table_name, "schemaName": schema_name}

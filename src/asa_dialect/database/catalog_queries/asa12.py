"""
SQL Anywhere 12, 16 and 17 catalog queries.

Same catalog as version 11, plus sequence-backed identity columns
(SYSSEQUENCE). Column remarks are not read for this family.
"""
from .asa11 import FOREIGN_KEYS_QUERY, PRIMARY_KEYS_QUERY
from .base import CatalogQuerySet, ServerVersionFamily


class ASA12CatalogQueries(CatalogQuerySet):
    """Catalog queries for SQL Anywhere 12, 16 and 17."""

    family = ServerVersionFamily.V12_16_17

    @property
    def primary_keys_query(self) -> str:
        return PRIMARY_KEYS_QUERY

    @property
    def columns_query(self) -> str:
        return """
SELECT DISTINCT
    C.column_id, C.object_id, trim(C.column_name) AS column_name, trim(D.domain_name) AS base_type,
    C.width, C.scale, Y.type_name, C.[nulls] AS nulls,
    IFNULL( IU.index_id, 'N', 'Y' ) AS [unique], IFNULL( XP.index_id, 'N', 'Y' ) AS pkey,
    C.column_type, C.[default] AS [default], Q.sequence_name AS sequence_name,
    C.[compressed], C.lob_index, NULL AS remarks
FROM SYS.SYSTABCOL C
JOIN SYS.SYSDOMAIN D ON
    D.domain_id = C.domain_id
LEFT OUTER JOIN SYS.SYSUSERTYPE Y ON
    Y.type_id = C.user_type
LEFT OUTER JOIN SYS.SYSIDX IU ON
    IU.table_id = C.table_id AND
    IU.index_category = 3 AND
    IU.[unique] = 2 AND
    (SELECT COUNT(*) FROM SYS.SYSIDXCOL XA WHERE XA.table_id = IU.table_id AND XA.index_id = IU.index_id AND XA.column_id = C.column_id) = 1 AND
    (SELECT COUNT(*) FROM SYS.SYSIDXCOL XB WHERE XB.table_id = IU.table_id AND XB.index_id = IU.index_id AND XB.column_id <> C.column_id) = 0
LEFT OUTER JOIN SYS.SYSIDXCOL XP ON
    XP.table_id = C.table_id AND
    XP.column_id = C.column_id AND
    XP.index_id = 0
JOIN SYS.SYSTAB T ON
    T.table_id = C.table_id
LEFT OUTER JOIN SYS.SYSSEQUENCE Q ON
    C.[default] LIKE string('%', Q.sequence_name, '%')
JOIN SYS.SYSUSER U ON
    U.user_id = T.creator
WHERE
    upper(U.user_name) = upper(:schemaName) AND
    upper(T.table_name) = upper(:tableName)
ORDER BY C.column_id
"""

    @property
    def foreign_keys_query(self) -> str:
        return FOREIGN_KEYS_QUERY

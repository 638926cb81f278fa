"""
SQL Anywhere 11 catalog queries.

Version 11 introduced SYSTAB/SYSTABCOL/SYSIDX; creators resolve through
SYSUSER and column remarks live in SYSREMARK. Identity sequences do not
exist yet.
"""
from .base import CatalogQuerySet, ServerVersionFamily

# Shared by every family from 11 on
PRIMARY_KEYS_QUERY = """
SELECT
    trim(c.column_name) AS field_name
FROM SYS.SYSTABLE t
LEFT OUTER JOIN SYS.SYSUSER U ON
    U.user_id = t.creator
LEFT OUTER JOIN SYS.SYSCOLUMN c ON
    t.table_id = c.table_id
LEFT OUTER JOIN SYS.SYSIDXCOL i ON
    t.table_id = i.table_id AND
    i.index_id = 0 AND
    c.column_id = i.column_id
WHERE
    upper(t.table_name) = upper(:tableName) AND
    upper(U.user_name)  = upper(:schemaName) AND
    c.pkey = 'Y'
ORDER BY i.sequence, c.column_id
"""

FOREIGN_KEYS_QUERY = """
SELECT
    I.index_id AS FK_KEY_ID, trim(C.column_name) AS FK_COLUMN_NAME,
    trim(PT.table_name) AS UQ_TABLE_NAME, trim(PC.column_name) AS UQ_COLUMN_NAME
FROM SYS.SYSIDX I
JOIN SYS.SYSTABLE T ON
    T.table_id = I.table_id
JOIN SYS.SYSUSER U ON
    U.user_id = T.creator
JOIN SYS.SYSIDXCOL X ON
    X.table_id = I.table_id AND
    X.index_id = I.index_id
JOIN SYS.SYSTABCOL C ON
    C.table_id = X.table_id AND
    C.column_id = X.column_id
LEFT OUTER JOIN (
    SYS.SYSFKEY F JOIN SYS.SYSIDX PI ON
        PI.table_id = F.primary_table_id AND
        PI.index_id = F.primary_index_id
    JOIN SYS.SYSTABLE PT ON
        PT.table_id = PI.table_id
    JOIN SYS.SYSTABCOL PC ON
        PC.table_id = F.primary_table_id
    ) ON
    F.foreign_table_id = I.table_id AND
    F.foreign_index_id = I.index_id AND
    PC.column_id = X.primary_column_id
WHERE I.index_category IN ( 2 ) AND
    upper(U.user_name)  = upper(:schemaName) AND
    upper(T.table_name) = upper(:tableName)
ORDER BY PT.table_name, I.index_id, X.sequence
"""


class ASA11CatalogQueries(CatalogQuerySet):
    """Catalog queries for SQL Anywhere 11."""

    family = ServerVersionFamily.V11

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
    C.column_type, C.[default] AS [default], NULL AS sequence_name,
    C.[compressed], C.lob_index, R.remarks AS remarks
FROM SYS.SYSTABCOL C
JOIN SYS.SYSDOMAIN D ON
    D.domain_id = C.domain_id
LEFT OUTER JOIN SYS.SYSUSERTYPE Y ON
    Y.type_id = C.user_type
LEFT OUTER JOIN SYS.SYSIDX IU ON
    IU.table_id = C.table_id AND IU.index_category = 3 AND
    IU.[unique] = 2 AND
    (SELECT COUNT(*) FROM SYS.SYSIDXCOL XA WHERE XA.table_id = IU.table_id AND XA.index_id = IU.index_id AND XA.column_id = C.column_id) = 1 AND
    (SELECT COUNT(*) FROM SYS.SYSIDXCOL XB WHERE XB.table_id = IU.table_id AND XB.index_id = IU.index_id AND XB.column_id <> C.column_id) = 0
LEFT OUTER JOIN SYS.SYSIDXCOL XP ON
    XP.table_id = C.table_id AND
    XP.column_id = C.column_id AND
    XP.index_id = 0
LEFT OUTER JOIN SYS.SYSREMARK R ON
    R.object_id = C.object_id
JOIN SYS.SYSTAB T ON
    T.table_id = C.table_id
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

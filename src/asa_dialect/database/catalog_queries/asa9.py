"""
SQL Anywhere 9 catalog queries.

Version 9 predates the SYSTAB/SYSIDX catalog: creators resolve through
SYSUSERPERMS, unique indexes live in SYSINDEX/SYSIXCOL and foreign keys
in SYSFOREIGNKEY/SYSFKCOL.
"""
from .base import CatalogQuerySet, ServerVersionFamily


class ASA9CatalogQueries(CatalogQuerySet):
    """Catalog queries for SQL Anywhere 9."""

    family = ServerVersionFamily.V9
    aggregates_foreign_key_columns = True
    users_table = "SYS.SYSUSERPERMS"

    @property
    def primary_keys_query(self) -> str:
        return """
SELECT
    trim(C.column_name) AS field_name
FROM SYS.SYSTABLE T
LEFT OUTER JOIN SYS.SYSCOLUMN C ON
    T.table_id = C.table_id
JOIN SYS.SYSUSERPERMS U ON
    U.user_id = T.creator
WHERE
    upper(T.table_name) = upper(:tableName) AND
    upper(U.user_name)  = upper(:schemaName) AND
    C.pkey = 'Y'
ORDER BY C.column_id
"""

    @property
    def columns_query(self) -> str:
        return """
SELECT DISTINCT
    C.column_id, trim(C.column_name) AS column_name, trim(D.domain_name) AS base_type,
    C.width, C.scale, Y.type_name, C.[nulls] AS nulls,
    IFNULL( I.index_id, 'N', 'Y' ) AS [unique], C.pkey AS pkey, C.column_type,
    C.[default] AS [default], NULL AS sequence_name, C.remarks AS remarks
FROM SYS.SYSCOLUMN C
JOIN SYS.SYSDOMAIN D ON
    D.domain_id = C.domain_id
LEFT OUTER JOIN SYS.SYSUSERTYPE Y ON
    Y.type_id = C.user_type
LEFT OUTER JOIN SYS.SYSINDEX I ON
    I.table_id = C.table_id AND I.[unique] = 'U' AND
    (SELECT COUNT(*) FROM SYS.SYSIXCOL XA WHERE XA.table_id = I.table_id AND XA.index_id = I.index_id AND XA.column_id = C.column_id) = 1 AND
    (SELECT COUNT(*) FROM SYS.SYSIXCOL XB WHERE XB.table_id = I.table_id AND XB.index_id = I.index_id AND XB.column_id <> C.column_id) = 0
JOIN SYS.SYSTABLE T ON
    T.table_id = C.table_id
JOIN SYS.SYSUSERPERMS U ON
    U.user_id = T.creator
WHERE
    upper(U.user_name) = upper(:schemaName) AND
    upper(T.table_name) = upper(:tableName)
ORDER BY C.column_id
"""

    @property
    def foreign_keys_query(self) -> str:
        # One row per key; the GROUP BY also spans the key's attributes
        return """
SELECT
    F.foreign_key_id AS FK_KEY_ID, F.role, trim(PT.table_name) AS UQ_TABLE_NAME, PU.user_name,
    trim(LIST( FC.column_name, ', ' ORDER BY K.foreign_column_id )) AS FK_COLUMN_NAME,
    trim(LIST( PC.column_name, ', ' ORDER BY K.foreign_column_id )) AS UQ_COLUMN_NAME,
    F.check_on_commit, F.[nulls], UT.referential_action AS update_action,
    DT.referential_action AS delete_action,
    IFNULL( A.attribute_value, 'N', 'Y' ) AS [clustered], F.hash_limit, F.remarks
FROM SYS.SYSFOREIGNKEY F
JOIN SYS.SYSFKCOL K ON
    K.foreign_table_id = F.foreign_table_id AND
    K.foreign_key_id = F.foreign_key_id
JOIN SYS.SYSCOLUMN FC ON
    FC.table_id = F.foreign_table_id AND
    FC.column_id = K.foreign_column_id
JOIN SYS.SYSCOLUMN PC ON
    PC.table_id = F.primary_table_id AND
    PC.column_id = K.primary_column_id
JOIN SYS.SYSTABLE FT ON
    FT.table_id = F.foreign_table_id
JOIN SYS.SYSUSERPERMS FU ON
    FU.user_id = FT.creator
LEFT OUTER JOIN SYS.SYSATTRIBUTE A ON
    A.object_type = 'T' AND
    A.object_id = FT.table_id AND
    A.attribute_id = 2 AND
    A.attribute_value = F.foreign_key_id
JOIN SYS.SYSTABLE PT ON
    PT.table_id = F.primary_table_id
JOIN SYS.SYSUSERPERMS PU ON
    PU.user_id = PT.creator
LEFT OUTER JOIN SYS.SYSTRIGGER UT ON
    UT.foreign_table_id = F.foreign_table_id AND
    UT.foreign_key_id = F.foreign_key_id AND
    UT.[event] = 'C'
LEFT OUTER JOIN SYS.SYSTRIGGER DT ON
    DT.foreign_table_id = F.foreign_table_id AND
    DT.foreign_key_id = F.foreign_key_id AND
    DT.[event] = 'D'
WHERE
    upper(FU.user_name)  = upper(:schemaName) AND
    upper(FT.table_name) = upper(:tableName)
GROUP BY F.foreign_key_id, F.role, PT.table_name, PU.user_name, F.check_on_commit, F.[nulls],
    UT.referential_action, DT.referential_action, [clustered], F.hash_limit, F.remarks
ORDER BY F.role
"""

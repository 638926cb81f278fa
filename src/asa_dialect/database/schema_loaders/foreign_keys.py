"""
Foreign Key Resolution - Group catalog rows into foreign key descriptors

Catalog rows come in two shapes:
- one row per key column (FK_COLUMN_NAME / UQ_COLUMN_NAME hold one name)
- one row per key with LIST()-aggregated, comma separated column names

Rows sharing FK_KEY_ID belong to the same key. Column order within a key
follows row order, which the catalog queries sort by declared position.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ...constants import LIST_SEPARATOR
from ..models import ForeignKeyDescriptor

logger = logging.getLogger(__name__)


def _split_list(value: Optional[str]) -> List[str]:
    if value is None:
        return []
    return [part.strip() for part in str(value).split(LIST_SEPARATOR.strip()) if part.strip()]


class ForeignKeyResolver:
    """Builds ForeignKeyDescriptor entries from catalog rows."""

    def __init__(self, aggregated_columns: bool = False):
        """
        Args:
            aggregated_columns: Rows carry comma separated column lists
        """
        self.aggregated_columns = aggregated_columns

    def _row_pairs(self, row: Mapping[str, Any]) -> List[Tuple[str, str]]:
        local = row.get("FK_COLUMN_NAME")
        referenced = row.get("UQ_COLUMN_NAME")
        if self.aggregated_columns:
            local_columns = _split_list(local)
            referenced_columns = _split_list(referenced)
            if len(local_columns) != len(referenced_columns):
                logger.warning(
                    f"Foreign key column lists differ in length: {local!r} / {referenced!r}"
                )
            return list(zip(local_columns, referenced_columns))
        if local is None or referenced is None:
            return []
        return [(str(local).strip(), str(referenced).strip())]

    def resolve(self, rows: Iterable[Mapping[str, Any]]) -> Tuple[ForeignKeyDescriptor, ...]:
        """
        Group rows by key identity.

        Rows without FK_KEY_ID are keyed by referenced table. Rows whose
        referenced table is unknown (unresolved reference) are skipped.
        """
        keys: Dict[Any, Tuple[str, List[Tuple[str, str]]]] = {}

        for row in rows:
            referenced_table = row.get("UQ_TABLE_NAME")
            if referenced_table is None:
                continue
            referenced_table = str(referenced_table).strip()
            key_id = row.get("FK_KEY_ID")
            identity = (referenced_table, key_id) if key_id is not None else (referenced_table,)

            if identity not in keys:
                keys[identity] = (referenced_table, [])
            pairs = keys[identity][1]
            for pair in self._row_pairs(row):
                if pair not in pairs:
                    pairs.append(pair)

        return tuple(
            ForeignKeyDescriptor(referenced_table=table, column_pairs=tuple(pairs))
            for table, pairs in keys.values()
            if pairs
        )

"""
ForeignKeyDescriptor model - One (possibly composite) foreign key
"""
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ForeignKeyDescriptor:
    """
    Foreign key from the described table to referenced_table.

    column_pairs keeps the catalog's declared column order.
    """
    referenced_table: str
    column_pairs: Tuple[Tuple[str, str], ...]

    @property
    def columns(self) -> Dict[str, str]:
        """Ordered mapping of local column to referenced column."""
        return dict(self.column_pairs)

    @property
    def local_columns(self) -> Tuple[str, ...]:
        return tuple(local for local, _ in self.column_pairs)

    @property
    def referenced_columns(self) -> Tuple[str, ...]:
        return tuple(ref for _, ref in self.column_pairs)

"""
QualifiedTableName model - Owner and bare name of a table reference
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class QualifiedTableName:
    """
    Table reference split into owner (schema) and bare name.

    full_name omits the owner when it is the connection's default schema.
    explicit_schema records whether the caller named the owner.
    """
    schema_name: str
    name: str
    full_name: str
    explicit_schema: bool = False

    @property
    def cache_key(self) -> str:
        """Case-insensitive key identifying the table across spellings."""
        return f"{self.schema_name}.{self.name}".lower()

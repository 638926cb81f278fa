"""
SQL Pagination - Express LIMIT/OFFSET with SQL Anywhere's TOP ... START AT

This is a narrow text transform, not a SQL parser:
- only the statement's leading SELECT is rewritten (after whitespace,
  comments and opening parentheses), never a SELECT inside a subquery
- a SELECT already followed by TOP (optionally after DISTINCT or ALL) is
  left alone
- START AT is 1-based, so offset N becomes START AT N+1
"""

import logging
import re
from typing import Callable, Mapping, Optional, Union

import sqlparse
from sqlparse import tokens as T

logger = logging.getLogger(__name__)

OrderBy = Union[str, Mapping[str, str], None]

_SELECT_RE = re.compile(
    r"SELECT(?!(?:\s+(?:DISTINCT|ALL))?\s+TOP\b)(?P<quantifier>\s+(?:DISTINCT|ALL)\b)?",
    re.IGNORECASE,
)
_ORDER_BY_PREFIX_RE = re.compile(r"^\s*ORDER\s+BY\s+", re.IGNORECASE)


def _has_limit(limit: Optional[int]) -> bool:
    try:
        return limit is not None and int(limit) >= 0
    except (TypeError, ValueError):
        return False


def _has_offset(offset: Optional[int]) -> bool:
    try:
        return offset is not None and int(offset) > 0
    except (TypeError, ValueError):
        return False


def find_leading_select(sql: str) -> Optional[int]:
    """
    Find the position of the statement's leading SELECT keyword.

    Leading whitespace, comments and opening parentheses are skipped.

    Returns:
        Character offset of SELECT, or None if the statement does not
        start with SELECT
    """
    if not sql or not sql.strip():
        return None

    statements = sqlparse.parse(sql)
    if not statements:
        return None

    position = 0
    for token in statements[0].flatten():
        if token.is_whitespace or token.ttype in T.Comment:
            position += len(token.value)
            continue
        if token.ttype in T.Punctuation and token.value == "(":
            position += len(token.value)
            continue
        if token.ttype in T.Keyword.DML and token.normalized == "SELECT":
            return position
        return None
    return None


class PaginationRewriter:
    """
    Rewrites generated SELECT statements into SQL Anywhere pagination.

    Usage:
        rewriter = PaginationRewriter()
        rewriter.apply_order_limit_offset("SELECT * FROM t", "", 10, 5)
        # -> "SELECT TOP 10 START AT 6 * FROM t"
    """

    separator = " "

    def __init__(self, quote_column: Optional[Callable[[str], str]] = None):
        """
        Args:
            quote_column: Quotes column names of mapping-style ORDER BY input
        """
        self.quote_column = quote_column or (lambda name: name)

    def build_order_by(self, order_by: OrderBy) -> str:
        """
        Render an ORDER BY clause.

        Args:
            order_by: Raw clause ("a DESC, b" or "ORDER BY a") or an ordered
                mapping of column -> "ASC"/"DESC"

        Returns:
            "ORDER BY ..." or "" when there is nothing to order by
        """
        if not order_by:
            return ""
        if isinstance(order_by, str):
            clause = _ORDER_BY_PREFIX_RE.sub("", order_by.strip())
            return f"ORDER BY {clause}" if clause else ""

        parts = []
        for column, direction in order_by.items():
            direction = (direction or "ASC").strip().upper()
            if direction not in ("ASC", "DESC"):
                raise ValueError(f"Invalid sort direction for {column}: {direction}")
            parts.append(f"{self.quote_column(column)} {direction}")
        return "ORDER BY " + ", ".join(parts)

    def build_top(self, sql: str, limit: Optional[int], offset: Optional[int]) -> str:
        """Insert TOP / TOP ... START AT after the leading SELECT [DISTINCT | ALL]."""
        has_limit = _has_limit(limit)
        has_offset = _has_offset(offset)
        if not has_limit and not has_offset:
            return sql

        if has_offset:
            # TOP is mandatory with START AT; ALL rows when no limit was given
            top = f"TOP {int(limit) if has_limit else 'ALL'} START AT {int(offset) + 1}"
        else:
            top = f"TOP {int(limit)}"

        position = find_leading_select(sql)
        if position is None:
            logger.debug("No leading SELECT, pagination not applied")
            return sql

        match = _SELECT_RE.match(sql, position)
        if not match:
            logger.debug("Statement already has a TOP clause, pagination not applied")
            return sql

        quantifier = match.group("quantifier") or ""
        return f"{sql[:position]}SELECT{quantifier} {top}{sql[match.end():]}"

    def apply_order_limit_offset(
        self,
        sql: str,
        order_by: OrderBy,
        limit: Optional[int],
        offset: Optional[int],
    ) -> str:
        """
        Append ORDER BY and apply LIMIT/OFFSET to a generated SELECT.

        Args:
            sql: Generated SQL without ORDER BY/LIMIT/OFFSET
            order_by: ORDER BY clause or column -> direction mapping
            limit: Maximum number of rows, or None
            offset: Number of rows to skip, or None

        Returns:
            SQL in SQL Anywhere syntax
        """
        clause = self.build_order_by(order_by)
        if clause:
            sql = f"{sql}{self.separator}{clause}"

        result = self.build_top(sql, limit, offset)
        if result != sql:
            logger.debug(f"Paginated SQL: {result}")
        return result

    @staticmethod
    def select_exists(raw_sql: str) -> str:
        """Wrap a subquery in SQL Anywhere's boolean EXISTS idiom."""
        return f"SELECT IF EXISTS({raw_sql}) THEN 1 ELSE 0 ENDIF"

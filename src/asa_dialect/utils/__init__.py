"""
SQL text utilities
"""
from .sql_pagination import PaginationRewriter, find_leading_select

__all__ = ["PaginationRewriter", "find_leading_select"]

"""
SQL Utilities - Internal helpers for SQL operations.
"""

from .escaping import escape, escape_id, qualified_name
from .models import SqlQueryResult, SqlResultType

__all__ = [
    "escape",
    "escape_id",
    "qualified_name",
    "SqlQueryResult",
    "SqlResultType",
]

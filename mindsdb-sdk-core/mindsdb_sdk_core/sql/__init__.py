"""
SQL - Contract and helpers for sending SQL statements to MindsDB.
"""

from .sql_api_client import SqlApiClient, get_error_message
from .sql_utils import (
    SqlQueryResult,
    SqlResultType,
    escape,
    escape_id,
    qualified_name,
)

__all__ = [
    # SQL execution
    "SqlApiClient",
    "get_error_message",
    "SqlQueryResult",
    "SqlResultType",
    # Escaping
    "escape",
    "escape_id",
    "qualified_name",
]

"""
MindsDB SDK Core

Table operations for MindsDB, expressed as SQL statements sent through a SQL
API client.
"""

from .errors import InvalidArgumentError, MindsDbError, SQLExecutionError
from .sql import SqlApiClient, SqlQueryResult
from .tables import Table, TablesApiClient, TablesRestApiClient

__version__ = "0.1.0"

__all__ = [
    "Table",
    "TablesApiClient",
    "TablesRestApiClient",
    "SqlApiClient",
    "SqlQueryResult",
    # Errors
    "MindsDbError",
    "SQLExecutionError",
    "InvalidArgumentError",
]

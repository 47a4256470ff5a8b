"""
Errors - Exceptions raised by the MindsDB SDK core.
"""

from typing import Optional


class MindsDbError(Exception):
    """Base class for every error raised by this package."""


class SQLExecutionError(MindsDbError):
    """The SQL client reported an error while running a statement.

    The message is the server's error message, unchanged.
    """

    def __init__(self, message: str, sql_query: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.sql_query = sql_query


class InvalidArgumentError(MindsDbError, TypeError):
    """A caller-supplied value cannot be turned into SQL."""

"""
SQL Models - Pydantic models for SQL query results returned by MindsDB.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class SqlResultType(str, Enum):
    """Kind of response returned by the MindsDB SQL API."""

    TABLE = "table"  # Rows and column names
    OK = "ok"  # Statement ran, nothing returned
    ERROR = "error"  # error_message is set


class SqlQueryResult(BaseModel):
    """Result of running one SQL statement through the MindsDB SQL API.

    Only ``error_message`` matters to the table operations; the rest is kept
    so callers can inspect returned rows.
    """

    model_config = ConfigDict(extra="allow")

    type: Optional[SqlResultType] = None
    column_names: Optional[List[str]] = None
    data: Optional[List[List[Any]]] = None
    context: Optional[Dict[str, Any]] = None  # Session context echoed by the server
    error_code: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True when the server reported an error message."""
        return bool(self.error_message)

    @property
    def row_count(self) -> int:
        """Get the number of rows returned."""
        return len(self.data) if self.data else 0

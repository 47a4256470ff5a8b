"""
SQL API Client - Contract for the component that sends SQL to MindsDB.
"""

from typing import Any, Mapping, Optional, Protocol, Union

from .sql_utils.models import SqlQueryResult


class SqlApiClient(Protocol):
    """Anything that can run one SQL statement against MindsDB."""

    def run_query(self, sql_query: str) -> Union[SqlQueryResult, Mapping[str, Any], Any]:
        ...


def get_error_message(result: Any) -> Optional[str]:
    """
    Extract the error message from a SQL client result.

    Accepts a SqlQueryResult, a decoded JSON body (dict) or any object with an
    ``error_message`` attribute. A missing or empty message means success.
    """
    if result is None:
        return None
    if isinstance(result, Mapping):
        message = result.get("error_message")
    else:
        message = getattr(result, "error_message", None)
    return message or None

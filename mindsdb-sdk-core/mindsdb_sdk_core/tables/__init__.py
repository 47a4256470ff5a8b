"""
Tables - Create, replace, delete and fill tables in MindsDB integrations.
"""

from .table import Table
from .tables_api_client import TablesApiClient
from .tables_rest_api_client import TablesRestApiClient

__all__ = [
    "Table",
    "TablesApiClient",
    "TablesRestApiClient",
]

"""
Pytest fixtures for mindsdb-sdk-core tests.

Table operations are tested against a recording SQL client, so no MindsDB
server is needed.
"""

import logging
from typing import Any, List

import pytest

from mindsdb_sdk_core.sql import SqlQueryResult
from mindsdb_sdk_core.tables import TablesRestApiClient

logger = logging.getLogger(__name__)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test that runs without MindsDB"
    )


class RecordingSqlClient:
    """
    SQL client that records every statement and returns a fixed result.

    Set ``result`` to change what the next calls return.
    """

    def __init__(self, result: Any = None):
        self.queries: List[str] = []
        self.result = result if result is not None else SqlQueryResult(type="ok")

    def run_query(self, sql_query: str) -> Any:
        logger.debug(f"Recorded query: {sql_query}")
        self.queries.append(sql_query)
        return self.result

    @property
    def last_query(self) -> str:
        return self.queries[-1]


@pytest.fixture
def sql_client() -> RecordingSqlClient:
    """SQL client that succeeds for every statement."""
    return RecordingSqlClient()


@pytest.fixture
def failing_sql_client() -> RecordingSqlClient:
    """SQL client whose results always carry an error message."""
    return RecordingSqlClient(
        SqlQueryResult(type="error", error_code=0, error_message="Table 't' already exists")
    )


@pytest.fixture
def tables_client(sql_client: RecordingSqlClient) -> TablesRestApiClient:
    """Tables client bound to the succeeding SQL client."""
    return TablesRestApiClient(sql_client)


@pytest.fixture
def failing_tables_client(failing_sql_client: RecordingSqlClient) -> TablesRestApiClient:
    """Tables client bound to the failing SQL client."""
    return TablesRestApiClient(failing_sql_client)

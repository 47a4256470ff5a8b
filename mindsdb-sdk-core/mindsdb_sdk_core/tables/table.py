"""
Table - Handle to a MindsDB table inside an integration.
"""

from typing import TYPE_CHECKING, Any, Sequence, Union

if TYPE_CHECKING:
    from .tables_api_client import TablesApiClient


class Table:
    """
    Represents a MindsDB table and the operations it supports.

    A Table is a lightweight handle: it caches no data and does not check that
    the table still exists. Operations are delegated to the TablesApiClient
    that created it.
    """

    def __init__(self, tables_api_client: "TablesApiClient", name: str, integration: str):
        """
        Args:
            tables_api_client: API client used to run operations on this table
            name: Name of the table
            integration: Integration the table is a part of (e.g. files, mindsdb)
        """
        self._tables_api_client = tables_api_client
        self._name = name
        self._integration = integration

    @property
    def tables_api_client(self) -> "TablesApiClient":
        return self._tables_api_client

    @property
    def name(self) -> str:
        return self._name

    @property
    def integration(self) -> str:
        return self._integration

    def delete(self) -> None:
        """
        Delete this table from its integration.

        Raises:
            MindsDbError: Something went wrong deleting this table
        """
        self._tables_api_client.delete_table(self._name, self._integration)

    def insert(self, data: Union[Sequence[Sequence[Any]], str]) -> None:
        """
        Insert data into this table.

        Args:
            data: Rows of values to insert, or a SELECT query to insert data from

        Raises:
            InvalidArgumentError: data is neither rows nor a query
            SQLExecutionError: Something went wrong inserting the data
        """
        self._tables_api_client.insert(self._name, self._integration, data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self._name == other._name
            and self._integration == other._integration
            and self._tables_api_client is other._tables_api_client
        )

    def __hash__(self) -> int:
        return hash((self._integration, self._name, id(self._tables_api_client)))

    def __repr__(self) -> str:
        return f"Table(integration={self._integration!r}, name={self._name!r})"

"""
Tables REST API Client

Runs table operations as SQL statements through the MindsDB SQL API.
"""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Any, Sequence, Union

from ..errors import InvalidArgumentError, SQLExecutionError
from ..sql.sql_api_client import SqlApiClient, get_error_message
from ..sql.sql_utils.escaping import escape, qualified_name
from .table import Table
from .tables_api_client import TablesApiClient

logger = logging.getLogger(__name__)

_NOT_ROW_TYPES = (str, bytes, bytearray)


def _is_row(value: Any) -> bool:
    return isinstance(value, SequenceABC) and not isinstance(value, _NOT_ROW_TYPES)


class TablesRestApiClient(TablesApiClient):
    """Implementation of TablesApiClient that goes through the SQL API."""

    def __init__(self, sql_client: SqlApiClient):
        """
        Args:
            sql_client: SQL API client used to send every statement
        """
        self.sql_client = sql_client

    def _run_query(self, sql_query: str) -> Any:
        logger.debug(f"Running SQL: {sql_query}")
        result = self.sql_client.run_query(sql_query)

        error_message = get_error_message(result)
        if error_message:
            logger.warning(f"SQL execution failed: {error_message}")
            raise SQLExecutionError(error_message, sql_query=sql_query)
        return result

    def _create(self, create_clause: str, name: str, integration: str, select: str) -> Table:
        select_clause = f"({select})"
        sql_query = "\n".join([create_clause, select_clause])

        self._run_query(sql_query)
        return Table(self, name, integration)

    def create_table(self, name: str, integration: str, select: str) -> Table:
        """
        Create a table in an integration from a SELECT statement.

        Args:
            name: Name of the table to create
            integration: Integration the table will be a part of
            select: SELECT statement that populates the new table

        Returns:
            Handle to the newly created table

        Raises:
            SQLExecutionError: Something went wrong creating the table

        Example:
            >>> tables.create_table("t", "files", "SELECT * FROM x")
            Table(integration='files', name='t')
        """
        table = self._create(
            f"CREATE TABLE {qualified_name(integration, name)}", name, integration, select
        )
        logger.info(f"Created table {integration}.{name}")
        return table

    def create_or_replace_table(self, name: str, integration: str, select: str) -> Table:
        """
        Create a table from a SELECT statement. An existing table with the
        same name is replaced by the server.

        Args:
            name: Name of the table to create or replace
            integration: Integration the table will be a part of
            select: SELECT statement that populates the table

        Returns:
            Handle to the created or replaced table

        Raises:
            SQLExecutionError: Something went wrong creating or replacing the table
        """
        table = self._create(
            f"CREATE OR REPLACE TABLE {qualified_name(integration, name)}",
            name,
            integration,
            select,
        )
        logger.info(f"Created or replaced table {integration}.{name}")
        return table

    def delete_table(self, name: str, integration: str) -> None:
        """
        Delete a table from its integration.

        Raises:
            SQLExecutionError: Something went wrong deleting the table
        """
        self._run_query(f"DROP TABLE {qualified_name(integration, name)}")
        logger.info(f"Dropped table {integration}.{name}")

    def insert(
        self,
        name: str,
        integration: str,
        data: Union[Sequence[Sequence[Any]], str],
    ) -> None:
        """
        Insert data into a table.

        Rows are sent as a VALUES clause with every value escaped. A string is
        used as-is as the SELECT query whose rows are inserted.

        Args:
            name: Name of the table to insert into
            integration: Integration the table is a part of
            data: Rows of values to insert, or a SELECT query to insert data from

        Raises:
            InvalidArgumentError: data is neither rows nor a query. Nothing is sent.
            SQLExecutionError: Something went wrong inserting the data
        """
        insert_clause = f"INSERT INTO {qualified_name(integration, name)}"

        if isinstance(data, str):
            sql_query = f"{insert_clause} {data}"
        elif _is_row(data):
            if len(data) == 0:
                raise InvalidArgumentError("No rows to insert.")
            if not all(_is_row(row) for row in data):
                raise InvalidArgumentError("Each row must be a sequence of values.")

            values_clause = ",\n".join(
                f"({', '.join(escape(value) for value in row)})" for row in data
            )
            sql_query = f"{insert_clause} VALUES {values_clause}"
        else:
            raise InvalidArgumentError(
                "Invalid data type. Expected an array of values or a SELECT query."
            )

        self._run_query(sql_query)
        logger.info(f"Inserted into table {integration}.{name}")

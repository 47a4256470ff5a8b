"""
Tables API Client - Operations supported on MindsDB tables.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence, Union

from .table import Table


class TablesApiClient(ABC):
    """Abstract contract for creating, replacing, deleting and filling tables."""

    @abstractmethod
    def create_table(self, name: str, integration: str, select: str) -> Table:
        """Create a table in an integration from a SELECT statement."""

    @abstractmethod
    def create_or_replace_table(self, name: str, integration: str, select: str) -> Table:
        """Create a table from a SELECT statement, replacing any existing table."""

    @abstractmethod
    def delete_table(self, name: str, integration: str) -> None:
        """Delete a table from its integration."""

    @abstractmethod
    def insert(
        self,
        name: str,
        integration: str,
        data: Union[Sequence[Sequence[Any]], str],
    ) -> None:
        """Insert rows, or the result of a SELECT query, into a table."""

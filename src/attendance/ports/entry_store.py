"""Entry storage interface."""

from typing import Protocol

from attendance.core.entries import Entry, Mutation, Query


class EntryStore(Protocol):
    """Interface for reading and writing attendance entries."""

    def load(self) -> list[Entry]:
        """Load every stored entry. Returns an empty list if nothing is stored."""
        ...

    def read(self, query: Query) -> list[Entry]:
        """Read entries matching a query, in ascending date order."""
        ...

    def write(self, mutation: Mutation) -> None:
        """Apply a mutation and persist the whole collection."""
        ...

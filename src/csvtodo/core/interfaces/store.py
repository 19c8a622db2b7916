"""
Todo Store Protocol

This module defines the protocol interface for todo persistence
implementations. A store reads and writes the whole todo table at once;
there are no per-record operations.

Implementations must serialize access across processes: a save from one
process must never interleave with a load or save from another process on
the same backing file.
"""

from typing import Protocol

from csvtodo.core.domain.todo import TodoTable


class TodoStoreProtocol(Protocol):
    """
    Protocol defining the contract for whole-table todo persistence.

    Error Handling:
        - load: Raises FormatError, ParseError or DuplicateIdError for
          corrupt content and StorageError for I/O or lock failures.
          Never returns a partial table.
        - save: Raises StorageError for I/O or lock failures. Never leaves
          a partially written file behind.
    """

    def load(self) -> TodoTable:
        """
        Load the full todo table.

        The implementation should:
        1. Open the backing file, creating it when absent
        2. Acquire an exclusive lock for the whole read
        3. Decode every record, rejecting duplicate identifiers
        4. Release the lock on every exit path

        Returns:
            The stored table, or an empty table for an empty file

        Example:
            >>> table = store.load()
            >>> for todo_id, todo in table.list():
            ...     print(todo_id, todo.description)
        """
        ...

    def save(self, table: TodoTable) -> None:
        """
        Replace the stored table with the given one.

        The implementation should:
        1. Acquire an exclusive lock for the whole write
        2. Encode every entry and write all rows
        3. Flush and surface any write error
        4. Release the lock on every exit path

        Args:
            table: The complete table to persist

        Example:
            >>> table = store.load()
            >>> table.add("buy milk")
            >>> store.save(table)
        """
        ...

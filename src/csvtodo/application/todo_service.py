"""
Todo Service

Runs one CLI action against the store: load the table, apply at most one
mutation, and write the table back. Listing never writes.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from csvtodo.core.domain.todo import CheckResult, Todo
from csvtodo.core.interfaces.store import TodoStoreProtocol


@dataclass(frozen=True)
class AddOutcome:
    todo_id: int
    todo: Todo


@dataclass(frozen=True)
class CheckOutcome:
    todo_id: int
    todo: Todo
    result: CheckResult


class TodoService:
    """
    Application service for the list, add and check actions.

    Each call works on a fresh table loaded from the store, so nothing is
    shared between calls except the backing file.
    """

    def __init__(self, store: TodoStoreProtocol):
        self.store = store
        self.logger = structlog.get_logger().bind(component="todo_service")

    def list_todos(self) -> list[tuple[int, Todo]]:
        """Return all todos sorted by identifier."""
        table = self.store.load()
        return sorted(table.list(), key=lambda entry: entry[0])

    def add_todo(self, description: str) -> AddOutcome:
        """
        Add an open todo and persist the table.

        Args:
            description: Task description

        Returns:
            AddOutcome with the assigned identifier
        """
        table = self.store.load()
        todo_id = table.add(description)
        self.store.save(table)

        self.logger.info("todo_added", todo_id=todo_id)
        return AddOutcome(todo_id=todo_id, todo=table.get(todo_id))

    def check_todo(self, todo_id: int) -> CheckOutcome:
        """
        Mark a todo as completed and persist the table.

        The table is only written back when the todo actually changed.

        Raises:
            NotFoundError: If todo_id does not exist
        """
        table = self.store.load()
        result = table.check(todo_id)
        if result is CheckResult.COMPLETED:
            self.store.save(table)

        self.logger.info("todo_checked", todo_id=todo_id, result=result.value)
        return CheckOutcome(todo_id=todo_id, todo=table.get(todo_id), result=result)

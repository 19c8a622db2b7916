"""
Todo Domain Models

Defines the Todo entity and the in-memory TodoTable that owns identifier
allocation. Identifiers are table keys, not entity fields.

Invariants of TodoTable:
- no two entries share an identifier
- identifiers are positive integers
- next_identifier() is strictly greater than every identifier present
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from csvtodo.core.domain.errors import DuplicateIdError, NotFoundError
from csvtodo.core.utils.time import truncate_to_seconds, utc_now


class CheckResult(str, Enum):
    """Outcome of checking off a todo."""

    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"


@dataclass
class Todo:
    """A single task record."""

    description: str
    completed: bool = False
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self.created_at = truncate_to_seconds(self.created_at)


class TodoTable:
    """
    In-memory mapping from identifier to Todo.

    A table is created empty or filled by a store, mutated by at most one
    action per invocation, then handed back to the store for saving.

    Example:
        >>> table = TodoTable()
        >>> table.add("buy milk")
        1
        >>> table.check(1)
        <CheckResult.COMPLETED: 'completed'>
    """

    def __init__(self, todos: dict[int, Todo] | None = None) -> None:
        self._todos: dict[int, Todo] = {}
        for todo_id, todo in (todos or {}).items():
            self.insert(todo_id, todo)

    def next_identifier(self) -> int:
        """Return one more than the highest identifier, or 1 when empty."""
        return max(self._todos, default=0) + 1

    def insert(self, todo_id: int, todo: Todo) -> None:
        """
        Store a todo under an explicit identifier.

        Raises:
            ValueError: If todo_id is not a positive integer
            DuplicateIdError: If todo_id is already present
        """
        if todo_id < 1:
            raise ValueError(f"todo id must be positive, got {todo_id}")
        if todo_id in self._todos:
            raise DuplicateIdError(todo_id)
        self._todos[todo_id] = todo

    def add(self, description: str, *, now: datetime | None = None) -> int:
        """
        Create an open todo and assign it the next identifier.

        Args:
            description: Free-text task description
            now: Creation time override, defaults to the current UTC time

        Returns:
            The identifier assigned to the new todo
        """
        todo_id = self.next_identifier()
        self._todos[todo_id] = Todo(
            description=description,
            completed=False,
            created_at=now if now is not None else utc_now(),
        )
        return todo_id

    def check(self, todo_id: int) -> CheckResult:
        """
        Mark a todo as completed.

        Checking an already completed todo changes nothing and is not an
        error.

        Raises:
            NotFoundError: If todo_id is not present
        """
        todo = self._todos.get(todo_id)
        if todo is None:
            raise NotFoundError(todo_id)
        if todo.completed:
            return CheckResult.ALREADY_COMPLETED
        todo.completed = True
        return CheckResult.COMPLETED

    def get(self, todo_id: int) -> Todo | None:
        return self._todos.get(todo_id)

    def list(self) -> Iterator[tuple[int, Todo]]:
        """Iterate over (identifier, todo) pairs in no particular order."""
        yield from self._todos.items()

    def __len__(self) -> int:
        return len(self._todos)

    def __contains__(self, todo_id: object) -> bool:
        return todo_id in self._todos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TodoTable):
            return NotImplemented
        return self._todos == other._todos

    def __repr__(self) -> str:
        return f"TodoTable({self._todos!r})"

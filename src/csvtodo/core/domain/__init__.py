"""
Domain Models and Business Logic

This package contains the core domain models for csvtodo:
- Todo entity and TodoTable
- Record codec for the stored row format
- Error hierarchy
"""

from csvtodo.core.domain.errors import (
    DuplicateIdError,
    FormatError,
    NotFoundError,
    ParseError,
    StorageError,
    TodoError,
)
from csvtodo.core.domain.todo import CheckResult, Todo, TodoTable

__all__ = [
    "CheckResult",
    "DuplicateIdError",
    "FormatError",
    "NotFoundError",
    "ParseError",
    "StorageError",
    "Todo",
    "TodoError",
    "TodoTable",
]

"""Domain-specific exception types for csvtodo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TodoError(Exception):
    """Base exception for csvtodo domain errors."""

    message: str
    code: str = "todo_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}

    def __str__(self) -> str:
        return self.message


class FormatError(TodoError):
    """Error raised when a stored row has the wrong shape."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="format_error", details=details)


class ParseError(TodoError):
    """Error raised when a stored field cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if field:
            details.setdefault("field", field)
        if value is not None:
            details.setdefault("value", value)
        self.field = field
        super().__init__(message=message, code="parse_error", details=details)


class DuplicateIdError(TodoError):
    """Error raised when two todos share the same identifier."""

    def __init__(self, todo_id: int, *, details: Dict[str, Any] | None = None) -> None:
        details = dict(details or {})
        details.setdefault("todo_id", todo_id)
        self.todo_id = todo_id
        super().__init__(
            message=f"duplicate id '{todo_id}'", code="duplicate_id", details=details
        )


class NotFoundError(TodoError):
    """Error raised when a todo is not found."""

    def __init__(self, todo_id: int, *, details: Dict[str, Any] | None = None) -> None:
        details = dict(details or {})
        details.setdefault("todo_id", todo_id)
        self.todo_id = todo_id
        super().__init__(
            message=f"no todo with id '{todo_id}'", code="not_found", details=details
        )


class StorageError(TodoError):
    """Error raised for open, read, write or lock failures on the data file."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if path:
            details.setdefault("path", path)
        self.path = path
        super().__init__(message=message, code="storage_error", details=details)


def with_location(error: TodoError, *, path: str, line: int) -> TodoError:
    """Attach the file path and line number to a decode error in place."""
    if error.details is None:
        error.details = {}
    error.details.setdefault("path", path)
    error.details.setdefault("line", line)
    error.message = f"{path}:{line}: {error.message}"
    error.args = (error.message,)
    return error

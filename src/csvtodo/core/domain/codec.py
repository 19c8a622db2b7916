"""
Record Codec
============

Converts between a (identifier, Todo) pair and the four text fields of a
stored row:

    id,description,completed,created_at_unix_seconds

Usage:
    from csvtodo.core.domain.codec import decode, encode

    row = encode(1, Todo("buy milk"))
    todo_id, todo = decode(row)
"""

import re
from collections.abc import Sequence

from csvtodo.core.domain.errors import FormatError, ParseError
from csvtodo.core.domain.todo import Todo
from csvtodo.core.utils.time import from_unix_seconds, to_unix_seconds

FIELD_COUNT = 4

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_bool(value: str) -> bool:
    """
    Parse a boolean literal.

    Raises:
        ParseError: If value is not one of the accepted literals
    """
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ParseError(
        f"invalid boolean literal {value!r}", field="completed", value=value
    )


def parse_int(value: str, *, field: str) -> int:
    """
    Parse a signed decimal integer without surrounding whitespace.

    Raises:
        ParseError: If value is not a decimal integer
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ParseError(f"invalid integer {value!r} for {field}", field=field, value=value)
    return int(value)


def decode(row: Sequence[str]) -> tuple[int, Todo]:
    """
    Decode a stored row into its identifier and Todo.

    Args:
        row: Ordered text fields of one record

    Returns:
        Tuple of identifier and Todo

    Raises:
        FormatError: If the row does not have exactly four fields
        ParseError: If the id, completed or timestamp field is invalid
    """
    if len(row) != FIELD_COUNT:
        raise FormatError(
            f"invalid length for todo record: {len(row)}",
            details={"field_count": len(row)},
        )

    raw_id, description, raw_completed, raw_created_at = row

    todo_id = parse_int(raw_id, field="id")
    if todo_id < 1:
        raise ParseError(f"todo id must be positive, got {todo_id}", field="id", value=raw_id)

    completed = parse_bool(raw_completed)
    seconds = parse_int(raw_created_at, field="created_at")
    try:
        created_at = from_unix_seconds(seconds)
    except (OverflowError, OSError, ValueError) as exc:
        raise ParseError(
            f"timestamp {seconds} out of range", field="created_at", value=raw_created_at
        ) from exc

    return todo_id, Todo(description=description, completed=completed, created_at=created_at)


def encode(todo_id: int, todo: Todo) -> list[str]:
    """Encode a todo as the four text fields of a stored row."""
    return [
        str(todo_id),
        todo.description,
        "true" if todo.completed else "false",
        str(to_unix_seconds(todo.created_at)),
    ]

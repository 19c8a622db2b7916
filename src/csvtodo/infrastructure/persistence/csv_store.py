"""
CSV-Based Todo Store

This module provides a file-based implementation of the TodoStoreProtocol,
keeping the whole todo table in a single comma-separated file:

    id,description,completed,created_at_unix_seconds

There is no header row and rows are written in ascending id order, although
readers must not depend on the order.

The implementation provides:
- Exclusive advisory locking around every full read and every full write
- Atomic writes (write to temp file, fsync, then rename over the data file)
- Duplicate identifier detection on load
- Typed errors annotated with the offending path and line
"""

from __future__ import annotations

import csv
import os
import stat
import sys
import tempfile
from pathlib import Path

import structlog

from csvtodo.core.domain.codec import decode, encode
from csvtodo.core.domain.errors import (
    FormatError,
    StorageError,
    TodoError,
    with_location,
)
from csvtodo.core.domain.todo import TodoTable
from csvtodo.core.interfaces.store import TodoStoreProtocol
from csvtodo.infrastructure.persistence.file_lock import locked_file


class CsvTodoStore(TodoStoreProtocol):
    """
    CSV file persistence implementing TodoStoreProtocol.

    Concurrency:
        Every load and save holds an exclusive flock on the data file for
        its full duration, so invocations from separate processes queue on
        the lock. A load-modify-save cycle is two critical sections, not
        one: concurrent writers can still overwrite each other's changes.

    Atomic Writes:
        The new content is written to a temporary file next to the data
        file and renamed over it while the lock is held. A crash mid-write
        leaves the previous content in place.

    Example:
        >>> store = CsvTodoStore("todo_data.csv")
        >>> table = store.load()
        >>> table.add("buy milk")
        1
        >>> store.save(table)
    """

    def __init__(self, path: str | Path):
        """
        Initialize the CSV todo store.

        Args:
            path: Location of the data file. It is created on first use.
        """
        self.path = Path(path)
        self.logger = structlog.get_logger().bind(
            component="csv_todo_store", path=str(self.path)
        )

    def load(self) -> TodoTable:
        """
        Load every todo from the data file under an exclusive lock.

        Returns:
            The stored table, empty if the file is empty or was just created

        Raises:
            FormatError: If a row does not have four fields or is not valid CSV
            ParseError: If a field cannot be parsed
            DuplicateIdError: If an identifier appears more than once
            StorageError: If the file cannot be opened, locked or read
        """
        table = TodoTable()

        with locked_file(self.path) as handle:
            csv.field_size_limit(sys.maxsize)
            reader = csv.reader(handle, strict=True)
            try:
                for row in reader:
                    if not row:
                        continue
                    try:
                        todo_id, todo = decode(row)
                        table.insert(todo_id, todo)
                    except TodoError as exc:
                        raise with_location(
                            exc, path=str(self.path), line=reader.line_num
                        ) from None
            except csv.Error as exc:
                raise with_location(
                    FormatError(f"malformed CSV: {exc}"),
                    path=str(self.path),
                    line=reader.line_num,
                ) from exc
            except UnicodeDecodeError as exc:
                raise FormatError(
                    f"{self.path}: file is not valid UTF-8", details={"path": str(self.path)}
                ) from exc
            except OSError as exc:
                raise StorageError(
                    f"cannot read {self.path}: {exc.strerror or exc}", path=str(self.path)
                ) from exc

        self.logger.debug("todos_loaded", count=len(table))
        return table

    def save(self, table: TodoTable) -> None:
        """
        Replace the data file with the encoding of the given table.

        Args:
            table: The complete table to persist

        Raises:
            StorageError: If the file cannot be locked, written or replaced
        """
        rows = [encode(todo_id, todo) for todo_id, todo in sorted(table.list())]

        with locked_file(self.path) as handle:
            try:
                self._replace_contents(handle.fileno(), rows)
            except OSError as exc:
                self.logger.debug("todos_save_failed", error=str(exc))
                raise StorageError(
                    f"cannot write {self.path}: {exc.strerror or exc}", path=str(self.path)
                ) from exc

        self.logger.debug("todos_saved", count=len(rows))

    def _replace_contents(self, locked_fd: int, rows: list[list[str]]) -> None:
        """
        Write rows to a temporary file and rename it over the data file.

        Args:
            locked_fd: Descriptor of the locked data file, used to carry over
                its permission bits
            rows: Encoded rows to write
        """
        fd, temp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as temp_file:
                writer = csv.writer(temp_file, lineterminator="\n")
                quoting_writer = csv.writer(
                    temp_file, lineterminator="\n", quoting=csv.QUOTE_ALL
                )
                for row in rows:
                    # a bare \r is not in the line terminator and is not quoted otherwise
                    if any("\r" in field for field in row):
                        quoting_writer.writerow(row)
                    else:
                        writer.writerow(row)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.chmod(temp_name, stat.S_IMODE(os.fstat(locked_fd).st_mode))
            os.replace(temp_name, self.path)
        except BaseException:
            try:
                os.unlink(temp_name)
            except FileNotFoundError:
                pass
            raise

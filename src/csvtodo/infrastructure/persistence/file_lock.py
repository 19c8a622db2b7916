"""
Exclusive advisory file locking.

Provides ``locked_file``, a context manager that opens a file and holds an
exclusive ``flock`` lock on it for the lifetime of the ``with`` block.

The data file may be replaced by an atomic rename while a process is waiting
for the lock. After every acquisition the guard compares the locked
descriptor's inode with the file currently at the path; on a mismatch it
releases, reopens and tries again, so the caller always holds the lock on
the live file.
"""

from __future__ import annotations

import fcntl
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

import structlog

from csvtodo.core.domain.errors import StorageError

logger = structlog.get_logger(component="file_lock")


def _is_current(handle: IO[str], path: Path) -> bool:
    """Return True if the open handle still refers to the file at path."""
    try:
        on_disk = os.stat(path)
    except FileNotFoundError:
        return False
    held = os.fstat(handle.fileno())
    return (held.st_dev, held.st_ino) == (on_disk.st_dev, on_disk.st_ino)


def _open_and_lock(path: Path) -> IO[str]:
    handle = open(path, "a+", encoding="utf-8", newline="")
    try:
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
    except BaseException:
        handle.close()
        raise
    return handle


@contextmanager
def locked_file(path: str | Path) -> Iterator[IO[str]]:
    """
    Open a file under an exclusive advisory lock.

    The file is created if missing, positioned at its start, and the lock
    wait has no timeout. The lock is released and the file closed on every
    exit path.

    Args:
        path: Path of the file to lock

    Yields:
        Text handle opened for reading and appending

    Raises:
        StorageError: If the file cannot be opened or locked
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        while True:
            handle = _open_and_lock(path)
            if _is_current(handle, path):
                break
            logger.debug("file_lock_stale_inode", path=str(path))
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
            handle.close()
    except OSError as exc:
        raise StorageError(
            f"cannot lock {path}: {exc.strerror or exc}", path=str(path)
        ) from exc

    logger.debug("file_lock_acquired", path=str(path))
    try:
        handle.seek(0)
        yield handle
    finally:
        try:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
        finally:
            handle.close()
            logger.debug("file_lock_released", path=str(path))

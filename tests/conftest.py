"""Test configuration and shared fixtures."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog

from csvtodo.core.domain.todo import Todo, TodoTable

FIXED_TIME = datetime(2026, 1, 1, 9, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _quiet_structlog():
    """Keep debug events out of test output and undo CLI logging configuration."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a data file that does not exist yet."""
    return tmp_path / "todo_data.csv"


@pytest.fixture
def sample_table() -> TodoTable:
    """Table with ids 1, 2 and 5; id 2 is completed."""
    return TodoTable(
        {
            1: Todo("buy milk", completed=False, created_at=FIXED_TIME),
            2: Todo("call Bob, re: invoice", completed=True, created_at=FIXED_TIME),
            5: Todo('say "hello"\nto everyone', completed=False, created_at=FIXED_TIME),
        }
    )

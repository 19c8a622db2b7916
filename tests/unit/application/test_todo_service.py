"""
Unit tests for TodoService.

Uses the real CsvTodoStore against a temporary file and a MagicMock store
where only the calls matter.
"""

from unittest.mock import MagicMock

import pytest

from csvtodo.application.todo_service import TodoService
from csvtodo.core.domain.errors import NotFoundError
from csvtodo.core.domain.todo import CheckResult, TodoTable
from csvtodo.infrastructure.persistence.csv_store import CsvTodoStore


@pytest.fixture
def service(data_file):
    return TodoService(CsvTodoStore(data_file))


def test_add_persists_new_todo(service, data_file):
    outcome = service.add_todo("buy milk")

    assert outcome.todo_id == 1
    assert outcome.todo.description == "buy milk"
    reloaded = CsvTodoStore(data_file).load()
    assert reloaded.get(1).completed is False


def test_add_continues_after_highest_id(service, data_file, sample_table):
    CsvTodoStore(data_file).save(sample_table)

    assert service.add_todo("next").todo_id == 6


def test_list_is_sorted_by_id(service, data_file, sample_table):
    CsvTodoStore(data_file).save(sample_table)

    assert [todo_id for todo_id, _ in service.list_todos()] == [1, 2, 5]


def test_check_persists_completion(service, data_file, sample_table):
    CsvTodoStore(data_file).save(sample_table)

    outcome = service.check_todo(1)

    assert outcome.result is CheckResult.COMPLETED
    assert outcome.todo.description == "buy milk"
    assert CsvTodoStore(data_file).load().get(1).completed is True


def test_check_missing_raises_and_leaves_file_alone(service, data_file, sample_table):
    CsvTodoStore(data_file).save(sample_table)
    before = data_file.read_text()

    with pytest.raises(NotFoundError):
        service.check_todo(3)

    assert data_file.read_text() == before


def test_check_already_completed_skips_save(sample_table):
    store = MagicMock()
    store.load.return_value = sample_table

    outcome = TodoService(store).check_todo(2)

    assert outcome.result is CheckResult.ALREADY_COMPLETED
    store.save.assert_not_called()


def test_list_never_saves():
    store = MagicMock()
    store.load.return_value = TodoTable()

    assert TodoService(store).list_todos() == []
    store.save.assert_not_called()

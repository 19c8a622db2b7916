"""Todo persistence implementations."""

from csvtodo.infrastructure.persistence.csv_store import CsvTodoStore
from csvtodo.infrastructure.persistence.file_lock import locked_file

__all__ = ["CsvTodoStore", "locked_file"]

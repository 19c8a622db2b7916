"""csvtodo CLI entry point."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
import typer

from csvtodo.api.cli.output_formatter import TodoConsole
from csvtodo.application.settings import TodoSettings, configure_logging
from csvtodo.application.todo_service import TodoService
from csvtodo.core.domain.errors import TodoError
from csvtodo.core.domain.todo import CheckResult
from csvtodo.infrastructure.persistence.csv_store import CsvTodoStore

app = typer.Typer(
    name="todo",
    help="Keep a todo list in a CSV file.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _service(ctx: typer.Context) -> TodoService:
    settings: TodoSettings = ctx.obj
    return TodoService(CsvTodoStore(settings.data_file))


@contextmanager
def _handle_errors(todo_console: TodoConsole) -> Iterator[None]:
    """Report domain errors on stderr and exit with status 1."""
    try:
        yield
    except TodoError as exc:
        structlog.get_logger().debug(
            "command_failed", error_code=exc.code, details=exc.details
        )
        todo_console.print_error(str(exc))
        raise typer.Exit(1) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Path of the CSV data file (default: $CSVTODO_FILE or todo_data.csv)",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Keep a todo list in a CSV file."""
    settings = TodoSettings.resolve(data_file=data_file, debug=debug)
    configure_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        TodoConsole().print_error("missing action, expected one of: list, add, check")
        raise typer.Exit(1)


@app.command("list")
def list_todos(ctx: typer.Context):
    """List all todos."""
    todo_console = TodoConsole()
    with _handle_errors(todo_console):
        todos = _service(ctx).list_todos()
    todo_console.print_todos(todos)


@app.command("add")
def add_todo(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="Todo description"),
):
    """Add a todo."""
    todo_console = TodoConsole()
    with _handle_errors(todo_console):
        outcome = _service(ctx).add_todo(description)
    todo_console.print_success(f"Added todo '{description}' with id '{outcome.todo_id}'")


@app.command("check")
def check_todo(
    ctx: typer.Context,
    todo_id: int = typer.Argument(..., metavar="ID", help="Identifier of the todo to complete"),
):
    """Mark a todo as completed."""
    todo_console = TodoConsole()
    with _handle_errors(todo_console):
        outcome = _service(ctx).check_todo(todo_id)

    if outcome.result is CheckResult.ALREADY_COMPLETED:
        todo_console.print_info("Already completed.")
    else:
        todo_console.print_success(f"Marked '{outcome.todo.description}' as completed")


if __name__ == "__main__":
    app()

"""Rich output formatting for the csvtodo CLI."""

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from csvtodo.core.domain.todo import Todo

# Custom theme for csvtodo CLI
CSVTODO_THEME = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "info": "white",
        "id": "cyan",
        "done": "green",
        "open": "yellow",
        "timestamp": "dim white",
    }
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_created_at(todo: Todo) -> str:
    """Render the creation time in the local timezone."""
    return todo.created_at.astimezone().strftime(TIMESTAMP_FORMAT)


class TodoConsole:
    """Console wrapper that renders todos and status messages."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        self.console = console or Console(theme=CSVTODO_THEME, highlight=False)
        self.err_console = err_console or Console(
            theme=CSVTODO_THEME, stderr=True, highlight=False
        )

    def print_todos(self, todos: list[tuple[int, Todo]]) -> None:
        """Print todos as an aligned table with ID, Description, Completed and Created At."""
        table = Table(box=None, pad_edge=False, header_style="bold")
        table.add_column("ID", style="id", justify="right")
        table.add_column("Description", overflow="fold")
        table.add_column("Completed")
        table.add_column("Created At", style="timestamp", no_wrap=True)

        for todo_id, todo in todos:
            table.add_row(
                str(todo_id),
                Text(todo.description),
                Text(str(todo.completed).lower(), style="done" if todo.completed else "open"),
                format_created_at(todo),
            )

        self.console.print(table)

    def print_success(self, message: str) -> None:
        self.console.print(Text(message, style="success"), soft_wrap=True)

    def print_info(self, message: str) -> None:
        self.console.print(Text(message, style="info"), soft_wrap=True)

    def print_error(self, message: str) -> None:
        self.err_console.print(Text(f"Error: {message}", style="error"), soft_wrap=True)

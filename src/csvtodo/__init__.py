"""csvtodo - a command-line todo list kept in a locked CSV file."""

__version__ = "0.1.0"

"""
Runtime settings for csvtodo.

Settings are resolved once per invocation in this order:
explicit values (CLI options), then the ``CSVTODO_FILE`` environment
variable, then the default data file in the working directory.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog

DATA_FILE_ENV = "CSVTODO_FILE"
DEFAULT_DATA_FILE = "todo_data.csv"


@dataclass(frozen=True)
class TodoSettings:
    """Resolved settings for a single invocation."""

    data_file: Path
    debug: bool = False

    @classmethod
    def resolve(cls, data_file: str | Path | None = None, debug: bool = False) -> "TodoSettings":
        """
        Build settings from explicit values with environment fallback.

        Args:
            data_file: Explicit data file path, overrides the environment
            debug: Enable debug logging

        Returns:
            Resolved TodoSettings
        """
        raw_path = data_file or os.getenv(DATA_FILE_ENV) or DEFAULT_DATA_FILE
        return cls(data_file=Path(raw_path).expanduser(), debug=debug)

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.WARNING


def configure_logging(settings: TodoSettings) -> None:
    """Route structlog output to stderr at the configured level."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

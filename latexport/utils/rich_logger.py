"""
Rich logging for latexport.

Provides colourful console logging using the rich library.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _level(level: str) -> int:
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def _rich_handler(console: Console) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


class RichLogger:
    """
    Logger with rich formatting, used for user-facing CLI output.
    """

    def __init__(self, name: str = "latexport", level: str = "INFO",
                 console: Console = None):
        """
        Initialize rich logger.

        Args:
            name: Logger name
            level: Log level
            console: Console to write to (stderr by default)
        """
        self.name = name
        self.level = level
        self.console = console or Console(stderr=True)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(_level(level))

    def success(self, message: str):
        """Print a success message."""
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def failure(self, message: str):
        """Print a failure message."""
        self.console.print(f"[red]✗ {escape(message)}[/red]")


def get_rich_logger(name: str = "latexport", level: str = "INFO") -> RichLogger:
    """
    Get rich logger instance.

    Args:
        name: Logger name
        level: Log level

    Returns:
        RichLogger instance
    """
    return RichLogger(name, level)


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to log through rich; plain stderr output otherwise
    """
    numeric_level = _level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if use_rich:
        root_logger.addHandler(_rich_handler(Console(stderr=True)))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug("Logging initialized at %s level", level.upper())

"""Custom exceptions for latexport."""

from typing import Optional


class LatexportError(Exception):
    """Base exception for latexport errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class TableError(LatexportError):
    """Base exception for malformed table event streams."""

    pass


class TableProtocolError(TableError):
    """Exception raised when a table event arrives in a state that forbids it."""

    pass


class GridOverflowError(TableError):
    """Exception raised when a row uses more columns than the table declares."""

    pass


class GridUnderflowError(TableError):
    """Exception raised when a row other than the last leaves columns uncovered."""

    pass


class InvalidSpanError(TableError):
    """Exception raised for degenerate column spans, row spans or alignments."""

    pass


class EventStreamError(LatexportError):
    """Exception raised when a recorded event stream cannot be replayed."""

    pass

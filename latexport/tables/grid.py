"""
Column-span grid for tables with row-spanning cells.

The grid records, per column, which cell from an earlier row still claims the
column and for how many more rows. Everything here is a pure function of a
``TableSession``: the grid is an immutable tuple that is replaced, never
mutated, so each step can be checked in isolation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..exceptions import GridOverflowError, InvalidSpanError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """Span state of one column, carried from the current row into the next.

    ``col_width`` is only meaningful at the leftmost column of a cell.
    ``rows_remaining`` counts the rows, including the current one, in which
    the owning cell still has to be represented.
    """

    col_width: int = 1
    rows_remaining: int = 0

    def next_row(self) -> "Span":
        """Return the state of this column one row further down."""
        if self.rows_remaining > 0:
            return Span(self.col_width, self.rows_remaining - 1)
        return Span()

    def __str__(self) -> str:
        return f"<c={self.col_width},r={self.rows_remaining}>"


Grid = Tuple[Span, ...]


@dataclass(frozen=True)
class RuleRange:
    """Columns (1-indexed, inclusive) under which a partial rule is drawn."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass
class TableSession:
    """State of one open table: its grid and the scan position in the row."""

    max_columns: int
    grid: Grid
    cursor: int = 0
    row_index: int = 0
    last_row_covered: Optional[int] = None
    cells: int = 0
    placeholders: int = 0
    rules: List[RuleRange] = field(default_factory=list)


def require_int(name: str, value, minimum: int) -> int:
    """Validate an integer table argument.

    Raises:
        InvalidSpanError: If ``value`` is not an int or is below ``minimum``
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSpanError(f"{name} must be an integer", f"got {value!r}")
    if value < minimum:
        raise InvalidSpanError(f"{name} must be at least {minimum}", f"got {value}")
    return value


def make_grid(max_columns: int) -> Grid:
    """Create a grid of ``max_columns`` unclaimed columns."""
    require_int("max_columns", max_columns, 0)
    return tuple(Span() for _ in range(max_columns))


def open_session(max_columns: int) -> TableSession:
    return TableSession(max_columns=max_columns, grid=make_grid(max_columns))


def begin_row(session: TableSession) -> None:
    session.cursor = 0


def skip_claimed(grid: Grid, column: int) -> int:
    """Return the first column at or after ``column`` no earlier row claims."""
    while column < len(grid) and grid[column].rows_remaining > 0:
        column += grid[column].col_width
    return column


def place_cell(session: TableSession, colspan: int, rowspan: int) -> int:
    """
    Place a cell at the next free column of the current row.

    Columns still claimed by cells of earlier rows are skipped first; each
    skipped column has to be filled by one placeholder cell downstream.

    Args:
        session: Open table session
        colspan: Columns the new cell occupies (>= 1)
        rowspan: Rows the new cell occupies (>= 0; 0 and 1 are equivalent)

    Returns:
        Number of placeholder columns skipped before the cell

    Raises:
        InvalidSpanError: If the spans are not valid integers
        GridOverflowError: If the cell does not fit in the declared width
    """
    require_int("colspan", colspan, 1)
    require_int("rowspan", rowspan, 0)

    grid = session.grid
    start = session.cursor
    column = skip_claimed(grid, start)
    skipped = column - start

    if column + colspan > len(grid):
        raise GridOverflowError(
            f"Row {session.row_index + 1} needs {column + colspan} columns "
            f"but the table declares {len(grid)}",
            f"cell with colspan={colspan} starting at column {column + 1}",
        )
    for covered in range(column + 1, column + colspan):
        if grid[covered].rows_remaining > 0:
            raise GridOverflowError(
                f"Row {session.row_index + 1}: cell at column {column + 1} overlaps "
                f"column {covered + 1}, which a cell from an earlier row still spans"
            )

    session.grid = grid[:column] + (Span(colspan, rowspan),) + grid[column + 1:]
    session.cursor = column + colspan
    session.cells += 1
    session.placeholders += skipped

    if skipped:
        logger.debug(
            "Row %d: %d placeholder column(s) before column %d",
            session.row_index + 1, skipped, column + 1,
        )
    return skipped


def covered_columns(session: TableSession) -> int:
    """Columns the current row accounts for, including trailing claimed ones."""
    return min(skip_claimed(session.grid, session.cursor), session.max_columns)


def compute_rules(grid: Grid) -> List[RuleRange]:
    """
    Compute the partial horizontal rules to draw under the current row.

    A rule belongs under every cell that ends in this row
    (``rows_remaining <= 1``); a cell that continues further down
    (``rows_remaining > 1``) breaks the run. Wide cells count as one unit.
    """
    rules: List[RuleRange] = []
    run_start: Optional[int] = None
    column = 0

    while column < len(grid):
        span = grid[column]
        if span.rows_remaining <= 1:
            if run_start is None:
                run_start = column + 1
        elif run_start is not None:
            rules.append(RuleRange(run_start, column))
            run_start = None
        column += span.col_width

    if run_start is not None:
        rules.append(RuleRange(run_start, len(grid)))
    return rules


def decay(grid: Grid) -> Grid:
    """Advance every column by one row."""
    return tuple(span.next_row() for span in grid)


def close_row(session: TableSession) -> List[RuleRange]:
    """
    Finish the current row.

    Returns:
        Rule ranges to draw under the row, left to right
    """
    session.last_row_covered = covered_columns(session)
    rules = compute_rules(session.grid)
    session.grid = decay(session.grid)
    session.cursor = 0
    session.row_index += 1
    session.rules.extend(rules)

    logger.debug(
        "Row %d closed: rules %s", session.row_index,
        ", ".join(str(rule) for rule in rules) or "none",
    )
    return rules

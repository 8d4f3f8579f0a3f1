"""
Grid tracker: adapts tables with row-spanning cells to column-oriented output.

A LaTeX ``tabular`` lays out each row strictly left to right and has no idea
that a cell opened two rows above still occupies a column. The tracker keeps a
column-span grid for the open table, re-emits one empty placeholder cell per
claimed column so later cells keep their column, and tells the renderer under
which columns to draw partial rules when a row closes.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from ..config import VALID_ALIGNMENTS, TableOptions
from ..exceptions import GridUnderflowError, InvalidSpanError, TableProtocolError
from ..renderers.sink import TableEventSink
from . import grid
from .grid import TableSession

logger = logging.getLogger(__name__)


class TrackerState(Enum):
    CLOSED = "closed"
    TABLE_OPEN = "table_open"
    ROW_OPEN = "row_open"
    CELL_OPEN = "cell_open"


class TableGridTracker(TableEventSink):
    """
    Table event stage that corrects row spans for the downstream sink.

    Each tracker handles one table at a time; independent tables can be
    processed by independent trackers. Paragraph events inside a table are
    adapted for cell content: paragraphs are dropped in favour of line
    breaks and unformatted text is passed on as plain text.
    """

    def __init__(self, downstream: TableEventSink, options: Optional[TableOptions] = None):
        """
        Initialize grid tracker.

        Args:
            downstream: Sink receiving the corrected event stream
            options: Table options (``strict_width`` is used here)
        """
        self.downstream = downstream
        self.options = options or TableOptions()
        self.state = TrackerState.CLOSED
        self.session: Optional[TableSession] = None
        self._open_cell: Optional[str] = None

    @property
    def in_table(self) -> bool:
        return self.state is not TrackerState.CLOSED

    def _expect(self, event: str, *states: TrackerState) -> None:
        if self.state not in states:
            raise TableProtocolError(
                f"'{event}' is not allowed while {self.state.value}",
                f"expected one of: {', '.join(state.value for state in states)}",
            )

    # ------------------------------------------------------------------
    # Tables and rows
    # ------------------------------------------------------------------
    def table_open(self, max_columns: int) -> None:
        self._expect("table_open", TrackerState.CLOSED)
        self.session = grid.open_session(max_columns)
        self.state = TrackerState.TABLE_OPEN
        logger.debug("Table opened with %d column(s)", max_columns)
        self.downstream.table_open(max_columns)

    def table_close(self) -> None:
        self._expect("table_close", TrackerState.TABLE_OPEN)
        session = self.session
        logger.info(
            "Table closed: %d row(s), %d cell(s), %d placeholder(s), %d rule(s)",
            session.row_index, session.cells, session.placeholders, len(session.rules),
        )
        self.session = None
        self.state = TrackerState.CLOSED
        self.downstream.table_close()

    def tablerow_open(self) -> None:
        self._expect("tablerow_open", TrackerState.TABLE_OPEN)
        session = self.session
        covered = session.last_row_covered
        if self.options.strict_width and covered is not None and covered < session.max_columns:
            raise GridUnderflowError(
                f"Row {session.row_index} covers {covered} of {session.max_columns} columns",
                "only the last row of a table may be shorter than the table",
            )
        grid.begin_row(session)
        self.state = TrackerState.ROW_OPEN
        self.downstream.tablerow_open()

    def tablerow_close(self) -> None:
        self._expect("tablerow_close", TrackerState.ROW_OPEN)
        for rule in grid.close_row(self.session):
            self.downstream.table_cline(rule.start, rule.end)
        self.state = TrackerState.TABLE_OPEN
        self.downstream.tablerow_close()

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def tableheader_open(self, colspan=1, align=None, rowspan=1, placeholder=False) -> None:
        self._open("tableheader", colspan, align, rowspan, placeholder)

    def tableheader_close(self, placeholder=False) -> None:
        self._close("tableheader", placeholder)

    def tablecell_open(self, colspan=1, align=None, rowspan=1, placeholder=False) -> None:
        self._open("tablecell", colspan, align, rowspan, placeholder)

    def tablecell_close(self, placeholder=False) -> None:
        self._close("tablecell", placeholder)

    def _reject_placeholder(self, event: str, placeholder: bool) -> None:
        if placeholder:
            raise TableProtocolError(
                f"'{event}' is flagged as a placeholder",
                "placeholders are produced by the grid tracker and cannot be fed to it",
            )

    def _open(self, kind: str, colspan: int, align: Optional[str], rowspan: int,
              placeholder: bool = False) -> None:
        self._reject_placeholder(f"{kind}_open", placeholder)
        self._expect(f"{kind}_open", TrackerState.ROW_OPEN)
        if align is not None and align not in VALID_ALIGNMENTS:
            raise InvalidSpanError(f"Invalid cell alignment: {align!r}")

        skipped = grid.place_cell(self.session, colspan, rowspan)
        open_event = getattr(self.downstream, f"{kind}_open")
        close_event = getattr(self.downstream, f"{kind}_close")
        for _ in range(skipped):
            open_event(1, None, 1, placeholder=True)
            close_event(placeholder=True)

        self._open_cell = kind
        self.state = TrackerState.CELL_OPEN
        open_event(colspan, align, rowspan)

    def _close(self, kind: str, placeholder: bool = False) -> None:
        self._reject_placeholder(f"{kind}_close", placeholder)
        self._expect(f"{kind}_close", TrackerState.CELL_OPEN)
        if self._open_cell != kind:
            raise TableProtocolError(f"'{kind}_close' does not match the open {self._open_cell}")
        self._open_cell = None
        self.state = TrackerState.ROW_OPEN
        getattr(self.downstream, f"{kind}_close")()

    def table_cline(self, start: int, end: int) -> None:
        raise TableProtocolError("Rules are computed by the grid tracker and cannot be fed to it")

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def cdata(self, text: str) -> None:
        self.downstream.cdata(text)

    def linebreak(self) -> None:
        self.downstream.linebreak()

    def p_open(self) -> None:
        if not self.in_table:
            self.downstream.p_open()

    def p_close(self) -> None:
        if self.in_table:
            self.downstream.linebreak()
        else:
            self.downstream.p_close()

    def unformatted(self, text: str) -> None:
        # Verbatim cannot live inside a table cell.
        if self.in_table:
            self.downstream.cdata(text)
        else:
            self.downstream.unformatted(text)

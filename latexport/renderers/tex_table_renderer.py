"""
LaTeX renderer for corrected table event streams.

Turns the output of ``TableGridTracker`` into a ``tabular`` environment:
wide cells become ``\\multicolumn``, tall cells ``\\multirow``, multi-line
cells ``\\makecell``, and partial rules ``\\cline`` after the row terminator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import TableOptions
from ..utils.tex import column_letter, escape_tex, format_command
from .sink import TableEventSink

logger = logging.getLogger(__name__)

REQUIRED_PACKAGES = ("multirow", "makecell")

_LINEBREAK = object()


@dataclass
class _Cell:
    header: bool
    colspan: int
    align: Optional[str]
    rowspan: int
    placeholder: bool = False
    parts: list = field(default_factory=list)


class TexTableRenderer(TableEventSink):
    """
    Renders table events as LaTeX source.

    The renderer expects a stream in which row spans have already been
    resolved into placeholder cells, as produced by ``TableGridTracker``.
    Placeholders continuing a cell that is both wide and tall are merged
    into one empty ``\\multicolumn`` so no column rule splits the cell.
    """

    def __init__(self, options: Optional[TableOptions] = None):
        """
        Initialize TeX table renderer.

        Args:
            options: Table options (rules, header style, default alignment)
        """
        self.options = options or TableOptions()
        self.lines: List[str] = []
        self.max_columns = 0
        self._row: Optional[List[str]] = None
        self._column = 0
        self._cell: Optional[_Cell] = None
        self._clines: List[Tuple[int, int]] = []
        self._text: List[str] = []
        # Wide cells spanning several rows: start column -> [width, rows left].
        self._claims: Dict[int, List[int]] = {}
        self._absorb = 0

    def getvalue(self) -> str:
        """Return the LaTeX written so far."""
        self._flush_text()
        return "\n".join(self.lines) + ("\n" if self.lines else "")

    # ------------------------------------------------------------------
    # Tables and rows
    # ------------------------------------------------------------------
    def table_open(self, max_columns: int) -> None:
        self._flush_text()
        self.max_columns = max_columns
        self._claims = {}
        letter = column_letter(None, self.options.default_align)
        rule = self._rule()
        spec = rule + rule.join(letter for _ in range(max_columns)) + rule if max_columns else ""
        self.lines.append(format_command("begin", "tabular") + "{" + spec + "}")
        self.lines.append(r"\hline")

    def table_close(self) -> None:
        self.lines.append(format_command("end", "tabular"))
        self.max_columns = 0
        self._claims = {}

    def tablerow_open(self) -> None:
        self._row = []
        self._column = 0
        self._absorb = 0
        self._clines = []

    def tablerow_close(self) -> None:
        self.lines.append(" & ".join(self._row or []) + r" \\")
        if self._clines:
            self.lines.append(self._format_clines(self._clines))
        self._row = None
        self._clines = []
        for column in list(self._claims):
            claim = self._claims[column]
            claim[1] -= 1
            if claim[1] <= 0:
                del self._claims[column]

    def table_cline(self, start: int, end: int) -> None:
        self._clines.append((start, end))

    def _format_clines(self, clines: List[Tuple[int, int]]) -> str:
        if self.options.full_width_hline and clines == [(1, self.max_columns)]:
            return r"\hline"
        return " ".join(f"\\cline{{{start}-{end}}}" for start, end in clines)

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def tableheader_open(self, colspan=1, align=None, rowspan=1, placeholder=False) -> None:
        self._cell = _Cell(True, colspan, align, rowspan, placeholder)

    def tableheader_close(self, placeholder=False) -> None:
        self._finish_cell()

    def tablecell_open(self, colspan=1, align=None, rowspan=1, placeholder=False) -> None:
        self._cell = _Cell(False, colspan, align, rowspan, placeholder)

    def tablecell_close(self, placeholder=False) -> None:
        self._finish_cell()

    def _finish_cell(self) -> None:
        cell = self._cell
        self._cell = None
        if self._row is None:
            self._row = []
        column = self._column
        self._column += cell.colspan

        if cell.placeholder:
            if self._absorb:
                # Already covered by the \multicolumn of its claim.
                self._absorb -= 1
                return
            claim = self._claims.get(column)
            if claim is not None:
                self._absorb = claim[0] - 1
                self._row.append(self._multicolumn(claim[0], column, None, ""))
                return
            self._row.append("")
            return

        self._absorb = 0
        if cell.colspan > 1 and cell.rowspan > 1:
            self._claims[column] = [cell.colspan, cell.rowspan]
        self._row.append(self._format_cell(cell, column))

    def _format_cell(self, cell: _Cell, column: int) -> str:
        parts = list(cell.parts)
        while parts and parts[-1] is _LINEBREAK:
            parts.pop()
        while parts and parts[0] is _LINEBREAK:
            parts.pop(0)

        segments = [""]
        for part in parts:
            if part is _LINEBREAK:
                segments.append("")
            else:
                segments[-1] += part
        segments = [segment.strip() for segment in segments]
        if cell.header and self.options.bold_headers:
            segments = [f"\\textbf{{{segment}}}" if segment else "" for segment in segments]

        letter = column_letter(cell.align, self.options.default_align)
        if len(segments) > 1:
            joined = r" \\ ".join(segments)
            content = f"\\makecell[{letter}]{{{joined}}}"
        else:
            content = segments[0]

        if cell.rowspan > 1:
            content = f"\\multirow{{{cell.rowspan}}}{{*}}{{{content}}}"
        if cell.colspan > 1 or (cell.align and letter != column_letter(None, self.options.default_align)):
            content = self._multicolumn(cell.colspan, column, cell.align, content)
        return content

    def _multicolumn(self, colspan: int, column: int, align: Optional[str], content: str) -> str:
        letter = column_letter(align, self.options.default_align)
        rule = self._rule()
        left = rule if column == 0 else ""
        return f"\\multicolumn{{{colspan}}}{{{left}{letter}{rule}}}{{{content}}}"

    def _rule(self) -> str:
        return "|" if self.options.vertical_rules else ""

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def cdata(self, text: str) -> None:
        if self._cell is not None:
            self._cell.parts.append(escape_tex(text))
        elif self._row is None:
            self._text.append(escape_tex(text))
        else:
            logger.warning("Dropping text between table cells: %r", text)

    def linebreak(self) -> None:
        if self._cell is not None:
            self._cell.parts.append(_LINEBREAK)
        elif self._row is None:
            self._text.append(r"\\")
        else:
            logger.warning("Dropping line break between table cells")

    def p_close(self) -> None:
        self._flush_text()
        self.lines.append("")

    def unformatted(self, text: str) -> None:
        self.cdata(text)

    def _flush_text(self) -> None:
        if self._text:
            self.lines.append("".join(self._text))
            self._text = []


def standalone(body: str) -> str:
    """Wrap rendered tables in a minimal compilable document."""
    lines = [format_command("documentclass", "article")]
    lines.extend(format_command("usepackage", package) for package in REQUIRED_PACKAGES)
    lines.append(format_command("begin", "document"))
    lines.append(body.rstrip("\n"))
    lines.append(format_command("end", "document"))
    return "\n".join(lines) + "\n"

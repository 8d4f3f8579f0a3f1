"""
latexport - LaTeX export for structured documents.

The core of the package is the table grid tracker, which turns a stream of
table events with row-spanning cells into one a LaTeX ``tabular`` can
represent: placeholder cells keep later cells in their columns, and partial
rules are drawn only under cells that end in the row being closed.

Quick Start:
    from latexport import load_events, render_tables

    events = load_events("table.json")
    print(render_tables(events, standalone=True))
"""

from .version import __version__, __version_info__

from .exceptions import (
    LatexportError,
    TableError,
    TableProtocolError,
    GridOverflowError,
    GridUnderflowError,
    InvalidSpanError,
    EventStreamError,
)
from .config import TableOptions
from .tables import Span, RuleRange, TableSession, TableGridTracker
from .renderers import EventRecorder, TableEventSink, TexTableRenderer
from .events import load_events, parse_events, replay
from .api import render_tables, trace_tables

__all__ = [
    "__version__",
    "__version_info__",
    "LatexportError",
    "TableError",
    "TableProtocolError",
    "GridOverflowError",
    "GridUnderflowError",
    "InvalidSpanError",
    "EventStreamError",
    "TableOptions",
    "Span",
    "RuleRange",
    "TableSession",
    "TableGridTracker",
    "EventRecorder",
    "TableEventSink",
    "TexTableRenderer",
    "load_events",
    "parse_events",
    "replay",
    "render_tables",
    "trace_tables",
]

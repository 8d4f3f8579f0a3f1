"""
High-level API.

Usage:
    from latexport import render_tables, trace_tables, load_events

    events = load_events("table.json")
    print(render_tables(events))
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from .config import TableOptions
from .events import replay
from .renderers.sink import EventRecorder, RecordedEvent
from .renderers.tex_table_renderer import TexTableRenderer, standalone as wrap_document
from .tables.tracker import TableGridTracker

Options = Union[TableOptions, Dict[str, Any], None]


def _options(options: Options) -> TableOptions:
    if isinstance(options, TableOptions):
        return options
    return TableOptions.from_dict(options)


def render_tables(events: Iterable[RecordedEvent], options: Options = None,
                  standalone: bool = False) -> str:
    """
    Render a table event stream to LaTeX.

    Args:
        events: Events as produced by the host document walker
        options: TableOptions or a dict of option values
        standalone: Wrap the result in a minimal document

    Returns:
        LaTeX source
    """
    table_options = _options(options)
    renderer = TexTableRenderer(table_options)
    replay(events, TableGridTracker(renderer, table_options))
    body = renderer.getvalue()
    return wrap_document(body) if standalone else body


def trace_tables(events: Iterable[RecordedEvent], options: Options = None) -> List[RecordedEvent]:
    """Return the corrected event stream the renderer would receive."""
    table_options = _options(options)
    recorder = EventRecorder()
    replay(events, TableGridTracker(recorder, table_options))
    return recorder.events

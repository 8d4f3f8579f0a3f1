"""
Recorded table event streams.

A stream is a JSON array. Each entry is either a list, ``["tablecell_open", 2,
"left", 1]``, or an object, ``{"event": "tablecell_open", "args": [2, "left",
1]}``. Objects may carry ``"placeholder": true`` as produced by ``trace``;
such streams can be replayed into a renderer or recorder, but not into a
``TableGridTracker``, which only accepts uncorrected input.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

from .exceptions import EventStreamError
from .renderers.sink import RecordedEvent, TableEventSink

logger = logging.getLogger(__name__)

# Accepted events with their (minimum, maximum) number of positional arguments.
EVENT_ARITY: Dict[str, Tuple[int, int]] = {
    "table_open": (1, 1),
    "table_close": (0, 0),
    "tablerow_open": (0, 0),
    "tablerow_close": (0, 0),
    "tableheader_open": (0, 3),
    "tableheader_close": (0, 0),
    "tablecell_open": (0, 3),
    "tablecell_close": (0, 0),
    "table_cline": (2, 2),
    "cdata": (1, 1),
    "linebreak": (0, 0),
    "p_open": (0, 0),
    "p_close": (0, 0),
    "unformatted": (1, 1),
}

EVENT_NAMES = tuple(EVENT_ARITY)

CELL_EVENTS = ("tableheader_open", "tableheader_close", "tablecell_open", "tablecell_close")

TEXT_EVENTS = ("cdata", "unformatted")


def parse_event(entry: Any, index: int = 0) -> RecordedEvent:
    """
    Parse one entry of a recorded stream.

    Raises:
        EventStreamError: If the entry has the wrong shape, names an unknown
            event or carries the wrong arguments
    """
    placeholder = False
    if isinstance(entry, list) and entry:
        name, args = entry[0], entry[1:]
    elif isinstance(entry, dict) and "event" in entry:
        name = entry["event"]
        args = entry.get("args", [])
        placeholder = bool(entry.get("placeholder", False))
        if not isinstance(args, list):
            raise EventStreamError(f"Event {index}: 'args' must be a list", repr(args))
    else:
        raise EventStreamError(f"Event {index}: expected a list or an object with 'event'", repr(entry))

    if not isinstance(name, str) or name not in EVENT_ARITY:
        raise EventStreamError(f"Event {index}: unknown event {name!r}")
    minimum, maximum = EVENT_ARITY[name]
    if not minimum <= len(args) <= maximum:
        raise EventStreamError(
            f"Event {index}: {name} takes {minimum}..{maximum} argument(s)", f"got {len(args)}"
        )
    if name in TEXT_EVENTS and not isinstance(args[0], str):
        raise EventStreamError(f"Event {index}: {name} takes a string", f"got {type(args[0]).__name__}")
    if placeholder and name not in CELL_EVENTS:
        raise EventStreamError(f"Event {index}: only cell events can be placeholders")
    return RecordedEvent(name, tuple(args), placeholder)


def parse_events(data: Any) -> List[RecordedEvent]:
    if not isinstance(data, list):
        raise EventStreamError("An event stream must be a JSON array")
    return [parse_event(entry, index) for index, entry in enumerate(data)]


def load_events(path: Union[str, Path]) -> List[RecordedEvent]:
    """
    Load a recorded event stream from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed events in stream order
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise EventStreamError(f"Invalid JSON in {path}", str(e)) from e
    except UnicodeDecodeError as e:
        raise EventStreamError("Event stream is not UTF-8 encoded", f"{path}: {e}") from e

    events = parse_events(data)
    logger.debug("Loaded %d event(s) from %s", len(events), path)
    return events


def replay(events: Iterable[RecordedEvent], sink: TableEventSink) -> TableEventSink:
    """
    Dispatch events to the sink method of the same name.

    Returns:
        The sink, for chaining
    """
    for event in events:
        method = getattr(sink, event.name)
        if event.placeholder:
            method(*event.args, placeholder=True)
        else:
            method(*event.args)
    return sink


def dump_events(events: Iterable[RecordedEvent]) -> str:
    """Serialize events in the object form accepted by ``parse_events``."""
    return json.dumps([event.to_dict() for event in events], indent=2)

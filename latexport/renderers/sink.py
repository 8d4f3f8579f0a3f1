"""Interface for consumers of table events, and a recording implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, NamedTuple, Optional, Tuple


class TableEventSink(ABC):
    """Interface for anything that consumes a table event stream.

    The grid tracker is one such sink and forwards a corrected stream to
    another. Placeholder cells arrive as ordinary cell events flagged with
    ``placeholder=True``; partial rules arrive through ``table_cline``.
    """

    @abstractmethod
    def table_open(self, max_columns: int) -> None:
        """Start a table of at most ``max_columns`` columns."""

    @abstractmethod
    def table_close(self) -> None:
        """End the current table."""

    @abstractmethod
    def tablerow_open(self) -> None:
        """Start a row."""

    @abstractmethod
    def tablerow_close(self) -> None:
        """End a row."""

    @abstractmethod
    def tableheader_open(self, colspan: int = 1, align: Optional[str] = None,
                         rowspan: int = 1, placeholder: bool = False) -> None:
        """Open a header cell."""

    @abstractmethod
    def tableheader_close(self, placeholder: bool = False) -> None:
        """Close a header cell."""

    @abstractmethod
    def tablecell_open(self, colspan: int = 1, align: Optional[str] = None,
                       rowspan: int = 1, placeholder: bool = False) -> None:
        """Open a data cell."""

    @abstractmethod
    def tablecell_close(self, placeholder: bool = False) -> None:
        """Close a data cell."""

    @abstractmethod
    def table_cline(self, start: int, end: int) -> None:
        """Draw a rule under columns ``start``..``end`` (1-indexed) of the row being closed."""

    # ------------------------------------------------------------------
    # Cell content. Sinks that do not render content may ignore these.
    # ------------------------------------------------------------------
    def cdata(self, text: str) -> None:
        pass

    def linebreak(self) -> None:
        pass

    def p_open(self) -> None:
        pass

    def p_close(self) -> None:
        pass

    def unformatted(self, text: str) -> None:
        pass


class RecordedEvent(NamedTuple):
    """One event as seen by an ``EventRecorder``."""

    name: str
    args: Tuple[Any, ...] = ()
    placeholder: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"event": self.name, "args": list(self.args)}
        if self.placeholder:
            data["placeholder"] = True
        return data


class EventRecorder(TableEventSink):
    """Sink that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: List[RecordedEvent] = []

    def _record(self, name: str, *args: Any, placeholder: bool = False) -> None:
        self.events.append(RecordedEvent(name, tuple(args), placeholder))

    def table_open(self, max_columns: int) -> None:
        self._record("table_open", max_columns)

    def table_close(self) -> None:
        self._record("table_close")

    def tablerow_open(self) -> None:
        self._record("tablerow_open")

    def tablerow_close(self) -> None:
        self._record("tablerow_close")

    def tableheader_open(self, colspan=1, align=None, rowspan=1, placeholder=False) -> None:
        self._record("tableheader_open", colspan, align, rowspan, placeholder=placeholder)

    def tableheader_close(self, placeholder=False) -> None:
        self._record("tableheader_close", placeholder=placeholder)

    def tablecell_open(self, colspan=1, align=None, rowspan=1, placeholder=False) -> None:
        self._record("tablecell_open", colspan, align, rowspan, placeholder=placeholder)

    def tablecell_close(self, placeholder=False) -> None:
        self._record("tablecell_close", placeholder=placeholder)

    def table_cline(self, start: int, end: int) -> None:
        self._record("table_cline", start, end)

    def cdata(self, text: str) -> None:
        self._record("cdata", text)

    def linebreak(self) -> None:
        self._record("linebreak")

    def p_open(self) -> None:
        self._record("p_open")

    def p_close(self) -> None:
        self._record("p_close")

    def unformatted(self, text: str) -> None:
        self._record("unformatted", text)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def names(self) -> List[str]:
        return [event.name for event in self.events]

    def count(self, name: str, placeholder: Optional[bool] = None) -> int:
        """Count events named ``name``, optionally only (non-)placeholders."""
        return sum(
            1 for event in self.events
            if event.name == name and (placeholder is None or event.placeholder == placeholder)
        )

    def clines(self) -> List[Tuple[int, int]]:
        return [event.args for event in self.events if event.name == "table_cline"]

    def rows(self) -> List[List[RecordedEvent]]:
        """Split the recording into the events of each row, open to close."""
        rows: List[List[RecordedEvent]] = []
        current: Optional[List[RecordedEvent]] = None
        for event in self.events:
            if event.name == "tablerow_open":
                current = []
            elif event.name == "tablerow_close":
                if current is not None:
                    rows.append(current)
                current = None
            elif current is not None:
                current.append(event)
        return rows

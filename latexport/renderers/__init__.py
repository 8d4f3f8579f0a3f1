"""
Renderers and sinks for table event streams.
"""

from .sink import EventRecorder, RecordedEvent, TableEventSink
from .tex_table_renderer import REQUIRED_PACKAGES, TexTableRenderer, standalone

__all__ = [
    "EventRecorder",
    "RecordedEvent",
    "TableEventSink",
    "TexTableRenderer",
    "REQUIRED_PACKAGES",
    "standalone",
]

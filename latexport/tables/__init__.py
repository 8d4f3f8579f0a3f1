"""
Table support: the column-span grid and the tracker that uses it.
"""

from .grid import (
    Grid,
    RuleRange,
    Span,
    TableSession,
    close_row,
    compute_rules,
    decay,
    make_grid,
    place_cell,
)
from .tracker import TableGridTracker, TrackerState

__all__ = [
    "Grid",
    "RuleRange",
    "Span",
    "TableSession",
    "TableGridTracker",
    "TrackerState",
    "close_row",
    "compute_rules",
    "decay",
    "make_grid",
    "place_cell",
]

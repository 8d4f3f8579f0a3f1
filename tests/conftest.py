"""
Pytest configuration for latexport
"""

import logging
import sys

import pytest

from latexport.config import TableOptions
from latexport.renderers.sink import EventRecorder
from latexport.tables.tracker import TableGridTracker


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid leaking handlers between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Directory for files written by a test."""
    return tmp_path


@pytest.fixture
def recorder():
    """Event recorder standing in for the downstream renderer."""
    return EventRecorder()


@pytest.fixture
def tracker(recorder):
    """Grid tracker forwarding to the recorder."""
    return TableGridTracker(recorder)


@pytest.fixture
def lenient_tracker(recorder):
    """Grid tracker that accepts short rows anywhere."""
    return TableGridTracker(recorder, TableOptions(strict_width=False))


@pytest.fixture
def feed_table():
    """
    Feed a whole table into a tracker.

    Rows are lists of ``(colspan, rowspan)`` pairs; every cell is a data cell.
    """
    def feed(tracker, max_columns, rows, close=True):
        tracker.table_open(max_columns)
        for row in rows:
            tracker.tablerow_open()
            for colspan, rowspan in row:
                tracker.tablecell_open(colspan, None, rowspan)
                tracker.tablecell_close()
            tracker.tablerow_close()
        if close:
            tracker.table_close()
        return tracker

    return feed


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False

"""
Tests for the high-level API.
"""

import pytest

from latexport import render_tables, trace_tables
from latexport.config import TableOptions
from latexport.exceptions import TableProtocolError
from latexport.renderers.sink import RecordedEvent


def span_table():
    return [
        RecordedEvent("table_open", (2,)),
        RecordedEvent("tablerow_open"),
        RecordedEvent("tablecell_open", (1, None, 2)),
        RecordedEvent("cdata", ("tall",)),
        RecordedEvent("tablecell_close"),
        RecordedEvent("tablecell_open", (1, None, 1)),
        RecordedEvent("cdata", ("top",)),
        RecordedEvent("tablecell_close"),
        RecordedEvent("tablerow_close"),
        RecordedEvent("tablerow_open"),
        RecordedEvent("tablecell_open", (1, None, 1)),
        RecordedEvent("cdata", ("bottom",)),
        RecordedEvent("tablecell_close"),
        RecordedEvent("tablerow_close"),
        RecordedEvent("table_close"),
    ]


class TestApi:
    """Test cases for render_tables and trace_tables."""

    def test_render_tables(self):
        tex = render_tables(span_table())

        assert "\\multirow{2}{*}{tall} & top \\\\" in tex
        assert "\\cline{2-2}" in tex
        assert " & bottom \\\\" in tex

    def test_render_with_dict_options(self):
        tex = render_tables(span_table(), {"vertical_rules": False})

        assert tex.startswith("\\begin{tabular}{ll}")

    def test_render_with_options_object(self):
        tex = render_tables(span_table(), TableOptions(full_width_hline=False))

        assert "\\cline{1-2}" in tex

    def test_render_standalone(self):
        tex = render_tables(span_table(), standalone=True)

        assert tex.startswith("\\documentclass{article}")
        assert tex.rstrip().endswith("\\end{document}")

    def test_trace_tables(self):
        events = trace_tables(span_table())

        placeholders = [event for event in events if event.placeholder]
        assert [event.name for event in placeholders] == ["tablecell_open", "tablecell_close"]
        assert [event.args for event in events if event.name == "table_cline"] == [(2, 2), (1, 2)]

    def test_trace_output_cannot_be_traced_again(self):
        with pytest.raises(TableProtocolError):
            trace_tables(trace_tables(span_table()))

    def test_placeholder_flag_is_not_dropped_silently(self):
        events = [
            RecordedEvent("table_open", (1,)),
            RecordedEvent("tablerow_open"),
            RecordedEvent("tablecell_open", (1, None, 1), True),
        ]

        with pytest.raises(TableProtocolError, match="placeholder"):
            trace_tables(events)

"""
Tests for TexTableRenderer.
"""

import pytest

from latexport.config import TableOptions
from latexport.renderers.tex_table_renderer import REQUIRED_PACKAGES, TexTableRenderer, standalone
from latexport.tables.tracker import TableGridTracker


def cell(sink, text, colspan=1, align=None, rowspan=1, header=False):
    """Emit one cell holding ``text``."""
    kind = "tableheader" if header else "tablecell"
    getattr(sink, f"{kind}_open")(colspan, align, rowspan)
    if text:
        sink.cdata(text)
    getattr(sink, f"{kind}_close")()


class TestTexTableRenderer:
    """Test cases for TexTableRenderer fed through the grid tracker."""

    @pytest.fixture
    def renderer(self):
        return TexTableRenderer()

    @pytest.fixture
    def pipeline(self, renderer):
        return TableGridTracker(renderer)

    def test_simple_table(self, renderer, pipeline):
        pipeline.table_open(2)
        pipeline.tablerow_open()
        cell(pipeline, "a")
        cell(pipeline, "b")
        pipeline.tablerow_close()
        pipeline.tablerow_open()
        cell(pipeline, "c")
        cell(pipeline, "d")
        pipeline.tablerow_close()
        pipeline.table_close()

        assert renderer.getvalue() == (
            "\\begin{tabular}{|l|l|}\n"
            "\\hline\n"
            "a & b \\\\\n"
            "\\hline\n"
            "c & d \\\\\n"
            "\\hline\n"
            "\\end{tabular}\n"
        )

    def test_row_and_column_spans(self, renderer, pipeline):
        pipeline.table_open(3)
        pipeline.tablerow_open()
        cell(pipeline, "A", colspan=2, rowspan=2)
        cell(pipeline, "B")
        pipeline.tablerow_close()
        pipeline.tablerow_open()
        cell(pipeline, "C")
        pipeline.tablerow_close()
        pipeline.table_close()

        lines = renderer.getvalue().splitlines()
        assert lines == [
            "\\begin{tabular}{|l|l|l|}",
            "\\hline",
            "\\multicolumn{2}{|l|}{\\multirow{2}{*}{A}} & B \\\\",
            "\\cline{3-3}",
            "\\multicolumn{2}{|l|}{} & C \\\\",
            "\\hline",
            "\\end{tabular}",
        ]

    def test_wide_row_span_is_not_split_by_column_rules(self, renderer, pipeline):
        pipeline.table_open(3)
        pipeline.tablerow_open()
        cell(pipeline, "A", colspan=2, rowspan=3)
        cell(pipeline, "B")
        pipeline.tablerow_close()
        for text in ("C", "D"):
            pipeline.tablerow_open()
            cell(pipeline, text)
            pipeline.tablerow_close()
        pipeline.table_close()

        assert renderer.getvalue().splitlines()[2:-1] == [
            "\\multicolumn{2}{|l|}{\\multirow{3}{*}{A}} & B \\\\",
            "\\cline{3-3}",
            "\\multicolumn{2}{|l|}{} & C \\\\",
            "\\cline{3-3}",
            "\\multicolumn{2}{|l|}{} & D \\\\",
            "\\hline",
        ]

    def test_wide_row_span_inside_row(self, renderer, pipeline):
        pipeline.table_open(4)
        pipeline.tablerow_open()
        cell(pipeline, "A")
        cell(pipeline, "B", colspan=2, rowspan=2)
        cell(pipeline, "C")
        pipeline.tablerow_close()
        pipeline.tablerow_open()
        cell(pipeline, "D")
        cell(pipeline, "E")
        pipeline.tablerow_close()

        assert "D & \\multicolumn{2}{l|}{} & E \\\\" in renderer.lines

    def test_narrow_row_span_leaves_empty_slot(self, renderer, pipeline):
        pipeline.table_open(2)
        pipeline.tablerow_open()
        cell(pipeline, "A", rowspan=2)
        cell(pipeline, "B")
        pipeline.tablerow_close()
        pipeline.tablerow_open()
        cell(pipeline, "C")
        pipeline.tablerow_close()

        assert " & C \\\\" in renderer.lines

    def test_line_break_between_cells_is_dropped_with_warning(self, renderer, caplog):
        renderer.table_open(1)
        renderer.tablerow_open()
        with caplog.at_level("WARNING", logger="latexport.renderers.tex_table_renderer"):
            renderer.linebreak()
            renderer.cdata("stray")
        renderer.tablerow_close()

        assert len(caplog.records) == 2
        assert renderer.lines[-1] == " \\\\"

    def test_partial_rules_on_one_line(self, renderer, pipeline):
        pipeline.table_open(3)
        pipeline.tablerow_open()
        cell(pipeline, "a")
        cell(pipeline, "b", rowspan=2)
        cell(pipeline, "c")
        pipeline.tablerow_close()

        assert renderer.lines[-1] == "\\cline{1-1} \\cline{3-3}"

    def test_headers_are_bold(self, renderer, pipeline):
        pipeline.table_open(1)
        pipeline.tablerow_open()
        cell(pipeline, "Name", header=True)
        pipeline.tablerow_close()

        assert "\\textbf{Name} \\\\" in renderer.lines

    def test_plain_headers(self):
        renderer = TexTableRenderer(TableOptions(bold_headers=False))
        renderer.table_open(1)
        renderer.tablerow_open()
        cell(renderer, "Name", header=True)
        renderer.tablerow_close()

        assert "Name \\\\" in renderer.lines

    def test_text_is_escaped(self, renderer, pipeline):
        pipeline.table_open(1)
        pipeline.tablerow_open()
        cell(pipeline, "50% & more_")
        pipeline.tablerow_close()

        assert "50\\% \\& more\\_ \\\\" in renderer.lines

    def test_line_breaks_use_makecell(self, renderer, pipeline):
        pipeline.table_open(1)
        pipeline.tablerow_open()
        pipeline.tablecell_open(1, None, 1)
        pipeline.cdata("first")
        pipeline.linebreak()
        pipeline.cdata("second")
        pipeline.tablecell_close()
        pipeline.tablerow_close()

        assert "\\makecell[l]{first \\\\ second} \\\\" in renderer.lines

    def test_paragraph_close_in_cell_leaves_no_trailing_break(self, renderer, pipeline):
        pipeline.table_open(1)
        pipeline.tablerow_open()
        pipeline.tablecell_open(1, None, 1)
        pipeline.p_open()
        pipeline.cdata("only")
        pipeline.p_close()
        pipeline.tablecell_close()
        pipeline.tablerow_close()

        assert "only \\\\" in renderer.lines

    def test_alignment(self, renderer, pipeline):
        pipeline.table_open(2)
        pipeline.tablerow_open()
        cell(pipeline, "a", align="right")
        cell(pipeline, "b", align="center")
        pipeline.tablerow_close()

        assert "\\multicolumn{1}{|r|}{a} & \\multicolumn{1}{c|}{b} \\\\" in renderer.lines

    def test_default_alignment_needs_no_multicolumn(self, renderer, pipeline):
        pipeline.table_open(1)
        pipeline.tablerow_open()
        cell(pipeline, "a", align="left")
        pipeline.tablerow_close()

        assert "a \\\\" in renderer.lines

    def test_without_vertical_rules(self):
        renderer = TexTableRenderer(TableOptions(vertical_rules=False))
        renderer.table_open(3)

        assert renderer.lines[0] == "\\begin{tabular}{lll}"

    def test_full_width_rule_as_cline(self):
        renderer = TexTableRenderer(TableOptions(full_width_hline=False))
        pipeline = TableGridTracker(renderer)
        pipeline.table_open(2)
        pipeline.tablerow_open()
        cell(pipeline, "a", colspan=2)
        pipeline.tablerow_close()

        assert renderer.lines[-1] == "\\cline{1-2}"

    def test_text_outside_tables(self, renderer):
        renderer.cdata("before & after")
        renderer.p_close()
        renderer.table_open(1)
        renderer.table_close()

        assert renderer.lines[:2] == ["before \\& after", ""]

    def test_empty_renderer(self, renderer):
        assert renderer.getvalue() == ""


class TestStandalone:
    """Test cases for wrapping tables in a document."""

    def test_standalone(self):
        document = standalone("\\begin{tabular}{l}\n\\end{tabular}\n")

        lines = document.splitlines()
        assert lines[0] == "\\documentclass{article}"
        for package in REQUIRED_PACKAGES:
            assert f"\\usepackage{{{package}}}" in lines
        assert lines[-1] == "\\end{document}"
        assert "\\begin{document}" in lines

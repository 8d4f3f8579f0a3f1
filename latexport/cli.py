"""
Command-line interface for latexport.

Usage:
    latexport render events.json --output table.tex
    latexport render events.json --standalone
    latexport trace events.json
    latexport version
"""

import argparse
import sys
from pathlib import Path

from .exceptions import LatexportError
from .utils.rich_logger import LOG_LEVELS, get_rich_logger, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="latexport",
        description="latexport - render document table events as LaTeX",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  latexport render table.json --output table.tex
  latexport render table.json --standalone > doc.tex
  latexport trace table.json
  latexport version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Use plain log output instead of rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render an event stream to LaTeX")
    render_parser.add_argument("input", help="JSON event stream")
    render_parser.add_argument(
        "-o", "--output",
        help="Output .tex file (default: standard output)"
    )
    render_parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap the tables in a compilable document"
    )
    _add_table_options(render_parser)

    trace_parser = subparsers.add_parser("trace", help="Print the corrected event stream as JSON")
    trace_parser.add_argument("input", help="JSON event stream")
    _add_table_options(trace_parser)

    subparsers.add_parser("version", help="Show version information")

    return parser


def _add_table_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--lenient-width",
        action="store_true",
        help="Accept rows shorter than the table anywhere, not just last"
    )
    parser.add_argument(
        "--no-vertical-rules",
        action="store_true",
        help="Do not draw vertical rules between columns"
    )
    parser.add_argument(
        "--plain-headers",
        action="store_true",
        help="Do not set header cells in bold"
    )


def _table_options(args) -> dict:
    return {
        "strict_width": not args.lenient_width,
        "vertical_rules": not args.no_vertical_rules,
        "bold_headers": not args.plain_headers,
    }


def cmd_render(args, log):
    """Handle render command."""
    from .api import render_tables
    from .events import load_events

    input_path = Path(args.input)
    if not input_path.exists():
        log.failure(f"File not found: {input_path}")
        return 1

    events = load_events(input_path)
    tex = render_tables(events, _table_options(args), standalone=args.standalone)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(tex, encoding="utf-8")
        log.success(f"Saved: {output_path}")
    else:
        sys.stdout.write(tex)
    return 0


def cmd_trace(args, log):
    """Handle trace command."""
    from .api import trace_tables
    from .events import dump_events, load_events

    input_path = Path(args.input)
    if not input_path.exists():
        log.failure(f"File not found: {input_path}")
        return 1

    events = trace_tables(load_events(input_path), _table_options(args))
    sys.stdout.write(dump_events(events) + "\n")
    return 0


def cmd_version(args=None, log=None):
    """Handle version command."""
    from .version import __version__
    print(f"latexport v{__version__}")
    return 0


def main(argv=None):
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, use_rich=not args.no_rich)
    log = get_rich_logger("latexport.cli", args.log_level)

    commands = {
        "render": cmd_render,
        "trace": cmd_trace,
        "version": cmd_version,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        return command(args, log)
    except LatexportError as e:
        log.failure(str(e))
        return 1
    except OSError as e:
        log.failure(f"I/O error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)

"""
Utility helpers for latexport.
"""

from .rich_logger import RichLogger, get_rich_logger, setup_logging
from .tex import escape_tex, format_command

__all__ = [
    "RichLogger",
    "get_rich_logger",
    "setup_logging",
    "escape_tex",
    "format_command",
]

"""
Helpers for writing LaTeX source.
"""

from typing import Optional

LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "&": r"\&",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

ALIGNMENT_LETTERS = {
    "left": "l",
    "center": "c",
    "right": "r",
}


def escape_tex(text: str) -> str:
    """
    Escape characters that have a special meaning in LaTeX.

    Args:
        text: Plain text

    Returns:
        Text safe to place in a LaTeX document body
    """
    return "".join(LATEX_SPECIALS.get(ch, ch) for ch in text or "")


def format_command(command: str, scope: str, argument: Optional[str] = None) -> str:
    """
    Format a LaTeX command.

    ``begin`` and ``end`` take their optional argument after the braces; every
    other command takes it before them.
    """
    if not argument:
        return f"\\{command}{{{scope}}}"
    if command in ("begin", "end"):
        return f"\\{command}{{{scope}}}[{argument}]"
    return f"\\{command}[{argument}]{{{scope}}}"


def column_letter(align: Optional[str], default: str = "left") -> str:
    return ALIGNMENT_LETTERS[align or default]

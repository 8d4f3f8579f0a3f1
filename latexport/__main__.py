"""
Entry point for running latexport as a module.

Usage:
    python -m latexport render events.json --output table.tex
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

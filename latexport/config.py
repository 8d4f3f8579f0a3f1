"""
Configuration for table rendering.

Options can be given as a plain dictionary (as the CLI and callers that
store settings in JSON do) or built directly as a ``TableOptions`` value.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Optional

VALID_ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class TableOptions:
    """Options shared by the grid tracker and the TeX table renderer."""

    strict_width: bool = True
    vertical_rules: bool = True
    bold_headers: bool = True
    full_width_hline: bool = True
    default_align: str = "left"

    def __post_init__(self) -> None:
        if self.default_align not in VALID_ALIGNMENTS:
            raise ValueError(
                f"default_align must be one of {', '.join(VALID_ALIGNMENTS)}, "
                f"got {self.default_align!r}"
            )

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]] = None) -> "TableOptions":
        """
        Build options from a dictionary.

        Args:
            options: Mapping of option names to values; ``None`` gives defaults

        Returns:
            TableOptions instance

        Raises:
            ValueError: If the mapping contains unknown option names
        """
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown table options: {', '.join(unknown)}")
        return cls(**options)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

"""
Draw instruction data model - the only output the simulation produces.
"""

from dataclasses import dataclass
from typing import Optional

from .colors import Rgb

BLANK = " "


@dataclass(frozen=True)
class DrawInstruction:
    """Put one glyph (or a blank) at an absolute terminal cell.

    Columns are 1-based, rows run from 0 to the viewport height.
    """
    column: int
    row: int
    color: Optional[Rgb]
    glyph: str = BLANK

    @classmethod
    def blank(cls, column: int, row: int) -> "DrawInstruction":
        """Erase a single cell."""
        return cls(column=column, row=row, color=None, glyph=BLANK)

    @property
    def is_blank(self) -> bool:
        return self.color is None

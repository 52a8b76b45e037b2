"""
Rain Trail - a single falling column of glyphs.

A trail knows where it is and what it looks like. It does not decide when it
is finished; the owning Glass classifies that from the trail's position.
"""

import random
import string
from collections import deque
from typing import List, Optional

from .colors import trail_color
from .constants import TrailLimits
from .models import DrawInstruction

GLYPHS = string.ascii_letters + string.digits


class RainTrail:
    """Falling stream of glyphs with a bright head and a fading tail.

    Index 0 of ``glyphs`` is the leading (bottom-most) glyph. Rows are signed:
    a fresh trail has its head on row 0 and the rest of its body above the
    screen.
    """

    def __init__(self, length: int, column: int, rng: Optional[random.Random] = None,
                 speed: Optional[int] = None):
        if length < 1:
            raise ValueError(f"trail length must be at least 1, got {length}")
        if column < 1:
            raise ValueError(f"trail column is 1-based, got {column}")

        self._rng = rng if rng is not None else random.Random()
        self.column = column
        self.glyphs = deque(self._next_glyph() for _ in range(length))
        self.leading_row = 0
        self.trailing_row = -(length - 1)
        if speed is None:
            speed = self._rng.randint(TrailLimits.MIN_SPEED, TrailLimits.MAX_SPEED)
        self.speed = speed

    def __len__(self) -> int:
        return len(self.glyphs)

    def __repr__(self) -> str:
        return (f"RainTrail(column={self.column}, rows={self.trailing_row}..{self.leading_row}, "
                f"speed={self.speed})")

    def _next_glyph(self) -> str:
        return self._rng.choice(GLYPHS)

    def advance(self):
        """Move down by ``speed`` rows and draw a new head glyph."""
        self.leading_row += self.speed
        self.trailing_row += self.speed
        self.glyphs.rotate(1)
        self.glyphs[0] = self._next_glyph()

    def render(self, height: int) -> List[DrawInstruction]:
        """Draw instructions for every glyph currently inside ``[0, height]``."""
        instructions = []
        for index, glyph in enumerate(self.glyphs):
            row = self.leading_row - index
            if row > height:
                continue
            if row < 0:
                # Everything further up the tail is above the screen too
                break
            instructions.append(DrawInstruction(self.column, row, trail_color(index), glyph))
        return instructions

    def erase(self, height: int) -> List[DrawInstruction]:
        """Blank the ``speed`` rows the tail just moved off.

        Only meaningful after ``advance``; nothing is erased until the tail
        itself has entered the screen.
        """
        if self.trailing_row <= 0:
            return []
        return [
            DrawInstruction.blank(self.column, row)
            for row in range(self.trailing_row - 1, self.trailing_row - self.speed - 1, -1)
            if 0 <= row <= height
        ]

    def has_exited(self, height: int) -> bool:
        """True once the whole trail, tail included, is below the viewport."""
        return self.trailing_row > height

"""
Terminal Writer - flushes draw instructions to a curses window.

Instructions use terminal coordinates (1-based columns, rows 0..height).
Cursor addressing treats row 0 the same as row 1, so both land on the top line.
"""

import logging
from typing import Iterable, Optional, Tuple

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .colors import Colors
from .models import DrawInstruction

logger = logging.getLogger(__name__)


def to_screen_cell(column: int, row: int) -> Tuple[int, int]:
    """Convert terminal coordinates to a curses ``(y, x)`` pair."""
    return max(row, 1) - 1, column - 1


class TerminalWriter:
    """Draws instruction streams onto a curses screen."""

    def __init__(self, screen, colors: Optional[Colors] = None):
        self.screen = screen
        self.colors = colors if colors is not None else Colors()
        self.cells_written = 0

    def setup(self):
        """Prepare the screen: hidden cursor, colors, cleared canvas."""
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        self.colors.init_colors()
        self.screen.clear()
        self.screen.refresh()

    def write(self, instructions: Iterable[DrawInstruction]) -> int:
        """Draw every instruction in order, then refresh once.

        Returns the number of cells actually written.
        """
        written = 0
        for instruction in instructions:
            y, x = to_screen_cell(instruction.column, instruction.row)
            attr = Colors.NORMAL if instruction.is_blank else self.colors.attr_for(instruction.color)
            try:
                self.screen.addstr(y, x, instruction.glyph, attr)
                written += 1
            except curses.error:
                # Bottom-right cell and anything outside the window
                pass
        self.screen.refresh()
        self.cells_written += written
        return written

    def teardown(self):
        """Clear the canvas, give back the terminal palette and show the cursor."""
        self.screen.clear()
        self.screen.refresh()
        self.colors.restore_colors()
        try:
            curses.curs_set(1)  # Show cursor
        except curses.error:
            pass

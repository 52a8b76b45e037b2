"""
Trail Color Definitions - gradient policy and curses color pair management.

The simulation speaks in 24-bit ``Rgb`` values; ``Colors`` maps them onto
whatever the terminal can actually display.
"""

from typing import Dict, NamedTuple, Tuple

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .constants import Palette


class Rgb(NamedTuple):
    """24-bit color, channels 0-255."""
    red: int
    green: int
    blue: int


WHITE = Rgb(255, 255, 255)
DIM_GREEN = Rgb(0, Palette.GRADIENT_GREEN, 0)


def trail_color(index: int) -> Rgb:
    """Color for the glyph at ``index`` in a trail (0 = leading glyph).

    Fixed 3-tier banding: bright white head, a fading magenta-to-green gradient
    for the next few glyphs, then a flat dim green for the rest of the tail.
    """
    if index <= 0:
        return WHITE
    if index <= Palette.GRADIENT_END:
        fade = Palette.CHANNEL_MAX // (index + 1)
        return Rgb(fade, Palette.GRADIENT_GREEN, fade)
    return DIM_GREEN


def trail_palette() -> Tuple[Rgb, ...]:
    """Every color ``trail_color`` can return, head first."""
    return tuple(trail_color(i) for i in range(Palette.GRADIENT_END + 2))


class Colors:
    """Color pairs for curses, one pair per trail palette color."""
    NORMAL = 0
    FIRST_PAIR = 1
    FIRST_CUSTOM_COLOR = 16     # Leave the 16 standard colors untouched

    def __init__(self):
        self._pairs: Dict[Rgb, int] = {}
        self._attrs: Dict[Rgb, int] = {}
        self._custom = False
        # Terminal palette slots we redefined, with their previous content
        self._saved_colors: Dict[int, Tuple[int, int, int]] = {}

    @property
    def custom_colors(self) -> bool:
        """True when exact RGB colors are in use."""
        return self._custom

    def init_colors(self):
        """Initialize curses colors and pre-allocate the trail palette."""
        if not CURSES_AVAILABLE or curses is None:
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        self._custom = curses.can_change_color() and curses.COLORS >= 256
        for rgb in trail_palette():
            self._allocate(rgb, background)

    def restore_colors(self):
        """Put back every palette slot ``init_colors`` redefined."""
        for color, content in self._saved_colors.items():
            try:
                curses.init_color(color, *content)
            except curses.error:
                pass
        self._saved_colors.clear()

    def attr_for(self, rgb: Rgb) -> int:
        """Return the curses attribute to draw ``rgb`` with."""
        return self._attrs.get(rgb, self.NORMAL)

    def _allocate(self, rgb: Rgb, background: int):
        pair = self.FIRST_PAIR + len(self._pairs)
        if self._custom:
            color = self.FIRST_CUSTOM_COLOR + len(self._pairs)
            self._saved_colors[color] = curses.color_content(color)
            # curses wants channels scaled 0-1000
            curses.init_color(color, *(c * 1000 // 255 for c in rgb))
            curses.init_pair(pair, color, background)
            extra = 0
        else:
            color, extra = self._nearest_basic(rgb)
            curses.init_pair(pair, color, background)
        self._pairs[rgb] = pair
        self._attrs[rgb] = curses.color_pair(pair) | extra

    @staticmethod
    def _nearest_basic(rgb: Rgb) -> Tuple[int, int]:
        """Fallback for terminals without redefinable colors."""
        if rgb == WHITE:
            return curses.COLOR_WHITE, curses.A_BOLD
        if rgb == DIM_GREEN:
            return curses.COLOR_GREEN, curses.A_DIM
        return curses.COLOR_GREEN, curses.A_NORMAL

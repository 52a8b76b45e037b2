"""
Glass - the render surface that owns every trail in one viewport.

Holds all spawn and prune policy. Each tick runs in two phases: every trail
draws and moves, then trails that have left the screen are dropped.
"""

import logging
import random
from typing import Dict, List, Optional

from .constants import SpawnPolicy, TrailLimits
from .models import DrawInstruction
from .trail import RainTrail

logger = logging.getLogger(__name__)


class Glass:
    """Viewport of fixed size holding an unordered collection of rain trails."""

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.width = max(0, width)
        self.height = max(0, height)
        self.trails: List[RainTrail] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def trail_count(self) -> int:
        return len(self.trails)

    @property
    def is_degenerate(self) -> bool:
        """A viewport with no columns or no rows can never show anything."""
        return self.width <= 0 or self.height <= 0

    def is_alive(self, trail: RainTrail) -> bool:
        """Classify a trail: alive until it has fully scrolled past the bottom."""
        return not trail.has_exited(self.height)

    def _top_most_rows(self) -> Dict[int, int]:
        """Map each occupied column to the smallest trailing row found in it."""
        top_rows: Dict[int, int] = {}
        for trail in self.trails:
            current = top_rows.get(trail.column)
            if current is None or trail.trailing_row < current:
                top_rows[trail.column] = trail.trailing_row
        return top_rows

    def available_columns(self) -> List[int]:
        """Columns with enough clearance for a new trail, in ascending order.

        An empty list means nothing may spawn this tick.
        """
        if self.is_degenerate:
            return []
        if not self.trails:
            return list(range(1, self.width + 1))

        top_rows = self._top_most_rows()
        return [
            column for column in range(1, self.width + 1)
            if top_rows.get(column, SpawnPolicy.CLEARANCE_ROWS + 1) > SpawnPolicy.CLEARANCE_ROWS
        ]

    def _random_length(self) -> int:
        upper = int(self.height * TrailLimits.MAX_LENGTH_RATIO)
        if upper <= TrailLimits.MIN_LENGTH:
            # Viewport too short for the usual range
            return max(TrailLimits.FLOOR_LENGTH, upper)
        return self._rng.randrange(TrailLimits.MIN_LENGTH, upper)

    def create_rain_trail(self, column: int) -> RainTrail:
        """Start a new trail of random length at the top of ``column``."""
        if not 1 <= column <= self.width:
            raise ValueError(f"column {column} outside viewport width {self.width}")
        # Each trail draws glyphs from its own stream
        trail = RainTrail(
            self._random_length(),
            column,
            rng=random.Random(self._rng.getrandbits(64)),
        )
        self.trails.append(trail)
        logger.debug(f"Spawned {trail!r} (length {len(trail)})")
        return trail

    def tick(self) -> List[DrawInstruction]:
        """Advance the simulation one step and return what to draw."""
        if self.is_degenerate:
            self.trails = []
            return []

        instructions: List[DrawInstruction] = []
        for trail in self.trails:
            if self.is_alive(trail):
                # Render reads the position before it moves
                instructions.extend(trail.render(self.height))
                trail.advance()
            instructions.extend(trail.erase(self.height))

        before = len(self.trails)
        self.trails = [trail for trail in self.trails if self.is_alive(trail)]
        if len(self.trails) != before:
            logger.debug(f"Pruned {before - len(self.trails)} trail(s), {len(self.trails)} remaining")

        return instructions

"""
Tests for the Glass render surface.

Tests spawn eligibility, trail creation bounds, ticking and pruning.
"""

import os
import random
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from digital_rain.colors import WHITE
from digital_rain.glass import Glass
from digital_rain.models import DrawInstruction
from digital_rain.runner import spawn_trails
from digital_rain.trail import RainTrail


def place_trail(glass, column, trailing_row, length=3, speed=1):
    """Put a trail with a known position into the glass."""
    trail = RainTrail(length, column, rng=random.Random(0), speed=speed)
    trail.trailing_row = trailing_row
    trail.leading_row = trailing_row + length - 1
    glass.trails.append(trail)
    return trail


# ===========================================================================
# Available Column Tests
# ===========================================================================

class TestAvailableColumns:
    @pytest.mark.parametrize("width", [1, 7, 80])
    def test_empty_glass_offers_every_column(self, width):
        glass = Glass(width, 24)
        assert glass.available_columns() == list(range(1, width + 1))

    def test_zero_width_offers_nothing(self):
        assert Glass(0, 24).available_columns() == []

    def test_trail_with_clearance_is_available(self):
        glass = Glass(3, 20)
        place_trail(glass, 2, trailing_row=6)
        assert glass.available_columns() == [1, 2, 3]

    @pytest.mark.parametrize("trailing_row", [4, 5, -8])
    def test_trail_without_clearance_blocks_column(self, trailing_row):
        glass = Glass(3, 20)
        place_trail(glass, 2, trailing_row=trailing_row)
        assert glass.available_columns() == [1, 3]

    def test_top_most_trail_decides(self):
        glass = Glass(2, 40)
        place_trail(glass, 1, trailing_row=15)
        place_trail(glass, 1, trailing_row=2)
        assert glass.available_columns() == [2]

    def test_column_opens_once_trail_falls_far_enough(self):
        glass = Glass(1, 40, rng=random.Random(3))
        trail = place_trail(glass, 1, trailing_row=0, speed=1)
        openings = []
        for _ in range(8):
            openings.append((trail.trailing_row, glass.available_columns()))
            glass.tick()
        for trailing_row, columns in openings:
            assert columns == ([1] if trailing_row > 5 else [])

    def test_all_columns_blocked_returns_empty(self):
        glass = Glass(2, 20)
        place_trail(glass, 1, trailing_row=0)
        place_trail(glass, 2, trailing_row=1)
        assert glass.available_columns() == []


# ===========================================================================
# Trail Creation Tests
# ===========================================================================

class TestCreateRainTrail:
    def test_appends_trail_in_column(self):
        glass = Glass(10, 30, rng=random.Random(1))
        trail = glass.create_rain_trail(4)
        assert glass.trails == [trail]
        assert trail.column == 4
        assert trail.leading_row == 0

    def test_length_bounds(self):
        glass = Glass(10, 40, rng=random.Random(1))
        lengths = {len(glass.create_rain_trail(1)) for _ in range(500)}
        assert min(lengths) == 5
        assert max(lengths) == 31

    @pytest.mark.parametrize("height,expected", [
        (0, 1),
        (1, 1),
        (6, 4),
        (7, 5),
    ], ids=["zero-height", "one-row", "short", "collapsed-range"])
    def test_short_viewport_clamps_length(self, height, expected):
        glass = Glass(5, height, rng=random.Random(1))
        assert len(glass.create_rain_trail(1)) == expected

    @pytest.mark.parametrize("column", [0, 11, -1])
    def test_rejects_column_outside_viewport(self, column):
        glass = Glass(10, 30)
        with pytest.raises(ValueError):
            glass.create_rain_trail(column)

    def test_trails_get_independent_glyph_streams(self):
        glass = Glass(10, 40, rng=random.Random(9))
        first = glass.create_rain_trail(1)
        second = glass.create_rain_trail(2)
        assert first._rng is not second._rng

    def test_seeded_glass_is_reproducible(self):
        def build():
            glass = Glass(10, 40, rng=random.Random(5))
            return [(len(t), t.speed, list(t.glyphs)) for t in
                    (glass.create_rain_trail(c) for c in range(1, 11))]
        assert build() == build()


# ===========================================================================
# Tick Tests
# ===========================================================================

class TestTick:
    def test_empty_glass_draws_nothing(self):
        assert Glass(10, 5).tick() == []

    def test_render_reads_position_before_advance(self):
        glass = Glass(10, 5)
        trail = place_trail(glass, 1, trailing_row=-2, length=3, speed=1)
        instructions = glass.tick()
        assert instructions == [DrawInstruction(1, 0, WHITE, instructions[0].glyph)]
        assert trail.leading_row == 1
        assert trail.trailing_row == -1

    def test_scenario_second_frame(self):
        glass = Glass(10, 5)
        place_trail(glass, 1, trailing_row=-2, length=3, speed=1)
        glass.tick()
        instructions = glass.tick()
        assert [i.row for i in instructions] == [1, 0]
        assert instructions[0].color == WHITE
        assert instructions[1].color != WHITE

    def test_tail_erased_once_on_screen(self):
        glass = Glass(4, 10)
        place_trail(glass, 2, trailing_row=-1, length=2, speed=1)
        assert all(not i.is_blank for i in glass.tick())
        instructions = glass.tick()
        assert instructions[-1] == DrawInstruction.blank(2, 0)

    def test_exited_trail_removed(self):
        glass = Glass(10, 5)
        place_trail(glass, 1, trailing_row=6)
        glass.tick()
        assert glass.trails == []

    def test_live_trails_kept(self):
        glass = Glass(10, 5)
        gone = place_trail(glass, 1, trailing_row=6)
        kept = place_trail(glass, 2, trailing_row=0)
        glass.tick()
        assert glass.trails == [kept]
        assert gone not in glass.trails

    def test_trail_leaves_after_falling_through(self):
        glass = Glass(10, 5)
        place_trail(glass, 1, trailing_row=-2, length=3, speed=1)
        for _ in range(7):
            glass.tick()
        assert glass.trail_count == 1
        glass.tick()
        assert glass.trail_count == 0

    def test_no_dead_trail_survives_tick(self):
        glass = Glass(20, 10, rng=random.Random(11))
        rng = random.Random(12)
        for _ in range(200):
            spawn_trails(glass, rng, 0.3)
            glass.tick()
            assert all(glass.is_alive(trail) for trail in glass.trails)

    def test_instructions_stay_inside_viewport(self):
        glass = Glass(20, 10, rng=random.Random(7))
        rng = random.Random(8)
        for _ in range(150):
            spawn_trails(glass, rng, 0.3)
            for instruction in glass.tick():
                assert 1 <= instruction.column <= 20
                assert 0 <= instruction.row <= 10

    def test_one_by_one_viewport(self):
        glass = Glass(1, 1, rng=random.Random(2))
        assert glass.available_columns() == [1]
        assert glass.tick() == []
        glass.create_rain_trail(1)
        for _ in range(5):
            glass.tick()
        assert glass.trails == []

    def test_zero_height_viewport_stays_empty(self):
        glass = Glass(5, 0, rng=random.Random(2))
        rng = random.Random(3)
        assert glass.available_columns() == []
        for _ in range(20):
            assert spawn_trails(glass, rng, 1.0) == 0
            assert glass.tick() == []
        assert glass.trails == []

    def test_zero_height_drops_directly_created_trail(self):
        glass = Glass(3, 0, rng=random.Random(2))
        glass.create_rain_trail(2)
        assert glass.tick() == []
        assert glass.trails == []

    def test_zero_width_viewport_stays_empty(self):
        glass = Glass(0, 10)
        for _ in range(5):
            assert glass.available_columns() == []
            assert glass.tick() == []


class TestIsAlive:
    def test_classification_follows_height(self):
        glass = Glass(5, 5)
        assert glass.is_alive(place_trail(glass, 1, trailing_row=5)) is True
        assert glass.is_alive(place_trail(glass, 2, trailing_row=6)) is False


class TestTrailCount:
    def test_counts_trails(self):
        glass = Glass(5, 5)
        assert glass.trail_count == 0
        place_trail(glass, 1, trailing_row=0)
        place_trail(glass, 1, trailing_row=3)
        assert glass.trail_count == 2

    def test_empty_glass_is_truthy(self):
        assert Glass(5, 5)
        assert Glass(0, 0)

    def test_degenerate_viewports(self):
        assert Glass(0, 10).is_degenerate
        assert Glass(10, 0).is_degenerate
        assert not Glass(1, 1).is_degenerate

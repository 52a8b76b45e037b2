"""
Centralized constants for the digital rain engine.

Grouped by concern so call sites read as ``SpawnPolicy.CLEARANCE_ROWS`` rather
than bare numbers scattered through the simulation.
"""


class Timing:
    """Driver loop timing."""
    FRAME_INTERVAL = 0.05       # Seconds between ticks (~20 fps)
    KEY_POLL_TIMEOUT_MS = 0


class SpawnPolicy:
    """When and where new trails may appear."""
    SPAWN_CHANCE = 0.02         # Per eligible column, per tick
    CLEARANCE_ROWS = 5          # Top-most trail must have fallen past this row


class TrailLimits:
    """Bounds for randomized trail properties."""
    MIN_SPEED = 1
    MAX_SPEED = 3
    MIN_LENGTH = 5
    MAX_LENGTH_RATIO = 0.8      # Of viewport height, exclusive upper bound
    FLOOR_LENGTH = 1            # Used when the length range collapses


class Palette:
    """Trail gradient banding."""
    GRADIENT_END = 5            # Indices 1..GRADIENT_END use the fading gradient
    GRADIENT_GREEN = 150        # Constant green channel for gradient and tail
    CHANNEL_MAX = 255


class Keys:
    """Control keys recognized by the driver."""
    CTRL_C = 3                  # ETX, delivered as a key in raw mode

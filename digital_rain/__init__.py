"""
Digital Rain - falling glyph trails for the terminal

Vertical streams of glyphs fall down the screen with a bright head and a
fading tail, spawning at random in columns with enough clearance.

Basic Usage:
    from digital_rain import run_rain
    run_rain()

Driving the simulation yourself:
    from digital_rain import Glass

    glass = Glass(width=80, height=24)
    for column in glass.available_columns():
        glass.create_rain_trail(column)
    instructions = glass.tick()
"""

import logging

__version__ = "1.0.0"

# Core classes
from .glass import Glass
from .trail import RainTrail
from .runner import RainConfig, RainRunner, run_rain, main

# Data models
from .models import DrawInstruction
from .colors import Colors, Rgb, trail_color

# Errors
from .utils.error_handling import (
    RainError,
    TerminalUnavailableError,
    CursesUnavailableError,
)

# Keep log records off the animated screen unless a handler is configured
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "Glass",
    "RainTrail",
    "RainConfig",
    "RainRunner",
    "run_rain",
    "main",
    # Models
    "DrawInstruction",
    "Colors",
    "Rgb",
    "trail_color",
    # Errors
    "RainError",
    "TerminalUnavailableError",
    "CursesUnavailableError",
]

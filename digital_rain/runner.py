"""
Digital Rain Runner - fixed-rate driver loop and command line entry point.

Usage:
    digital-rain
    digital-rain --seed 42
    digital-rain --log-file rain.log --debug

Keyboard:
    Ctrl-C  Quit
"""

import logging
import os
import random
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .constants import Keys, SpawnPolicy, Timing
from .glass import Glass
from .models import DrawInstruction
from .screen import TerminalWriter
from .utils.error_handling import (
    CursesUnavailableError,
    RainError,
    TerminalUnavailableError,
    handle_error,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class RainConfig:
    """Runtime settings. Only diagnostics and the seed come from the command line."""
    frame_interval: float = Timing.FRAME_INTERVAL
    spawn_chance: float = SpawnPolicy.SPAWN_CHANCE
    seed: Optional[int] = None
    log_file: Optional[str] = None
    debug: bool = False


def configure_logging(config: RainConfig):
    """Send logs to a file if one was requested.

    Nothing is ever logged to the terminal: it belongs to the animation.
    """
    if not config.log_file:
        return
    logging.basicConfig(
        filename=config.log_file,
        level=logging.DEBUG if config.debug else logging.INFO,
        format=LOG_FORMAT,
    )


def query_terminal_size() -> Tuple[int, int]:
    """Return ``(columns, rows)`` of the controlling terminal."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError) as e:
        raise TerminalUnavailableError(f"Could not get terminal size: {e}") from e
    return size.columns, size.lines


def spawn_trails(glass: Glass, rng: random.Random, chance: float) -> int:
    """Roll once per available column and start a trail on success."""
    spawned = 0
    for column in glass.available_columns():
        if rng.random() < chance:
            glass.create_rain_trail(column)
            spawned += 1
    return spawned


class RainRunner:
    """Owns one Glass and drives it at a fixed frame rate."""

    def __init__(self, width: int, height: int, config: Optional[RainConfig] = None):
        self.config = config if config is not None else RainConfig()
        rng = random.Random(self.config.seed)
        # Spawn rolls and trail glyphs come from separate streams
        self._spawn_rng = random.Random(rng.getrandbits(64))
        self.glass = Glass(width, height, rng=random.Random(rng.getrandbits(64)))
        self.frames = 0
        self.running = False
        self.writer: Optional[TerminalWriter] = None

    def step(self) -> List[DrawInstruction]:
        """Spawn, tick, and return the frame's draw instructions."""
        spawn_trails(self.glass, self._spawn_rng, self.config.spawn_chance)
        self.frames += 1
        return self.glass.tick()

    @staticmethod
    def is_exit_key(key: int) -> bool:
        return key == Keys.CTRL_C

    def run(self):
        """Run the animation until Ctrl-C."""
        if not CURSES_AVAILABLE:
            raise CursesUnavailableError(
                "curses library not available (on Windows: pip install windows-curses)"
            )
        curses.wrapper(self._main_loop)

    def _main_loop(self, screen):
        """Main curses loop."""
        self.writer = TerminalWriter(screen)
        self.writer.setup()
        curses.raw()  # Ctrl-C arrives as a key instead of a signal
        screen.timeout(Timing.KEY_POLL_TIMEOUT_MS)  # Non-blocking getch

        logger.info(f"Starting rain on {self.glass.width}x{self.glass.height} viewport")
        self.running = True
        try:
            while self.running:
                if self.is_exit_key(screen.getch()):
                    self.running = False
                    break
                self.writer.write(self.step())
                time.sleep(self.config.frame_interval)
        except KeyboardInterrupt:
            self.running = False
        finally:
            self.writer.teardown()
            logger.info(f"Stopped after {self.frames} frames, "
                        f"{self.writer.cells_written} cells written")


def run_rain(config: Optional[RainConfig] = None):
    """
    Run the digital rain.

    Args:
        config: Runtime settings; defaults are used when omitted
    """
    config = config if config is not None else RainConfig()
    configure_logging(config)
    width, height = query_terminal_size()
    logger.debug(f"Terminal size {width}x{height}, seed={config.seed}")
    RainRunner(width, height, config).run()


def main():
    """CLI entry point for the digital-rain command."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Digital Rain - falling glyph trails in your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    digital-rain                          # Run until Ctrl-C
    digital-rain --seed 42                # Same rain every time
    digital-rain --log-file rain.log      # Write diagnostics to a file
        """
    )
    parser.add_argument("--seed", type=int,
                        help="Seed for a reproducible animation")
    parser.add_argument("--log-file", type=str,
                        help="Write log messages to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Log at DEBUG level (needs --log-file)")

    args = parser.parse_args()
    config = RainConfig(seed=args.seed, log_file=args.log_file, debug=args.debug)
    try:
        run_rain(config)
    except RainError as e:
        handle_error(e, "run_rain", additional_context={'seed': config.seed})
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

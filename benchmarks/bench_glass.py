"""
Glass Performance Benchmarks

Measures:
- Full frame latency (spawn roll + tick) on common terminal sizes
- Available column lookup with a crowded surface
- Trail creation overhead
"""

import random
import time
from typing import Any, Callable, Dict

from digital_rain.glass import Glass
from digital_rain.runner import spawn_trails

from benchmarks.bench_stats import compute_stats

WARMUP_FRAMES = 200     # Enough for trails to cover the whole screen


def warmed_glass(width: int, height: int, seed: int = 0) -> Glass:
    """Build a glass already in its steady state."""
    glass = Glass(width, height, rng=random.Random(seed))
    rng = random.Random(seed + 1)
    for _ in range(WARMUP_FRAMES):
        spawn_trails(glass, rng, 0.02)
        glass.tick()
    return glass


class GlassBenchmarks:
    """Benchmarks for the Glass render surface."""

    def __init__(self, iterations: int = 10000):
        self.iterations = iterations
        self.results: Dict[str, Dict[str, Any]] = {}

    def _time(self, name: str, operation: Callable[[], Any]) -> Dict[str, Any]:
        times = []
        for _ in range(self.iterations):
            start = time.perf_counter_ns()
            operation()
            end = time.perf_counter_ns()
            times.append(end - start)
        stats = compute_stats(name, times)
        self.results[name] = stats
        return stats

    def _bench_frame(self, name: str, width: int, height: int) -> Dict[str, Any]:
        glass = warmed_glass(width, height)
        rng = random.Random(2)

        def frame():
            spawn_trails(glass, rng, 0.02)
            glass.tick()

        return self._time(name, frame)

    def bench_frame_80x24(self) -> Dict[str, Any]:
        """Benchmark one frame on a classic 80x24 terminal."""
        return self._bench_frame("frame_80x24", 80, 24)

    def bench_frame_240x70(self) -> Dict[str, Any]:
        """Benchmark one frame on a large terminal."""
        return self._bench_frame("frame_240x70", 240, 70)

    def bench_available_columns(self) -> Dict[str, Any]:
        """Benchmark column eligibility on a crowded surface."""
        glass = warmed_glass(240, 70)
        return self._time("available_columns", glass.available_columns)

    def bench_create_trail(self) -> Dict[str, Any]:
        """Benchmark trail creation (glyph generation included)."""
        glass = Glass(80, 60, rng=random.Random(3))

        def create():
            glass.create_rain_trail(1)
            glass.trails.clear()

        return self._time("create_trail", create)

    def run_all(self) -> Dict[str, Dict[str, Any]]:
        """Run all benchmarks and return results."""
        print(f"\nRunning Glass Benchmarks ({self.iterations} iterations each)...")
        print("-" * 60)

        benchmarks = [
            ("Frame (80x24)", self.bench_frame_80x24),
            ("Frame (240x70)", self.bench_frame_240x70),
            ("Available columns", self.bench_available_columns),
            ("Create trail", self.bench_create_trail),
        ]

        for desc, bench_func in benchmarks:
            print(f"  {desc}...", end=" ", flush=True)
            result = bench_func()
            print(f"{result['mean_us']:.2f} µs (p99: {result['p99_us']:.2f} µs)")

        return self.results


if __name__ == "__main__":
    bench = GlassBenchmarks(iterations=10000)
    bench.run_all()

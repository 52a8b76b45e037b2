"""
Rain Trail Performance Benchmarks

Measures render, advance and erase cost for short and long trails.
"""

import random
import time
from typing import Any, Dict

from digital_rain.trail import RainTrail

from benchmarks.bench_stats import compute_stats


class TrailBenchmarks:
    """Benchmarks for a single RainTrail."""

    def __init__(self, iterations: int = 10000):
        self.iterations = iterations
        self.results: Dict[str, Dict[str, Any]] = {}

    def _bench_cycle(self, name: str, length: int, height: int) -> Dict[str, Any]:
        rng = random.Random(4)
        trail = RainTrail(length, 1, rng=rng, speed=1)

        times = []
        for _ in range(self.iterations):
            if trail.has_exited(height):
                trail = RainTrail(length, 1, rng=rng, speed=1)
            start = time.perf_counter_ns()
            trail.render(height)
            trail.advance()
            trail.erase(height)
            end = time.perf_counter_ns()
            times.append(end - start)

        stats = compute_stats(name, times)
        self.results[name] = stats
        return stats

    def bench_short_trail(self) -> Dict[str, Any]:
        """Benchmark a render/advance/erase cycle for a short trail."""
        return self._bench_cycle("trail_cycle_short", 5, 24)

    def bench_long_trail(self) -> Dict[str, Any]:
        """Benchmark a render/advance/erase cycle for a full-height trail."""
        return self._bench_cycle("trail_cycle_long", 56, 70)

    def run_all(self) -> Dict[str, Dict[str, Any]]:
        """Run all benchmarks and return results."""
        print(f"\nRunning Trail Benchmarks ({self.iterations} iterations each)...")
        print("-" * 60)

        benchmarks = [
            ("Short trail cycle", self.bench_short_trail),
            ("Long trail cycle", self.bench_long_trail),
        ]

        for desc, bench_func in benchmarks:
            print(f"  {desc}...", end=" ", flush=True)
            result = bench_func()
            print(f"{result['mean_us']:.2f} µs (p99: {result['p99_us']:.2f} µs)")

        return self.results


if __name__ == "__main__":
    bench = TrailBenchmarks(iterations=10000)
    bench.run_all()

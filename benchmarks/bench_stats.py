"""Shared timing statistics for the benchmark suites."""

import statistics
from typing import Any, Dict, List


def compute_stats(name: str, times_ns: List[int]) -> Dict[str, Any]:
    """Compute statistics from timing measurements."""
    times_us = [t / 1000 for t in times_ns]  # Convert to microseconds

    return {
        "name": name,
        "iterations": len(times_us),
        "mean_us": statistics.mean(times_us),
        "median_us": statistics.median(times_us),
        "stdev_us": statistics.stdev(times_us) if len(times_us) > 1 else 0,
        "min_us": min(times_us),
        "max_us": max(times_us),
        "p95_us": sorted(times_us)[int(len(times_us) * 0.95)],
        "p99_us": sorted(times_us)[int(len(times_us) * 0.99)],
        "ops_per_sec": 1_000_000 / statistics.mean(times_us) if times_us else 0,
    }

#!/usr/bin/env python3
"""
Run the glass and trail benchmarks and check frames against the tick budget.

Usage:
    python -m benchmarks.run_benchmarks [--quick] [--json]
"""

import argparse
import contextlib
import json
import sys
from typing import Any, Dict

from digital_rain.constants import Timing

from benchmarks.bench_glass import GlassBenchmarks
from benchmarks.bench_trail import TrailBenchmarks

# A frame may use at most this share of the tick
FRAME_BUDGET_SHARE = 0.1


def run_all_benchmarks(iterations: int) -> Dict[str, Dict[str, Dict[str, Any]]]:
    return {
        # Full frames are the slow ones
        "glass": GlassBenchmarks(iterations=max(1, iterations // 10)).run_all(),
        "trail": TrailBenchmarks(iterations=iterations).run_all(),
    }


def frames_over_budget(results: Dict[str, Dict[str, Dict[str, Any]]]) -> Dict[str, float]:
    """Return the mean latency of every frame benchmark that exceeds its budget."""
    budget_us = Timing.FRAME_INTERVAL * 1_000_000 * FRAME_BUDGET_SHARE
    return {
        name: stats["mean_us"]
        for name, stats in results.get("glass", {}).items()
        if name.startswith("frame_") and stats["mean_us"] > budget_us
    }


def main():
    parser = argparse.ArgumentParser(description="Run digital rain benchmarks")
    parser.add_argument("--quick", action="store_true",
                        help="Run with fewer iterations")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON on stdout")
    args = parser.parse_args()

    iterations = 1000 if args.quick else 10000
    # Keep stdout clean for the JSON document
    progress = sys.stderr if args.json else sys.stdout
    with contextlib.redirect_stdout(progress):
        results = run_all_benchmarks(iterations)

    slow = frames_over_budget(results)
    if args.json:
        print(json.dumps({"iterations": iterations, "results": results,
                          "over_budget": slow}, indent=2))
    else:
        print()
        for name, mean_us in slow.items():
            print(f"  {name}: {mean_us:.1f} µs exceeds the frame budget")
        if not slow:
            print("  All frames within budget")

    if slow:
        sys.exit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Benchmark script for lodash_build closure computation.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_graph_load() -> float:
    """Measure construction and validation of the dependency graph store."""
    from lodash_build.infrastructure import load_lodash_graph

    load_lodash_graph.cache_clear()
    start = time.perf_counter()
    load_lodash_graph()
    return time.perf_counter() - start


def benchmark_default_closure(iterations: int) -> float:
    """Measure closure computation of the full default build."""
    from lodash_build.application.services import ClosureEngine
    from lodash_build.domain.model import BuildRequest
    from lodash_build.infrastructure import load_lodash_graph

    engine = ClosureEngine(load_lodash_graph())
    request = BuildRequest.default(minus=("isArray",))

    start = time.perf_counter()
    for _ in range(iterations):
        engine.compute(request)
    return time.perf_counter() - start


def benchmark_listings(iterations: int) -> float:
    """Measure computation of every derived listing."""
    from lodash_build.application.services import ListingBuilder
    from lodash_build.infrastructure import load_lodash_graph

    builder = ListingBuilder(load_lodash_graph())

    start = time.perf_counter()
    for _ in range(iterations):
        builder.all_listings()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run lodash_build benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Iterations per closure and listing benchmark",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Graph Load",
            "unit": "seconds",
            "value": benchmark_graph_load(),
        },
        {
            "name": f"Default Closure ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_default_closure(args.iterations),
        },
        {
            "name": f"All Listings ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_listings(args.iterations),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

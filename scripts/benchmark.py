#!/usr/bin/env python3
"""Benchmark script for timeline_query performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of timeline_query package."""
    start = time.perf_counter()
    import timeline_query  # noqa: F401

    return time.perf_counter() - start


def _make_registry(groups: int, members: int):  # noqa: ANN202
    from timeline_query.domain.model import Provider, ProviderRegistry, QueryMatch

    providers = []
    for i in range(groups):
        and_providers = tuple(
            Provider(
                id=f"id-and-{j}",
                name=f"and {j}",
                query_match=QueryMatch(field="host.name", value=f"host-{j}"),
            )
            for j in range(members)
        )
        providers.append(
            Provider(
                id=f"id-{i}",
                name=f"provider {i}",
                query_match=QueryMatch(field="user.name", value=f"user-{i}"),
                and_providers=and_providers,
            )
        )
    return ProviderRegistry.from_providers(providers)


def benchmark_reducer() -> float:
    """Measure 10k toggle intents against a 50x5 registry."""
    from timeline_query.application.reducer import reduce
    from timeline_query.domain.model import ToggleEnabled

    registry = _make_registry(50, 5)
    intents = [ToggleEnabled(f"id-{i % 50}", f"id-and-{i % 5}") for i in range(10000)]

    start = time.perf_counter()
    for intent in intents:
        registry = reduce(registry, intent).registry
    return time.perf_counter() - start


def benchmark_compiler() -> float:
    """Measure 1k compilations of a 50x5 registry."""
    from timeline_query.application.compiler import compile_providers

    registry = _make_registry(50, 5)

    start = time.perf_counter()
    for _ in range(1000):
        compile_providers(registry)
    return time.perf_counter() - start


def benchmark_window() -> float:
    """Measure 100 sort+page passes over 10k rows."""
    from timeline_query.application.window_manager import apply_window
    from timeline_query.domain.model import ResultSet, Sort, WindowState

    rows = tuple({"@timestamp": (i * 7919) % 10000, "host": {"name": f"h{i % 13}"}} for i in range(10000))
    result_set = ResultSet(rows=rows)
    state = WindowState(sort=Sort("@timestamp"), items_per_page=25, items_per_page_options=(10, 25, 50))

    start = time.perf_counter()
    for page in range(100):
        apply_window(result_set, WindowState(state.sort, 25, state.items_per_page_options, page))
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run timeline_query benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    benchmarks = [
        ("Import Time", benchmark_import_time),
        ("Reducer (10k toggles)", benchmark_reducer),
        ("Compiler (1k compiles)", benchmark_compiler),
        ("Window (100 pages over 10k rows)", benchmark_window),
    ]

    results = [{"name": name, "unit": "seconds", "value": fn()} for name, fn in benchmarks]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

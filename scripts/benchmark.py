#!/usr/bin/env python3
"""Benchmark script for checktree performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

FACT_COUNT = 10000


def benchmark_import_time() -> float:
    """Measure import time of checktree package."""
    start = time.perf_counter()
    import checktree  # noqa: F401

    return time.perf_counter() - start


def benchmark_position_parsing() -> float:
    """Measure parsing of parser exception messages."""
    from checktree.domain.model.position import parse_position

    messages = (
        "Encountered unexpected token at line 42, column 7. Was expecting one of: ...",
        "Lexical error at line 3. Encountered EOF",
        "no markers here",
    )
    start = time.perf_counter()
    for _ in range(FACT_COUNT):
        for message in messages:
            parse_position(message)
    return time.perf_counter() - start


def _make_run():  # type: ignore[no-untyped-def]
    from checktree.domain.model.analysis_run import AnalysisRun
    from checktree.domain.model.facts import SuppressedViolationFact, ViolationFact

    violations = tuple(
        ViolationFact(
            rule_name=f"Rule{i % 50}",
            rule_set_name=f"ruleset{i % 8}",
            file=f"src/File{i % 400}.java",
            line=i % 900 + 1,
            column=i % 80 + 1,
            message="Avoid unused local variables",
        )
        for i in range(FACT_COUNT)
    )
    suppressed = tuple(
        SuppressedViolationFact(
            rule_name=f"Rule{i % 50}",
            rule_set_name=f"ruleset{i % 8}",
            file=f"src/File{i % 400}.java",
            reason="NOPMD",
            line=i % 900 + 1,
            column=1,
        )
        for i in range(FACT_COUNT // 10)
    )
    return AnalysisRun(violations=violations, suppressed=suppressed)


def benchmark_tree_build() -> float:
    """Measure building a tree (including first count aggregation)."""
    from checktree.application.builder import ResultTreeBuilder

    run = _make_run()
    builder = ResultTreeBuilder()
    start = time.perf_counter()
    builder.build(run)
    return time.perf_counter() - start


def benchmark_recompute() -> float:
    """Measure 100 full recomputations of an already built tree."""
    from checktree.application.builder import ResultTreeBuilder

    root = ResultTreeBuilder().build(_make_run())
    start = time.perf_counter()
    for _ in range(100):
        root.compute_counts()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run checktree benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": f"Position Parsing ({FACT_COUNT // 1000}k x 3 messages)",
            "unit": "seconds",
            "value": benchmark_position_parsing(),
        },
        {
            "name": f"Tree Build ({FACT_COUNT // 1000}k violations)",
            "unit": "seconds",
            "value": benchmark_tree_build(),
        },
        {
            "name": "Count Recompute (100 passes)",
            "unit": "seconds",
            "value": benchmark_recompute(),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Query throughput benchmark for allowhtml policies.

Runs the same mix of element/attribute/URL queries against one frozen policy
from a growing number of threads, the way concurrent sanitizers share a
published policy.
"""

from __future__ import annotations

import argparse
import threading
import time

from allowhtml import DEFAULT_POLICY, FrozenPolicy

ATTRIBUTE_QUERIES = [
    ("p", "class", "lead"),
    ("a", "href", "https://example.com/"),
    ("a", "onclick", "alert(1)"),
    ("td", "colspan", "2"),
    ("th", "rowspan", "all"),
    ("img", "width", "100%"),
    ("span", "lang", "en-GB"),
    ("div", "title", "hello"),
    ("script", "title", "x"),
]

URL_QUERIES = [
    "https://example.com/",
    "/relative/path",
    "javascript:alert(1)",
    "mailto:someone@example.com",
    "http://[::1",
]


def run_queries(policy: FrozenPolicy, rounds: int) -> int:
    count = 0
    for _ in range(rounds):
        for element, attr, value in ATTRIBUTE_QUERIES:
            if policy.is_element_allowed(element):
                policy.is_attr_value_allowed(element, attr, value)
            count += 1
        for url in URL_QUERIES:
            policy.is_url_allowed(url)
            count += 1
    return count


def benchmark_threads(policy: FrozenPolicy, threads: int, rounds: int) -> dict:
    """Run `rounds` of the query mix in each of `threads` threads."""
    counts = [0] * threads

    def worker(index: int) -> None:
        counts[index] = run_queries(policy, rounds)

    workers = [threading.Thread(target=worker, args=(i,)) for i in range(threads)]
    start = time.perf_counter()
    for t in workers:
        t.start()
    for t in workers:
        t.join()
    elapsed = time.perf_counter() - start

    total = sum(counts)
    return {
        "threads": threads,
        "queries": total,
        "seconds": elapsed,
        "per_second": total / elapsed if elapsed else 0.0,
    }


def print_results(results: list[dict]) -> None:
    print(f"{'threads':>8} {'queries':>10} {'seconds':>9} {'queries/s':>12}")
    print("-" * 42)
    for r in results:
        print(f"{r['threads']:>8} {r['queries']:>10} {r['seconds']:>9.3f} {r['per_second']:>12.0f}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark concurrent allowhtml policy queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--rounds", type=int, default=2000, help="Query-mix repetitions per thread (default: 2000)")
    parser.add_argument(
        "--threads",
        type=int,
        nargs="+",
        default=[1, 2, 4, 8],
        help="Thread counts to try (default: 1 2 4 8)",
    )
    args = parser.parse_args()

    results = [benchmark_threads(DEFAULT_POLICY, n, args.rounds) for n in args.threads]
    print_results(results)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Benchmark script for the book library API."""

import argparse
import statistics
import time

import httpx


def _latency_stats(latencies: list[float]) -> dict:
    return {
        "min": min(latencies),
        "max": max(latencies),
        "mean": statistics.mean(latencies),
        "median": statistics.median(latencies),
        "stdev": statistics.stdev(latencies) if len(latencies) > 1 else 0,
        "p95": sorted(latencies)[int(len(latencies) * 0.95)],
    }


def benchmark_books(base_url: str, num_rounds: int) -> dict:
    """
    Run create/get/update/delete rounds and return per-operation statistics.

    Each round creates a book, reads it back, updates it and deletes it, so
    the store ends where it started apart from the id counter.
    """
    latencies: dict[str, list[float]] = {op: [] for op in ("create", "get", "update", "delete")}
    errors = 0

    print(f"Benchmarking {num_rounds} CRUD rounds against {base_url}...")
    print()

    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        for i in range(num_rounds):
            try:
                start = time.perf_counter()
                response = client.post(
                    "/books",
                    json={"title": f"Benchmark Book {i + 1}", "author": "Benchmark"},
                )
                latencies["create"].append((time.perf_counter() - start) * 1000)
                if response.status_code != 201:
                    errors += 1
                    print(f"  Round {i + 1}: create ERROR ({response.status_code})")
                    continue
                book_id = response.json()["id"]

                start = time.perf_counter()
                response = client.get(f"/books/{book_id}")
                latencies["get"].append((time.perf_counter() - start) * 1000)

                start = time.perf_counter()
                response = client.put(
                    f"/books/{book_id}",
                    json={"title": f"Benchmark Book {i + 1} (revised)", "author": "Benchmark"},
                )
                latencies["update"].append((time.perf_counter() - start) * 1000)

                start = time.perf_counter()
                response = client.delete(f"/books/{book_id}")
                latencies["delete"].append((time.perf_counter() - start) * 1000)
                if response.status_code != 200:
                    errors += 1
                    print(f"  Round {i + 1}: delete ERROR ({response.status_code})")
                    continue

                print(f"  Round {i + 1}: book {book_id} ok")

            except httpx.HTTPError as e:
                errors += 1
                print(f"  Round {i + 1}: EXCEPTION ({e})")

    if not latencies["create"]:
        return {"error": "All requests failed"}

    return {
        "total_rounds": num_rounds,
        "failed_rounds": errors,
        "latency_ms": {op: _latency_stats(values) for op, values in latencies.items() if values},
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark the book library API")
    parser.add_argument(
        "--url",
        default="http://localhost:3000",
        help="Base URL of the book library API",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=50,
        help="Number of create/get/update/delete rounds",
    )

    args = parser.parse_args()

    print("=" * 50)
    print("Book Library API Benchmark")
    print("=" * 50)
    print()

    results = benchmark_books(base_url=args.url, num_rounds=args.rounds)

    print()
    print("=" * 50)
    print("Results")
    print("=" * 50)
    print()

    if "error" in results:
        print(f"Error: {results['error']}")
        return

    print(f"Total rounds:        {results['total_rounds']}")
    print(f"Failed:              {results['failed_rounds']}")
    for op, stats in results["latency_ms"].items():
        print()
        print(f"{op.capitalize()} latency (ms):")
        print(f"  Min:               {stats['min']:.2f}")
        print(f"  Max:               {stats['max']:.2f}")
        print(f"  Mean:              {stats['mean']:.2f}")
        print(f"  Median:            {stats['median']:.2f}")
        print(f"  Std Dev:           {stats['stdev']:.2f}")
        print(f"  P95:               {stats['p95']:.2f}")


if __name__ == "__main__":
    main()

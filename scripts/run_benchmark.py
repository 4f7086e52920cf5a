#!/usr/bin/env python
"""Benchmark distance-matrix construction and normalization on random point sets."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json

from src.evaluation.benchmark import DEFAULT_SIZES, run_benchmark_sweep
from src.evaluation.plotting import plot_distance_time
from src.points.kinds import DistType


def main():
    parser = argparse.ArgumentParser(description="Run point-set benchmarks")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Point counts")
    parser.add_argument("--dim", type=int, default=16, help="Number of attributes")
    parser.add_argument(
        "--metrics", nargs="+", default=[DistType.EUCLIDEAN.value],
        choices=[d.value for d in DistType],
        help="Distance metrics to benchmark",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output-dir", type=str, default="results", help="Output directory")
    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\nBenchmarking sizes {args.sizes} with D={args.dim}...")
    results = run_benchmark_sweep(
        sizes=args.sizes,
        D=args.dim,
        dist_types=[DistType(m) for m in args.metrics],
        seed=args.seed,
    )

    results_data = [
        {
            "n": r.n,
            "D": r.D,
            "dist_type": r.dist_type,
            "distance_time": r.distance_time,
            "distance_evaluations": r.distance_evaluations,
            "normalize_time": r.normalize_time,
            "extrema_time": r.extrema_time,
            "matrix_bytes": r.matrix_bytes,
            "rss_bytes": r.rss_bytes,
        }
        for r in results
    ]
    json_path = output_dir / "pointset_benchmark.json"
    with open(json_path, "w") as f:
        json.dump(results_data, f, indent=2)
    print(f"\nResults saved to {json_path}")

    print("\nGenerating plots...")
    plot_distance_time(results, save_path=output_dir / "distance_time.png")

    print(f"\n{'='*60}")
    print(f"{'n':>8} {'Metric':<14} {'Distances':>10} {'Normalize':>10} {'Matrix':>10}")
    print(f"{'-'*8} {'-'*14} {'-'*10} {'-'*10} {'-'*10}")
    for r in results:
        print(f"{r.n:>8} {r.dist_type:<14} {r.distance_time:>9.3f}s {r.normalize_time:>9.4f}s "
              f"{r.matrix_bytes/1024:>9.1f}K")


if __name__ == "__main__":
    main()

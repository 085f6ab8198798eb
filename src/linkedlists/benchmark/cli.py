"""Command-line interface for the benchmark suite.

Provides the `linkedlists-bench` command with subcommands for:
- Running benchmarks
- Listing the benchmarks of a suite
- Listing the available workloads
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from linkedlists.benchmark.runner import (
    BenchmarkProgress,
    BenchmarkRunner,
    BenchmarkSuite,
    format_results_table,
    load_suite_config,
)
from linkedlists.benchmark.workloads import WORKLOADS

# Default paths
DEFAULT_SUITE_PATH = (
    Path(__file__).parent.parent.parent.parent
    / "programs"
    / "benchmarks"
    / "suite.yaml"
)


def _load_suite(args: argparse.Namespace) -> BenchmarkSuite | None:
    suite_path = Path(args.suite) if args.suite else DEFAULT_SUITE_PATH

    if not suite_path.exists():
        print(f"Error: Suite configuration not found: {suite_path}")
        print("Create suite.yaml or specify --suite path")
        return None

    try:
        return load_suite_config(suite_path)
    except Exception as e:
        print(f"Error loading suite configuration: {e}")
        return None


def cmd_run(args: argparse.Namespace) -> int:
    """Run benchmarks."""
    suite = _load_suite(args)
    if suite is None:
        return 1

    def progress(p: BenchmarkProgress) -> None:
        print(f"  [{p.index}/{p.total}] {p.benchmark}...", end="\r", flush=True)

    runner = BenchmarkRunner(
        suite=suite,
        target_cv=args.cv_target,
        min_runs=args.min_runs,
        max_runs=args.max_runs,
        warmup=args.warmup,
        size=args.size,
        progress_callback=progress if not args.quiet else None,
    )

    if not runner.selected(args.benchmark):
        print(f"No enabled benchmark matches '{args.benchmark}'")
        return 1

    print(f"linkedlists benchmark suite: {suite.name}")
    print(f"Running benchmarks (target CV: {args.cv_target * 100:.1f}%)...")
    print()

    results = runner.run_all(benchmark_filter=args.benchmark)

    # Clear progress line and print results
    print(" " * 60, end="\r")
    print(format_results_table(results))

    return 1 if any(r.error for r in results) else 0


def cmd_list(args: argparse.Namespace) -> int:
    """List the benchmarks of a suite."""
    suite = _load_suite(args)
    if suite is None:
        return 1

    print(f"Suite: {suite.name}")
    print("=" * 70)
    print(f"{'Name':<28} {'Workload':<28} {'Size':>8} State")
    print("-" * 70)
    for config in suite.benchmarks:
        state = "enabled" if config.enabled else "disabled"
        print(f"{config.name:<28} {config.workload:<28} {config.size:>8} {state}")
    print("-" * 70)
    print(f"Total: {len(suite.benchmarks)} benchmark(s)")
    return 0


def cmd_workloads(args: argparse.Namespace) -> int:
    """Show available workloads."""
    print("Available Workloads")
    print("=" * 70)
    for name, workload in sorted(WORKLOADS.items()):
        print(f"{name:<28} {workload.description}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="linkedlists-bench",
        description="Timing and stress suite for linkedlists",
    )
    parser.add_argument(
        "--suite",
        help="Path to suite.yaml configuration (default: programs/benchmarks/suite.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Run benchmarks")
    run_parser.add_argument(
        "--benchmark",
        help="Run only the specified benchmark",
    )
    run_parser.add_argument(
        "--size",
        type=int,
        help="Override the list size of every benchmark",
    )
    run_parser.add_argument(
        "--cv-target",
        type=float,
        default=0.05,
        help="Target coefficient of variation (default: 0.05 = 5%%)",
    )
    run_parser.add_argument(
        "--min-runs",
        type=int,
        default=5,
        help="Minimum number of timed runs (default: 5)",
    )
    run_parser.add_argument(
        "--max-runs",
        type=int,
        default=30,
        help="Maximum number of timed runs (default: 30)",
    )
    run_parser.add_argument(
        "--warmup",
        type=int,
        default=1,
        help="Number of warmup runs (default: 1)",
    )
    run_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    run_parser.set_defaults(func=cmd_run)

    # list command
    list_parser = subparsers.add_parser("list", help="List the suite's benchmarks")
    list_parser.set_defaults(func=cmd_list)

    # workloads command
    workloads_parser = subparsers.add_parser(
        "workloads", help="Show available workloads"
    )
    workloads_parser.set_defaults(func=cmd_workloads)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

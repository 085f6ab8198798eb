"""Benchmark suite loading and execution.

Coordinates:
- Loading suite configurations from YAML
- Resolving workloads by name
- Timing each workload until its timings are stable
- Formatting a results table
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import yaml

from linkedlists.benchmark.stats import EMPTY_STATS, TimingStats, run_until_stable
from linkedlists.benchmark.workloads import get_workload

DEFAULT_SIZE = 10_000


@dataclass
class BenchmarkConfig:
    """Configuration for a single benchmark.

    Attributes:
        name: Benchmark identifier.
        workload: Name of the workload to run.
        size: Number of list elements.
        enabled: Whether the benchmark runs.
    """

    name: str
    workload: str
    size: int = DEFAULT_SIZE
    enabled: bool = True


@dataclass
class BenchmarkSuite:
    """Collection of benchmark configurations.

    Attributes:
        name: Suite name.
        benchmarks: Benchmark configurations, in file order.
    """

    name: str
    benchmarks: list[BenchmarkConfig]


@dataclass
class BenchmarkRunResult:
    """Result of running one benchmark.

    Attributes:
        benchmark: Benchmark name.
        workload: Workload name.
        size: Number of list elements.
        stats: Timing statistics.
        error: Error message if the workload failed.
    """

    benchmark: str
    workload: str
    size: int
    stats: TimingStats
    error: str | None = None


@dataclass
class BenchmarkProgress:
    """Progress callback information.

    Attributes:
        benchmark: Current benchmark name.
        index: 1-based position in the run.
        total: Number of benchmarks in the run.
    """

    benchmark: str
    index: int
    total: int


# Type for progress callbacks
ProgressCallback = Callable[[BenchmarkProgress], None]


def load_suite_config(config_path: Path | str) -> BenchmarkSuite:
    """Load a benchmark suite from YAML.

    Entries without a ``name`` or ``workload`` key are skipped.

    Args:
        config_path: Path to the suite file.

    Returns:
        BenchmarkSuite configuration.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f) or {}

    benchmarks = []
    for bench_data in data.get("benchmarks") or []:
        if "name" not in bench_data or "workload" not in bench_data:
            continue
        benchmarks.append(
            BenchmarkConfig(
                name=bench_data["name"],
                workload=bench_data["workload"],
                size=int(bench_data.get("size", DEFAULT_SIZE)),
                enabled=bench_data.get("enabled", True),
            )
        )

    return BenchmarkSuite(name=data.get("name", "linkedlists"), benchmarks=benchmarks)


@dataclass
class BenchmarkRunner:
    """Runs the benchmarks of a suite in-process.

    Attributes:
        suite: Benchmark suite configuration.
        target_cv: Target coefficient of variation.
        min_runs: Minimum number of timed runs.
        max_runs: Maximum number of timed runs.
        warmup: Number of warmup runs.
        size: If set, overrides every benchmark's size.
        progress_callback: Optional callback for progress updates.
    """

    suite: BenchmarkSuite
    target_cv: float = 0.05
    min_runs: int = 5
    max_runs: int = 30
    warmup: int = 1
    size: int | None = None
    progress_callback: ProgressCallback | None = None

    def selected(self, benchmark_filter: str | None = None) -> list[BenchmarkConfig]:
        """Return the enabled benchmarks, optionally only the named one."""
        return [
            config
            for config in self.suite.benchmarks
            if config.enabled
            and (benchmark_filter is None or config.name == benchmark_filter)
        ]

    def run_benchmark(self, config: BenchmarkConfig) -> BenchmarkRunResult:
        """Time a single benchmark.

        A failing workload is reported through ``error``, not raised.
        """
        size = self.size if self.size is not None else config.size
        try:
            workload = get_workload(config.workload)
            stats = run_until_stable(
                lambda: workload.run(size),
                min_runs=self.min_runs,
                max_runs=self.max_runs,
                target_cv=self.target_cv,
                warmup=self.warmup,
            )
        except Exception as e:
            return BenchmarkRunResult(
                benchmark=config.name,
                workload=config.workload,
                size=size,
                stats=EMPTY_STATS,
                error=str(e),
            )
        return BenchmarkRunResult(
            benchmark=config.name,
            workload=config.workload,
            size=size,
            stats=stats,
        )

    def run_all(self, benchmark_filter: str | None = None) -> list[BenchmarkRunResult]:
        """Run every enabled benchmark in the suite.

        Args:
            benchmark_filter: If provided, only run this benchmark.

        Returns:
            One result per benchmark run.
        """
        configs = self.selected(benchmark_filter)
        results = []
        for index, config in enumerate(configs, start=1):
            if self.progress_callback:
                self.progress_callback(
                    BenchmarkProgress(
                        benchmark=config.name, index=index, total=len(configs)
                    )
                )
            results.append(self.run_benchmark(config))
        return results


def format_results_table(results: list[BenchmarkRunResult]) -> str:
    """Format benchmark results as a table.

    Args:
        results: Results to show.

    Returns:
        Formatted table string.
    """
    lines = []
    lines.append("=" * 78)
    lines.append("BENCHMARK RESULTS")
    lines.append("=" * 78)
    lines.append(
        f"{'Benchmark':<28} {'Size':>9} {'Mean (ms)':>11} {'CV':>8} {'Runs':>6}"
    )
    lines.append("-" * 78)

    for result in results:
        if result.error:
            lines.append(
                f"{result.benchmark:<28} {result.size:>9} ERROR: {result.error}"
            )
            continue
        stats = result.stats
        lines.append(
            f"{result.benchmark:<28} {result.size:>9} "
            f"{stats.mean * 1000:>11.3f} {stats.cv * 100:>7.2f}% "
            f"{len(stats.times):>6}"
        )

    return "\n".join(lines)

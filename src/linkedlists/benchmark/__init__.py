"""Timing and stress suite for the linkedlists list types.

This package provides:
- Named workloads over both list types, including long-chain teardown
- Adaptive run counts targeting a coefficient of variation
- YAML suite configuration and the `linkedlists-bench` CLI
"""

from __future__ import annotations

from linkedlists.benchmark.runner import (
    BenchmarkConfig,
    BenchmarkRunner,
    BenchmarkRunResult,
    BenchmarkSuite,
    load_suite_config,
)
from linkedlists.benchmark.stats import TimingStats, run_until_stable
from linkedlists.benchmark.workloads import WORKLOADS, Workload, get_workload

__all__ = [
    "WORKLOADS",
    "BenchmarkConfig",
    "BenchmarkRunResult",
    "BenchmarkRunner",
    "BenchmarkSuite",
    "TimingStats",
    "Workload",
    "get_workload",
    "load_suite_config",
    "run_until_stable",
]

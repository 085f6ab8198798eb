"""Timing statistics for list workloads.

Provides:
- Outlier detection with the IQR rule
- Summary statistics over the remaining samples
- An adaptive loop that keeps sampling until the coefficient of variation
  drops below a target
"""

from __future__ import annotations

import statistics
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimingStats:
    """Summary of repeated workload timings.

    Attributes:
        times: Raw timings in seconds, in the order they were taken
        mean: Arithmetic mean (outliers excluded)
        median: Median (outliers excluded)
        stddev: Sample standard deviation (outliers excluded)
        cv: Coefficient of variation (stddev/mean)
        min: Fastest kept timing
        max: Slowest kept timing
        outliers: Timings rejected by the IQR rule
        runs_to_stable: Timed runs taken before the loop stopped
    """

    times: tuple[float, ...]
    mean: float
    median: float
    stddev: float
    cv: float
    min: float
    max: float
    outliers: tuple[float, ...] = field(default_factory=tuple)
    runs_to_stable: int = 0


EMPTY_STATS = TimingStats(
    times=(), mean=0.0, median=0.0, stddev=0.0, cv=0.0, min=0.0, max=0.0
)


def detect_outliers(data: list[float], factor: float = 1.5) -> list[float]:
    """Return the values outside [Q1 - factor*IQR, Q3 + factor*IQR].

    Fewer than 4 samples never yield outliers.
    """
    if len(data) < 4:
        return []

    q1, _, q3 = statistics.quantiles(data, n=4, method="inclusive")
    spread = factor * (q3 - q1)
    return [x for x in data if x < q1 - spread or x > q3 + spread]


def _variation(data: list[float]) -> tuple[float, float]:
    """Return (stddev, cv) of ``data``."""
    if len(data) < 2:
        return 0.0, 0.0
    mean = statistics.mean(data)
    stddev = statistics.stdev(data)
    return stddev, (stddev / mean if mean > 0 else 0.0)


def compute_stats(times: list[float], runs_to_stable: int = 0) -> TimingStats:
    """Summarize ``times`` after discarding outliers.

    Args:
        times: Timings in seconds.
        runs_to_stable: Number of runs the adaptive loop needed.

    Returns:
        TimingStats; all zeros for an empty input.
    """
    if not times:
        return EMPTY_STATS

    outliers = detect_outliers(times)
    rejected = set(outliers)
    kept = [t for t in times if t not in rejected]
    if len(kept) < 2:
        kept = list(times)

    stddev, cv = _variation(kept)
    return TimingStats(
        times=tuple(times),
        mean=statistics.mean(kept),
        median=statistics.median(kept),
        stddev=stddev,
        cv=cv,
        min=min(kept),
        max=max(kept),
        outliers=tuple(outliers),
        runs_to_stable=runs_to_stable,
    )


def run_until_stable(
    runner: Callable[[], float],
    min_runs: int = 5,
    max_runs: int = 30,
    target_cv: float = 0.05,
    warmup: int = 1,
) -> TimingStats:
    """Time ``runner`` until its CV is at most ``target_cv``.

    Warmup runs are discarded. After ``min_runs`` timed runs, one more run is
    added at a time until the target is met or ``max_runs`` is reached.

    Args:
        runner: Callable returning one timing in seconds.
        min_runs: Timed runs before the CV is first checked.
        max_runs: Upper bound on timed runs.
        target_cv: Coefficient of variation to reach.
        warmup: Untimed runs executed first.

    Returns:
        TimingStats over the timed runs.
    """
    for _ in range(warmup):
        runner()

    times = [runner() for _ in range(min_runs)]
    while len(times) < max_runs:
        _, cv = _variation(times)
        if cv <= target_cv:
            break
        times.append(runner())

    return compute_stats(times, runs_to_stable=len(times))


def format_stats(stats: TimingStats, unit: str = "ms") -> str:
    """Render stats like ``"12.3ms +/- 0.4ms (CV=3.25%, 7 runs)"``."""
    scale = 1000.0 if unit == "ms" else 1.0
    return (
        f"{stats.mean * scale:.1f}{unit} +/- {stats.stddev * scale:.1f}{unit} "
        f"(CV={stats.cv * 100:.2f}%, {len(stats.times)} runs)"
    )

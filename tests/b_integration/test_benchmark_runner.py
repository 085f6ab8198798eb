"""Integration tests for linkedlists.benchmark runner and CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkedlists.benchmark.cli import DEFAULT_SUITE_PATH, create_parser, main
from linkedlists.benchmark.runner import (
    BenchmarkConfig,
    BenchmarkProgress,
    BenchmarkRunner,
    BenchmarkSuite,
    format_results_table,
    load_suite_config,
)

SUITE_YAML = """\
name: test-suite
benchmarks:
  - name: push-pop
    workload: stack_push_pop
    size: 50
  - name: shared
    workload: persistent_shared_teardown
    size: 50
  - name: off
    workload: stack_iter
    enabled: false
  - name: missing-workload-key
"""

FAST = {"min_runs": 2, "max_runs": 3, "warmup": 0, "target_cv": 10.0}


@pytest.fixture
def suite_file(tmp_path: Path) -> Path:
    path = tmp_path / "suite.yaml"
    path.write_text(SUITE_YAML)
    return path


class TestLoadSuiteConfig:
    """Tests for YAML suite loading."""

    def test_load(self, suite_file: Path) -> None:
        """Test that entries, defaults and skips are applied."""
        suite = load_suite_config(suite_file)

        assert suite.name == "test-suite"
        assert [b.name for b in suite.benchmarks] == ["push-pop", "shared", "off"]
        assert suite.benchmarks[0].size == 50
        assert suite.benchmarks[2].size == 10_000
        assert suite.benchmarks[2].enabled is False

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives an empty default-named suite."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        suite = load_suite_config(path)
        assert suite.name == "linkedlists"
        assert suite.benchmarks == []

    def test_default_suite(self) -> None:
        """Test that the bundled suite names only known workloads."""
        from linkedlists.benchmark.workloads import WORKLOADS

        suite = load_suite_config(DEFAULT_SUITE_PATH)
        assert suite.benchmarks
        assert all(b.workload in WORKLOADS for b in suite.benchmarks)


class TestBenchmarkRunner:
    """Tests for BenchmarkRunner."""

    def test_run_all_skips_disabled(self, suite_file: Path) -> None:
        """Test that only enabled benchmarks run, with progress reports."""
        seen: list[BenchmarkProgress] = []
        runner = BenchmarkRunner(
            suite=load_suite_config(suite_file), progress_callback=seen.append, **FAST
        )

        results = runner.run_all()

        assert [r.benchmark for r in results] == ["push-pop", "shared"]
        assert all(r.error is None for r in results)
        assert all(2 <= len(r.stats.times) <= 3 for r in results)
        assert [(p.index, p.total) for p in seen] == [(1, 2), (2, 2)]

    def test_filter_and_size_override(self, suite_file: Path) -> None:
        """Test running one benchmark at an overridden size."""
        runner = BenchmarkRunner(suite=load_suite_config(suite_file), size=7, **FAST)
        results = runner.run_all(benchmark_filter="shared")

        assert len(results) == 1
        assert results[0].size == 7

    def test_unknown_workload_reported(self) -> None:
        """Test that a bad workload becomes an error result."""
        suite = BenchmarkSuite(
            name="bad", benchmarks=[BenchmarkConfig(name="x", workload="nope")]
        )
        result = BenchmarkRunner(suite=suite, **FAST).run_all()[0]

        assert result.error is not None
        assert "nope" in result.error
        assert result.stats.times == ()

    def test_format_results_table(self, suite_file: Path) -> None:
        """Test the table lists every result."""
        suite = load_suite_config(suite_file)
        suite.benchmarks.append(BenchmarkConfig(name="broken", workload="nope"))
        results = BenchmarkRunner(suite=suite, **FAST).run_all()

        table = format_results_table(results)
        assert "BENCHMARK RESULTS" in table
        assert "push-pop" in table
        assert "broken" in table
        assert "ERROR" in table


class TestCli:
    """Tests for the linkedlists-bench command line."""

    def test_parser_defaults(self) -> None:
        """Test default run options."""
        args = create_parser().parse_args(["run"])
        assert args.cv_target == 0.05
        assert args.min_runs == 5
        assert args.size is None

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that no subcommand shows usage."""
        assert main([]) == 0
        assert "linkedlists-bench" in capsys.readouterr().out

    def test_run(self, suite_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a quiet run of a small suite."""
        code = main(
            [
                "--suite",
                str(suite_file),
                "run",
                "--quiet",
                "--min-runs",
                "2",
                "--max-runs",
                "2",
                "--warmup",
                "0",
            ]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "push-pop" in out
        assert "shared" in out

    def test_run_unknown_benchmark(
        self, suite_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that filtering to nothing is an error."""
        code = main(["--suite", str(suite_file), "run", "--benchmark", "zzz"])
        assert code == 1
        assert "zzz" in capsys.readouterr().out

    def test_missing_suite(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the message for a missing suite file."""
        code = main(["--suite", str(tmp_path / "nope.yaml"), "list"])
        assert code == 1
        assert "not found" in capsys.readouterr().out

    def test_list(self, suite_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing a suite."""
        assert main(["--suite", str(suite_file), "list"]) == 0
        out = capsys.readouterr().out
        assert "disabled" in out
        assert "Total: 3 benchmark(s)" in out

    def test_workloads(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing workloads."""
        assert main(["workloads"]) == 0
        out = capsys.readouterr().out
        assert "stack_teardown" in out
        assert "persistent_shared_teardown" in out

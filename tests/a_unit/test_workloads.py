"""Unit tests for linkedlists.benchmark.workloads module."""

from __future__ import annotations

import pytest

from linkedlists.benchmark.workloads import (
    WORKLOADS,
    build_persistent,
    build_stack,
    get_workload,
)


class TestBuilders:
    """Tests for the input builders."""

    def test_build_stack(self) -> None:
        """Test that the last pushed value is in front."""
        stack = build_stack(4)
        assert list(stack) == [3, 2, 1, 0]

    def test_build_persistent(self) -> None:
        """Test that the last prepended value is in front."""
        plist = build_persistent(4)
        assert list(plist) == [3, 2, 1, 0]
        assert plist.strong_count() == 1


class TestRegistry:
    """Tests for the workload registry."""

    def test_names_match_keys(self) -> None:
        """Test that each entry is registered under its own name."""
        for name, workload in WORKLOADS.items():
            assert workload.name == name
            assert workload.description

    @pytest.mark.parametrize("name", sorted(WORKLOADS))
    def test_workload_runs(self, name: str) -> None:
        """Test that every workload runs and reports a duration."""
        elapsed = get_workload(name).run(200)
        assert elapsed >= 0.0

    def test_unknown_workload(self) -> None:
        """Test the error for an unknown name."""
        with pytest.raises(KeyError, match="stack_push_pop"):
            get_workload("no_such_workload")

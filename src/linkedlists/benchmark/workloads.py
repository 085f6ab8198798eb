"""Named list workloads for the benchmark suite.

Each workload builds its input outside the timed region, times one
operation pattern over a list of ``size`` elements and returns the elapsed
seconds. Teardown workloads time the release of a full chain, which is where
a recursive implementation would overflow the stack.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from linkedlists.persistent import PersistentList
from linkedlists.stack import StackList

# Number of lists forked off a common base in the shared teardown workload
SHARED_FORKS = 8


@dataclass(frozen=True)
class Workload:
    """A timed list operation pattern.

    Attributes:
        name: Registry key.
        description: One-line summary shown by the CLI.
        run: Callable taking a size and returning elapsed seconds.
    """

    name: str
    description: str
    run: Callable[[int], float]


def build_stack(size: int) -> StackList:
    """Push ``0 .. size-1``; the last value ends up in front."""
    stack = StackList()
    for i in range(size):
        stack.push(i)
    return stack


def build_persistent(size: int) -> PersistentList:
    """Prepend ``0 .. size-1``; the last value ends up in front."""
    plist = PersistentList()
    for i in range(size):
        plist = plist.prepend(i)
    return plist


def stack_push_pop(size: int) -> float:
    stack = StackList()
    start = time.perf_counter()
    for i in range(size):
        stack.push(i)
    while stack.pop() is not None:
        pass
    return time.perf_counter() - start


def stack_iter(size: int) -> float:
    stack = build_stack(size)
    start = time.perf_counter()
    total = 0
    for elem in stack.iter():
        total += elem
    return time.perf_counter() - start


def stack_iter_mut(size: int) -> float:
    stack = build_stack(size)
    start = time.perf_counter()
    for ref in stack.iter_mut():
        ref.value += 1
    return time.perf_counter() - start


def stack_into_iter(size: int) -> float:
    stack = build_stack(size)
    start = time.perf_counter()
    for _ in stack.into_iter():
        pass
    return time.perf_counter() - start


def stack_teardown(size: int) -> float:
    stack = build_stack(size)
    start = time.perf_counter()
    stack.clear()
    return time.perf_counter() - start


def persistent_prepend_tail(size: int) -> float:
    start = time.perf_counter()
    plist = PersistentList()
    for i in range(size):
        plist = plist.prepend(i)
    while plist:
        plist = plist.tail()
    return time.perf_counter() - start


def persistent_teardown(size: int) -> float:
    plist = build_persistent(size)
    start = time.perf_counter()
    plist.drop()
    return time.perf_counter() - start


def persistent_shared_teardown(size: int) -> float:
    """Drop several forks of one base, then the base itself.

    Each fork drop must stop at the shared suffix; only the final drop of
    the base walks the full chain.
    """
    base = build_persistent(size)
    forks = [base.prepend(-i) for i in range(SHARED_FORKS)]
    start = time.perf_counter()
    for fork in forks:
        fork.drop()
    base.drop()
    return time.perf_counter() - start


WORKLOADS: dict[str, Workload] = {
    w.name: w
    for w in [
        Workload("stack_push_pop", "push then pop every element", stack_push_pop),
        Workload("stack_iter", "read cursor over a full stack", stack_iter),
        Workload("stack_iter_mut", "increment every element in place", stack_iter_mut),
        Workload("stack_into_iter", "consume a stack by value", stack_into_iter),
        Workload("stack_teardown", "iterative release of a stack", stack_teardown),
        Workload(
            "persistent_prepend_tail",
            "prepend every element then walk tails to empty",
            persistent_prepend_tail,
        ),
        Workload(
            "persistent_teardown",
            "iterative release of an unshared chain",
            persistent_teardown,
        ),
        Workload(
            "persistent_shared_teardown",
            "release forks that share one suffix, then the suffix",
            persistent_shared_teardown,
        ),
    ]
}


def get_workload(name: str) -> Workload:
    """Look up a workload by name.

    Raises KeyError listing the known names if ``name`` is unknown.
    """
    try:
        return WORKLOADS[name]
    except KeyError:
        known = ", ".join(sorted(WORKLOADS))
        msg = f"Unknown workload '{name}' (known: {known})"
        raise KeyError(msg) from None

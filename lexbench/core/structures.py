"""Timed add/search/remove against a single queue or stack.

Each helper performs exactly one structure operation between two reads of
``time.perf_counter_ns`` and records the duration in the matching
:class:`OperationStats`. The same helpers serve both structure kinds, so the
analyzer can drive a queue and a stack with identical call sequences.
"""

import time
from collections import deque
from typing import Deque, List, Union

from lexbench.core.stats import OperationKind, OperationStats, StructureKind

Container = Union[Deque[str], List[str]]


def new_container(kind: StructureKind) -> Container:
    """Create an empty container for the given structure kind.

    A queue is a deque with insertion at the tail; a stack is a list whose
    end is the top. Both iterate in insertion order.
    """
    if kind == StructureKind.QUEUE:
        return deque()
    if kind == StructureKind.STACK:
        return []
    raise ValueError(f"Unsupported structure kind: {kind}")


def timed_add(item: str, container: Container, stats: OperationStats) -> None:
    start = time.perf_counter_ns()
    container.append(item)
    end = time.perf_counter_ns()
    stats.record(OperationKind.ADD, end - start)


def timed_search(item: str, container: Container, stats: OperationStats) -> bool:
    start = time.perf_counter_ns()
    found = False
    for element in container:
        if element == item:
            found = True
            break
    end = time.perf_counter_ns()
    stats.record(OperationKind.SEARCH, end - start)
    return found


def timed_remove(item: str, container: Container, stats: OperationStats) -> bool:
    """Remove the first occurrence of ``item``; absent items are a no-op.

    Returns:
        True if an element was removed
    """
    start = time.perf_counter_ns()
    try:
        container.remove(item)
        removed = True
    except ValueError:
        removed = False
    end = time.perf_counter_ns()
    stats.record(OperationKind.REMOVE, end - start)
    return removed

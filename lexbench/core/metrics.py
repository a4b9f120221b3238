"""Comparison metrics between queue and stack timings."""

from typing import Dict, Mapping

import numpy as np

from lexbench.core.stats import OperationKind, OperationStats, StructureKind


def mean_elapsed(stats: OperationStats, kind: OperationKind) -> float:
    """Average nanoseconds per operation, 0.0 when nothing was recorded."""
    count = stats.count(kind)
    if count == 0:
        return 0.0
    return float(np.divide(stats.elapsed(kind), count))


def compare_structures(
    stats_by_kind: Mapping[StructureKind, OperationStats],
) -> Dict[OperationKind, Dict[str, float]]:
    """
    Mean time per operation for each structure and the queue/stack ratio.

    A ratio above 1.0 means the queue was slower for that operation.
    Ratios with an empty side are reported as 0.0.
    """
    queue_stats = stats_by_kind[StructureKind.QUEUE]
    stack_stats = stats_by_kind[StructureKind.STACK]

    comparison = {}
    for kind in OperationKind:
        means = np.array([mean_elapsed(queue_stats, kind), mean_elapsed(stack_stats, kind)])

        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.divide(means[0], means[1])

        comparison[kind] = {
            "queue_mean_ns": float(means[0]),
            "stack_mean_ns": float(means[1]),
            "queue_to_stack": float(ratio) if np.isfinite(ratio) else 0.0,
        }

    return comparison


"""Per-structure operation counters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class StructureKind(str, Enum):
    QUEUE = "queue"
    STACK = "stack"


class OperationKind(str, Enum):
    ADD = "add"
    SEARCH = "search"
    REMOVE = "remove"

    @property
    def label(self) -> str:
        return _OPERATION_LABELS[self]


_OPERATION_LABELS = {
    OperationKind.ADD: "Additions",
    OperationKind.SEARCH: "Searches",
    OperationKind.REMOVE: "Removals",
}


def coerce_operation(value: Union[OperationKind, str]) -> OperationKind:
    if isinstance(value, OperationKind):
        return value
    return OperationKind(value.lower())


@dataclass
class OperationStats:
    """Counts and elapsed nanoseconds for each operation kind on one structure.

    Values only ever grow: every call to :meth:`record` adds one to the
    count and the measured duration to the elapsed total.
    """

    add_count: int = 0
    add_elapsed: int = 0
    search_count: int = 0
    search_elapsed: int = 0
    remove_count: int = 0
    remove_elapsed: int = 0

    def record(self, kind: Union[OperationKind, str], elapsed_ns: int) -> None:
        """Accumulate a single measured operation.

        Args:
            kind: Operation that was timed
            elapsed_ns: Measured duration in nanoseconds

        Raises:
            ValueError: If the duration is negative
        """
        if elapsed_ns < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed_ns}")

        prefix = coerce_operation(kind).value
        setattr(self, f"{prefix}_count", getattr(self, f"{prefix}_count") + 1)
        setattr(self, f"{prefix}_elapsed", getattr(self, f"{prefix}_elapsed") + elapsed_ns)

    def count(self, kind: Union[OperationKind, str]) -> int:
        return getattr(self, f"{coerce_operation(kind).value}_count")

    def elapsed(self, kind: Union[OperationKind, str]) -> int:
        return getattr(self, f"{coerce_operation(kind).value}_elapsed")

    @property
    def total_count(self) -> int:
        return self.add_count + self.search_count + self.remove_count

    @property
    def total_elapsed(self) -> int:
        return self.add_elapsed + self.search_elapsed + self.remove_elapsed

    def to_dict(self) -> Dict[str, int]:
        return {
            "add_count": self.add_count,
            "add_elapsed": self.add_elapsed,
            "search_count": self.search_count,
            "search_elapsed": self.search_elapsed,
            "remove_count": self.remove_count,
            "remove_elapsed": self.remove_elapsed,
        }

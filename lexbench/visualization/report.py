"""Textual timing report."""

from __future__ import annotations

from enum import Enum
from typing import Union


class TimeUnit(str, Enum):
    NS = "ns"
    US = "us"
    MS = "ms"
    S = "s"

    @property
    def divisor(self) -> int:
        return _DIVISORS[self]

    def convert(self, elapsed_ns: float) -> float:
        return elapsed_ns / self.divisor


_DIVISORS = {
    TimeUnit.NS: 1,
    TimeUnit.US: 1_000,
    TimeUnit.MS: 1_000_000,
    TimeUnit.S: 1_000_000_000,
}


def coerce_unit(value: Union[TimeUnit, str, None]) -> TimeUnit:
    if value is None:
        return TimeUnit.NS
    if isinstance(value, TimeUnit):
        return value
    return TimeUnit(value.lower())


def format_performance(
    label: str,
    operation: str,
    count: int,
    elapsed_ns: int,
    unit: Union[TimeUnit, str] = TimeUnit.NS,
) -> str:
    """Render one report line, e.g. ``"Queue Additions: 3 operations, 1200 ns"``."""
    unit = coerce_unit(unit)
    if unit == TimeUnit.NS:
        elapsed = f"{elapsed_ns}"
    else:
        elapsed = f"{unit.convert(elapsed_ns):.3f}"
    return f"{label} {operation}: {count} operations, {elapsed} {unit.value}"

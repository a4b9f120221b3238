"""Analyzer configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from lexbench.visualization.report import TimeUnit, coerce_unit


@dataclass
class AnalyzerConfig:
    """Settings shared by the analyzers.

    Attributes:
        seed: Seed for the analyzer's own random generator (None = unseeded)
        time_unit: Unit used by the textual report and the chart
        verbose: Log progress through the module logger
        show_chart: Render the chart after the textual report
    """

    seed: Optional[int] = None
    time_unit: Union[TimeUnit, str] = TimeUnit.NS
    verbose: bool = False
    show_chart: bool = True

    def __post_init__(self) -> None:
        self.time_unit = coerce_unit(self.time_unit)

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "time_unit": self.time_unit.value,
            "verbose": self.verbose,
            "show_chart": self.show_chart,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalyzerConfig":
        return cls(
            seed=data.get("seed"),
            time_unit=data.get("time_unit", "ns"),
            verbose=data.get("verbose", False),
            show_chart=data.get("show_chart", True),
        )

"""Shared plumbing for operation analyzers."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from rich.console import Console

from lexbench.config import AnalyzerConfig
from lexbench.core.stats import OperationKind, OperationStats, StructureKind
from lexbench.visualization.performance_chart import PerformanceChart
from lexbench.visualization.report import format_performance


class BaseAnalyzer(ABC):
    """
    Base class for analyzers that time lexeme operations on data structures.

    Subclasses own the structures themselves; this class owns the statistics
    records, the console used for reports, and the chart.

    Attributes:
        config: Analyzer settings
        stats: One statistics record per structure kind
        console: Rich console receiving every report
        visualizer: Chart rendered at the end of an analysis
    """

    def __init__(
        self,
        config: AnalyzerConfig = None,
        console: Console = None,
        visualizer: PerformanceChart = None,
    ):
        self.config = config or AnalyzerConfig()
        self.console = console or Console()
        self.visualizer = visualizer or PerformanceChart(console=self.console, unit=self.config.time_unit)
        self.stats: Dict[StructureKind, OperationStats] = {}

    @abstractmethod
    def add_lexeme(self, lexeme: str):
        ...

    @abstractmethod
    def remove_lexeme(self, lexeme: str):
        ...

    @abstractmethod
    def search_lexeme(self, lexeme: str):
        ...

    @abstractmethod
    def analyze_performance(self, code: str, operation=None, category=None):
        ...

    def print_performance(self, label: str, kind: StructureKind, operation: OperationKind) -> str:
        stat = self.stats[kind]
        line = format_performance(
            label,
            operation.label,
            stat.count(operation),
            stat.elapsed(operation),
            self.config.time_unit,
        )
        self.console.print(line, highlight=False)
        return line

    def visualize_performance(self, labels: Sequence[str], kinds: Sequence[StructureKind]):
        self.visualizer.render(labels, kinds, self.stats)

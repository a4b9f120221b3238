from lexbench.visualization.performance_chart import PerformanceChart
from lexbench.visualization.report import TimeUnit, format_performance

__all__ = ["PerformanceChart", "TimeUnit", "format_performance"]

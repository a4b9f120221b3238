from lexbench.analyzers.base import BaseAnalyzer
from lexbench.analyzers.timing import OperationRequest, TimingAnalyzer
from lexbench.analyzers.workload import build_workload

__all__ = ["BaseAnalyzer", "OperationRequest", "TimingAnalyzer", "build_workload"]

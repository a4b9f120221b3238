__version__ = "0.1.0"

from lexbench.analyzers.base import BaseAnalyzer
from lexbench.analyzers.timing import OperationRequest, TimingAnalyzer
from lexbench.analyzers.workload import build_workload
from lexbench.config import AnalyzerConfig
from lexbench.core.errors import EmptyLexemePoolError, LexbenchError
from lexbench.core.lexemes import LexemeAnalyzer, LexemeCategory, analyze_code
from lexbench.core.metrics import compare_structures, mean_elapsed
from lexbench.core.stats import OperationKind, OperationStats, StructureKind
from lexbench.visualization import PerformanceChart, TimeUnit, format_performance

__all__ = [
    # Main API
    "TimingAnalyzer",
    "BaseAnalyzer",
    "OperationRequest",
    "build_workload",
    "AnalyzerConfig",
    # Statistics
    "OperationKind",
    "OperationStats",
    "StructureKind",
    "compare_structures",
    "mean_elapsed",
    # Lexemes
    "LexemeAnalyzer",
    "LexemeCategory",
    "analyze_code",
    # Errors
    "LexbenchError",
    "EmptyLexemePoolError",
    # Reporting
    "PerformanceChart",
    "TimeUnit",
    "format_performance",
    # Metadata
    "__version__",
]

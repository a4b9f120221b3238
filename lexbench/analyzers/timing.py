"""
Timing analysis of lexeme operations on a queue and a stack.

Both structures are seeded with the same random subset of lexemes taken from
a piece of code, then driven with identical add/search/remove calls. Every
call is timed individually and accumulated per structure and operation kind.

Example usage:
    >>> from lexbench import OperationKind, OperationRequest, StructureKind, TimingAnalyzer
    >>> analyzer = TimingAnalyzer(seed=7)
    >>> stats = analyzer.analyze_performance(
    ...     "def add(a, b): return a + b",
    ...     [
    ...         OperationRequest(OperationKind.SEARCH, "add"),
    ...         OperationRequest(OperationKind.REMOVE, "return"),
    ...     ],
    ... )
    >>> stats[StructureKind.QUEUE].search_count
    1
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Iterable, List, Optional, Union

from rich.console import Console

from lexbench.analyzers.base import BaseAnalyzer
from lexbench.config import AnalyzerConfig
from lexbench.core.errors import EmptyLexemePoolError
from lexbench.core.lexemes import CategoryFilter, LexemeAnalyzer
from lexbench.core.stats import (
    OperationKind,
    OperationStats,
    StructureKind,
    coerce_operation,
)
from lexbench.core.structures import new_container, timed_add, timed_remove, timed_search
from lexbench.visualization.performance_chart import PerformanceChart

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationRequest:
    """A single scripted operation replayed against both structures."""

    kind: OperationKind
    lexeme: str

    def __post_init__(self):
        object.__setattr__(self, "kind", coerce_operation(self.kind))


Operation = Union[Callable[[], object], Iterable[OperationRequest], None]


class TimingAnalyzer(BaseAnalyzer):
    """
    Times lexeme additions, searches and removals on a queue and a stack.

    Attributes:
        queue: FIFO container (deque, tail insertion)
        stack: LIFO container (list, top is the last element)
        random: Instance-scoped random generator used for seeding
        supported_structures: Structure kinds in report order
        chart_labels: Display labels aligned with ``supported_structures``
    """

    def __init__(
        self,
        config: AnalyzerConfig = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        lexeme_analyzer: Optional[LexemeAnalyzer] = None,
        console: Console = None,
        visualizer: PerformanceChart = None,
    ):
        """Initialize the analyzer with empty structures and zeroed statistics.

        Args:
            config: Analyzer settings (creates default if None)
            seed: Overrides ``config.seed``
            rng: Random generator to use instead of a new ``random.Random``;
                anything with ``shuffle`` and ``randint`` works
            lexeme_analyzer: Lexeme source (creates default if None)
            console: Rich console for reports
            visualizer: Chart rendered after the report
        """
        super().__init__(config=config, console=console, visualizer=visualizer)

        if seed is None:
            seed = self.config.seed

        self.random = rng or random.Random(seed)
        self.lexeme_analyzer = lexeme_analyzer or LexemeAnalyzer()
        self.verbose = self.config.verbose

        self.supported_structures: List[StructureKind] = [StructureKind.QUEUE, StructureKind.STACK]
        self.chart_labels: List[str] = ["Queue", "Stack"]

        self.queue: Deque[str] = new_container(StructureKind.QUEUE)
        self.stack: List[str] = new_container(StructureKind.STACK)

        for kind in self.supported_structures:
            self.stats[kind] = OperationStats()

    def _containers(self):
        return ((self.queue, StructureKind.QUEUE), (self.stack, StructureKind.STACK))

    def extract_lexemes(self, code: str, category: CategoryFilter = None) -> List[str]:
        """Flatten the categorized lexemes of ``code`` into one pool.

        The pool is sorted so that a fixed seed gives the same selection
        regardless of set iteration order.

        Raises:
            EmptyLexemePoolError: If the code has no lexemes for ``category``
        """
        lexemes_by_category = self.lexeme_analyzer.analyze(code, category)

        pool: List[str] = []
        for lexemes in lexemes_by_category.values():
            pool.extend(sorted(lexemes))

        if not pool:
            raise EmptyLexemePoolError()

        return pool

    def seed_from_code(self, code: str, category: CategoryFilter = None) -> List[str]:
        """Seed both structures with a random subset of the code's lexemes.

        Shuffles the lexeme pool, draws ``k`` uniformly from ``[1, len(pool)]``
        and adds the first ``k`` lexemes to both structures.

        Args:
            code: Source code to extract lexemes from
            category: Optional lexeme category filter

        Returns:
            The lexemes that were added, in insertion order

        Raises:
            EmptyLexemePoolError: If no lexemes could be extracted
        """
        pool = self.extract_lexemes(code, category)

        self.random.shuffle(pool)
        selected_count = self.random.randint(1, len(pool))
        selected = pool[:selected_count]

        if self.verbose:
            logger.info(f"Seeding {selected_count} of {len(pool)} lexemes")

        for lexeme in selected:
            self.add_lexeme(lexeme)

        return selected

    def add_lexeme(self, lexeme: str) -> None:
        for container, kind in self._containers():
            timed_add(lexeme, container, self.stats[kind])

    def remove_lexeme(self, lexeme: str) -> Dict[StructureKind, bool]:
        return {
            kind: timed_remove(lexeme, container, self.stats[kind])
            for container, kind in self._containers()
        }

    def search_lexeme(self, lexeme: str) -> Dict[StructureKind, bool]:
        return {
            kind: timed_search(lexeme, container, self.stats[kind])
            for container, kind in self._containers()
        }

    def replay(self, requests: Iterable[OperationRequest]) -> int:
        """Apply scripted requests in order and return how many ran."""
        handlers = {
            OperationKind.ADD: self.add_lexeme,
            OperationKind.SEARCH: self.search_lexeme,
            OperationKind.REMOVE: self.remove_lexeme,
        }

        replayed = 0
        for request in requests:
            handlers[request.kind](request.lexeme)
            replayed += 1
        return replayed

    def run_operation(self, operation: Operation) -> None:
        if operation is None:
            return
        if callable(operation):
            operation()
        else:
            replayed = self.replay(operation)
            if self.verbose:
                logger.info(f"Replayed {replayed} scripted operations")

    def analyze_performance(
        self,
        code: str,
        operation: Operation = None,
        category: CategoryFilter = None,
    ) -> Dict[StructureKind, OperationStats]:
        """Seed from ``code``, run ``operation`` and report the timings.

        Statistics accumulate across calls; build a new analyzer for an
        isolated run.

        Args:
            code: Source code to extract lexemes from
            operation: Zero-argument callable, or an iterable of
                :class:`OperationRequest` replayed in order
            category: Optional lexeme category filter

        Returns:
            Statistics per structure kind

        Raises:
            EmptyLexemePoolError: If no lexemes are available
        """
        self.seed_from_code(code, category)

        if not self.queue and not self.stack:
            raise EmptyLexemePoolError()

        self.console.print("\nExtracted lexemes in each data structure:", highlight=False)
        contents = self.snapshot()
        for label, kind in zip(self.chart_labels, self.supported_structures):
            self.console.print(f"{label}: {contents[kind]}", highlight=False, markup=False)

        self.run_operation(operation)

        self.console.print("\nTiming analysis of each function:", highlight=False)
        for label, kind in zip(self.chart_labels, self.supported_structures):
            for op in OperationKind:
                self.print_performance(label, kind, op)

        if self.config.show_chart:
            self.visualize_performance(self.chart_labels, self.supported_structures)

        return self.stats

    run_analysis = analyze_performance

    def random_lexeme_count(self) -> int:
        """Random count in ``[1, len(queue)]``.

        Raises:
            ValueError: If the queue is empty
        """
        if not self.queue:
            raise ValueError("Cannot pick a lexeme count from an empty queue")
        return self.random.randint(1, len(self.queue))

    def lexeme_at_position(self, index: int) -> Optional[str]:
        """Lexeme at ``index`` in queue order, or None when out of range."""
        if index < 0 or index >= len(self.queue):
            return None
        return self.queue[index]

    def snapshot(self) -> Dict[StructureKind, List[str]]:
        return {kind: list(container) for container, kind in self._containers()}

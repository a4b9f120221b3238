"""Scripted workloads for a seeded analyzer."""

from typing import List

from lexbench.analyzers.timing import OperationRequest, TimingAnalyzer
from lexbench.core.stats import OperationKind


def build_workload(
    analyzer: TimingAnalyzer,
    searches: int = 5,
    removals: int = 2,
    misses: int = 1,
) -> List[OperationRequest]:
    """Build a search/remove script from the analyzer's seeded queue.

    Targets are picked at random queue positions using the analyzer's own
    generator. Every miss adds one search and one removal of a lexeme that
    was never seeded.

    Args:
        analyzer: Analyzer whose structures are already seeded
        searches: Number of searches for seeded lexemes
        removals: Number of removals of seeded lexemes
        misses: Number of search/remove pairs for an absent lexeme

    Returns:
        Requests in the order they should be replayed

    Raises:
        ValueError: If the analyzer has not been seeded
    """
    if not analyzer.queue:
        raise ValueError("Analyzer must be seeded before building a workload")

    requests: List[OperationRequest] = []

    for _ in range(searches):
        position = analyzer.random_lexeme_count() - 1
        requests.append(OperationRequest(OperationKind.SEARCH, analyzer.lexeme_at_position(position)))

    for _ in range(removals):
        position = analyzer.random_lexeme_count() - 1
        requests.append(OperationRequest(OperationKind.REMOVE, analyzer.lexeme_at_position(position)))

    absent = "<absent>"
    for _ in range(misses):
        requests.append(OperationRequest(OperationKind.SEARCH, absent))
        requests.append(OperationRequest(OperationKind.REMOVE, absent))

    return requests

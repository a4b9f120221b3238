"""lexbench quickstart example."""

import lexbench
from lexbench import OperationKind, OperationRequest, StructureKind


CODE = '''
def fibonacci(n):
    """Calculate fibonacci number."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)

result = fibonacci(10)
print(f"Result: {result}")
'''


def main():
    print("=" * 60)
    print("lexbench Quickstart Example")
    print("=" * 60)

    # Lexemes grouped by category
    print("\nLexemes found in the sample:")
    for category, lexemes in lexbench.analyze_code(CODE).items():
        print(f"  {category.value:<10} {sorted(lexemes)}")

    # Scripted run: the same requests are replayed on the queue and the stack
    analyzer = lexbench.TimingAnalyzer(lexbench.AnalyzerConfig(seed=42, time_unit="us"))
    analyzer.analyze_performance(
        CODE,
        [
            OperationRequest(OperationKind.SEARCH, "fibonacci"),
            OperationRequest(OperationKind.SEARCH, "missing"),
            OperationRequest(OperationKind.REMOVE, "return"),
            OperationRequest(OperationKind.ADD, "fibonacci"),
        ],
    )

    # Callback run: workload built from whatever got seeded
    analyzer = lexbench.TimingAnalyzer(seed=7)

    def workload():
        analyzer.replay(lexbench.build_workload(analyzer, searches=10, removals=3))

    stats = analyzer.analyze_performance(CODE, workload, lexbench.LexemeCategory.IDENTIFIER)

    print("Mean time per operation (ns):")
    for operation, values in lexbench.compare_structures(stats).items():
        print(f"  {operation.label:<10} queue={values['queue_mean_ns']:.1f} "
              f"stack={values['stack_mean_ns']:.1f}")

    print(f"\nQueue operations: {stats[StructureKind.QUEUE].total_count}")
    print(f"Stack operations: {stats[StructureKind.STACK].total_count}")


if __name__ == "__main__":
    main()

from typing import Mapping, Sequence, Union

from rich.console import Console
from rich.table import Table

from lexbench.core.metrics import compare_structures
from lexbench.core.stats import OperationKind, OperationStats, StructureKind
from lexbench.visualization.report import TimeUnit, coerce_unit


class PerformanceChart:

    BAR_WIDTH = 40
    BAR_STYLES = ["cyan", "magenta", "green", "yellow"]

    def __init__(self, console: Console = None, unit: Union[TimeUnit, str] = TimeUnit.US):
        self.console = console or Console()
        self.unit = coerce_unit(unit)

    def render(
        self,
        labels: Sequence[str],
        kinds: Sequence[StructureKind],
        stats: Mapping[StructureKind, OperationStats],
    ):
        if len(labels) != len(kinds):
            raise ValueError(
                f"labels and kinds must be aligned, got {len(labels)} labels for {len(kinds)} kinds"
            )

        self.console.print("\n[bold cyan] Operation Performance[/bold cyan]\n")
        self._show_table(labels, kinds, stats)
        self._show_bars(labels, kinds, stats)

        if StructureKind.QUEUE in stats and StructureKind.STACK in stats:
            self._show_comparison(stats)

        self.console.print()

    def _show_table(self, labels, kinds, stats):
        table = Table(title="Timing by structure", show_header=True)
        table.add_column("Structure", style="yellow")
        table.add_column("Operation", style="green")
        table.add_column("Count", justify="right", style="cyan")
        table.add_column(f"Elapsed ({self.unit.value})", justify="right", style="cyan")

        for label, kind in zip(labels, kinds):
            stat = stats[kind]
            for operation in OperationKind:
                table.add_row(
                    label,
                    operation.label,
                    str(stat.count(operation)),
                    f"{self.unit.convert(stat.elapsed(operation)):.3f}",
                )

        self.console.print(table)

    def _show_bars(self, labels, kinds, stats):
        peak = max(
            (stats[kind].elapsed(op) for kind in kinds for op in OperationKind),
            default=0,
        )

        for operation in OperationKind:
            self.console.print(f"\n[bold]{operation.label}[/bold]")
            for i, (label, kind) in enumerate(zip(labels, kinds)):
                elapsed = stats[kind].elapsed(operation)
                width = round(self.BAR_WIDTH * elapsed / peak) if peak else 0
                style = self.BAR_STYLES[i % len(self.BAR_STYLES)]
                bar = "█" * width
                self.console.print(
                    f"  {label:<8} [{style}]{bar}[/{style}] "
                    f"{self.unit.convert(elapsed):.3f} {self.unit.value}"
                )

    def _show_comparison(self, stats):
        self.console.print("\n[bold yellow]Queue vs Stack (mean per operation):[/bold yellow]")
        for operation, values in compare_structures(stats).items():
            ratio = values["queue_to_stack"]
            summary = f"{ratio:.2f}x" if ratio else "n/a"
            self.console.print(f"  • {operation.label}: {summary}")


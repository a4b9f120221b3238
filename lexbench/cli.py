"""lexbench command-line interface."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

import lexbench
from lexbench.analyzers import TimingAnalyzer, build_workload
from lexbench.config import AnalyzerConfig
from lexbench.core.errors import EmptyLexemePoolError
from lexbench.core.lexemes import LexemeAnalyzer, LexemeCategory
from lexbench.visualization.report import TimeUnit

app = typer.Typer(
    name="lexbench",
    help="Queue vs stack timing on lexemes extracted from code",
    add_completion=False,
)
console = Console()


def _read_code(path: Path) -> str:
    if not path.exists():
        console.print(f"[bold red]Error: Source file not found: {path}[/bold red]")
        raise typer.Exit(1)

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


@app.command()
def analyze(
    source: Path = typer.Argument(..., help="Source code file to extract lexemes from"),
    category: LexemeCategory = typer.Option(
        LexemeCategory.ALL, "--category", "-c", help="Only use lexemes of this category"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducible runs"),
    searches: int = typer.Option(5, "--searches", help="Searches for seeded lexemes"),
    removals: int = typer.Option(2, "--removals", help="Removals of seeded lexemes"),
    misses: int = typer.Option(1, "--misses", help="Search/remove pairs for an absent lexeme"),
    unit: TimeUnit = typer.Option(TimeUnit.US, "--unit", "-u", help="Time unit for the report"),
    no_chart: bool = typer.Option(False, "--no-chart", help="Skip the chart"),
    verbose: bool = typer.Option(False, "--verbose", help="Log progress"),
):
    """Seed a queue and a stack from a source file and time their operations."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(message)s'
        )

    code = _read_code(source)

    config = AnalyzerConfig(seed=seed, time_unit=unit, verbose=verbose, show_chart=not no_chart)
    analyzer = TimingAnalyzer(config, console=console)

    def workload():
        requests = build_workload(analyzer, searches=searches, removals=removals, misses=misses)
        analyzer.replay(requests)

    try:
        analyzer.analyze_performance(code, workload, category)
    except EmptyLexemePoolError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(1)


@app.command()
def lexemes(
    source: Path = typer.Argument(..., help="Source code file"),
    category: LexemeCategory = typer.Option(
        LexemeCategory.ALL, "--category", "-c", help="Only show this category"
    ),
):
    """Show the unique lexemes of a source file by category."""
    code = _read_code(source)
    lexemes_by_category = LexemeAnalyzer().analyze(code, category)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category", style="yellow")
    table.add_column("Count", justify="right", style="cyan")
    table.add_column("Lexemes", style="green")

    for lexeme_category, values in lexemes_by_category.items():
        table.add_row(lexeme_category.value, str(len(values)), Text(" ".join(sorted(values))))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"lexbench version {lexbench.__version__}")


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()

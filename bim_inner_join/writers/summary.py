"""Console summary of a finished join."""

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from bim_inner_join.models import Statistics


def build_summary_table(stats: Statistics, sources: Sequence[Path]) -> Table:
    """Build a table with one row per input file.

    Args:
        stats: Statistics collected during the join
        sources: Input files, in join order

    Returns:
        Rich table ready to print
    """
    table = Table(title="Inner join summary")
    table.add_column("#", justify="right")
    table.add_column("Input file")
    table.add_column("Variants read", justify="right")
    table.add_column("Matched", justify="right")

    for i, source in enumerate(sources):
        read = stats.records_read[i] if i < len(stats.records_read) else 0
        table.add_row(str(i + 1), str(source), f"{read:,}", f"{stats.matches:,}")

    return table


def print_summary(
    stats: Statistics,
    sources: Sequence[Path],
    console: Console | None = None,
) -> None:
    """Print summary statistics to the console."""
    console = console or Console()

    console.print(build_summary_table(stats, sources))
    console.print(f"Join steps:            {stats.steps:,}")
    console.print(f"Variants read:         {stats.total_records:,}")
    console.print(f"Matched loci:          {stats.matches:,}")
    console.print(f"Allele mismatch loci:  {stats.mismatched_loci:,}")

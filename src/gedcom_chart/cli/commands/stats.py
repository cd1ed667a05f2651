
from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_chart.cli.utils import console, run_pipeline


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    _, ctx = run_pipeline(gedcom, verbose=verbose)
    stats = ctx.stats

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(stats["individuals"]))
    table.add_row("Families", str(stats["families"]))
    table.add_row("Other records", str(stats["other"]))

    console.print(table)
    console.print(f"Software: {stats['software'] or 'unknown'}")

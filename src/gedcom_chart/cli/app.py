
from __future__ import annotations

import typer

from gedcom_chart.cli.commands.convert import convert_command
from gedcom_chart.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-chart",
    help="Convert GEDCOM files into chart-ready JSON",
    add_completion=False,
)

app.command("convert")(convert_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()

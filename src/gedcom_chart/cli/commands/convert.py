from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_chart.cli.utils import console, run_pipeline
from gedcom_chart.exporter import build_result_dict, serialize_result_to_json_string


def convert_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    images: Optional[Path] = typer.Option(
        None,
        "--images",
        "-i",
        exists=True,
        help="Directory or zip archive with image files referenced by the GEDCOM",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON output",
    ),
    indi: Optional[str] = typer.Option(
        None,
        "--indi",
        help="Id of the individual the chart starts from",
    ),
    gen: Optional[int] = typer.Option(
        None,
        "--gen",
        help="Generation number of the starting individual",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Convert a GEDCOM file to chart JSON (stdout by default).
    """
    result, ctx = run_pipeline(
        gedcom,
        images=images,
        out=out,
        indi=indi,
        generation=gen,
        pretty=pretty,
        verbose=verbose,
    )

    if out:
        if verbose:
            console.log(f"Wrote {out}")
        return

    data = build_result_dict(
        result,
        selection=ctx.stats["selection"],
        software=ctx.stats["software"],
    )
    # Plain print: rich markup would mangle JSON brackets.
    print(serialize_result_to_json_string(data, indent=2 if pretty else None))

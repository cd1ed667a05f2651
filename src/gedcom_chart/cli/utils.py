
from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from gedcom_chart.config import get_config
from gedcom_chart.convert import ConversionResult
from gedcom_chart.core.context import ConversionContext
from gedcom_chart.core.exceptions import ConversionError
from gedcom_chart.core.pipeline import Pipeline
from gedcom_chart.loader import GedcomStructureError, GedcomSyntaxError
from gedcom_chart.logging import get_logger

console = Console()
err_console = Console(stderr=True)

log = get_logger("cli")


def run_pipeline(
    gedcom: Path,
    *,
    images: Optional[Path] = None,
    out: Optional[Path] = None,
    indi: Optional[str] = None,
    generation: Optional[int] = None,
    pretty: bool = False,
    verbose: bool = False,
) -> Tuple[ConversionResult, ConversionContext]:
    """
    Run the conversion pipeline for one GEDCOM file.

    Conversion and GEDCOM syntax errors are reported on stderr and end the
    command with exit code 1; anything else propagates.
    """
    ctx = ConversionContext(
        config=get_config(),
        logger=log,
        input_path=str(gedcom),
        images_path=str(images) if images else None,
        output_path=str(out) if out else None,
        indi=indi,
        generation=generation,
        pretty=pretty,
    )

    t0 = time.perf_counter()
    try:
        result = Pipeline(ctx).run()
    except (ConversionError, GedcomSyntaxError, GedcomStructureError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if verbose:
        console.log(f"Converted {gedcom} in {time.perf_counter() - t0:.2f}s")

    return result, ctx

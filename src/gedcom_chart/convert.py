"""
GEDCOM text -> chart data + record index.

This is the single entry point the rendering side calls once the GEDCOM text
(and any image files shipped with it) are available.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from gedcom_chart.chart.converter import gedcom_entries_to_json
from gedcom_chart.chart.images import filter_images
from gedcom_chart.chart.models import ChartData
from gedcom_chart.chart.sorting import sort_children
from gedcom_chart.core.exceptions import InvalidInputError
from gedcom_chart.loader import parse_gedcom
from gedcom_chart.logging import get_logger
from gedcom_chart.records.index import RecordIndex, prepare_gedcom

log = get_logger(__name__)


@dataclass
class ConversionResult:
    chart_data: ChartData
    record_index: RecordIndex


def convert_gedcom(gedcom: str, images: Optional[Mapping[str, str]] = None) -> ConversionResult:
    """
    Convert GEDCOM text into chart data, performing additional transformations:
    - sort children by birth date
    - remove images that are not HTTP links and aren't mapped in `images`.

    Args:
        gedcom: Raw GEDCOM text.
        images: Map from file name to image URL, used to pass in image files
            loaded alongside the GEDCOM text.

    Raises:
        InvalidInputError: if the text yields no individuals or no families.
        GedcomSyntaxError, GedcomStructureError: propagated from the parser.
    """
    entries = parse_gedcom(gedcom)
    chart_data = gedcom_entries_to_json(entries)
    if (
        not chart_data
        or not chart_data.get("individuals")
        or not chart_data.get("families")
    ):
        log.debug("Rejecting GEDCOM input without individuals or families")
        raise InvalidInputError()

    return ConversionResult(
        chart_data=filter_images(sort_children(chart_data), images or {}),
        record_index=prepare_gedcom(entries),
    )

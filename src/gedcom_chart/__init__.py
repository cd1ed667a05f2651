"""
gedcom_chart: GEDCOM to chart-data conversion.

    from gedcom_chart import convert_gedcom, get_software

    result = convert_gedcom(text, images={"photo.jpg": "data:image/jpeg;base64,..."})
    result.chart_data["individuals"]
    result.record_index.individuals["I1"]
    get_software(result.record_index.head)
"""

from __future__ import annotations

from gedcom_chart.convert import ConversionResult, convert_gedcom
from gedcom_chart.core.exceptions import ConversionError, InvalidInputError
from gedcom_chart.records import RecordIndex, get_software, pointer_to_id, prepare_gedcom

__all__ = [
    "ConversionError",
    "ConversionResult",
    "InvalidInputError",
    "RecordIndex",
    "convert_gedcom",
    "get_software",
    "pointer_to_id",
    "prepare_gedcom",
]

__version__ = "0.1.0"

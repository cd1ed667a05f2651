from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gedcom_chart.chart.models import ChartData
from gedcom_chart.core.exceptions import InvalidInputError


@dataclass(frozen=True)
class Selection:
    """Individual the chart starts from and the generation it is drawn at."""

    id: str
    generation: int = 0


def get_selection(
    chart_data: ChartData,
    indi: Optional[str] = None,
    generation: Optional[int] = None,
) -> Selection:
    """
    Pick the chart's starting individual.

    The requested id is used when it exists in the data; otherwise the first
    individual is selected.
    """
    individuals = chart_data.get("individuals") or []
    if not individuals:
        raise InvalidInputError()

    if indi is not None and any(i["id"] == indi for i in individuals):
        selected = indi
    else:
        selected = individuals[0]["id"]

    return Selection(id=selected, generation=generation or 0)

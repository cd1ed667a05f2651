"""
Deterministic sibling ordering.

Children of every family are ordered by birth date, falling back to the
ordinal order of their ids whenever dates cannot decide. Inputs are never
modified; new family dicts and child lists are returned instead.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Dict, Optional

from gedcom_chart.chart.models import ChartData, ChartDate, ChartFamily, ChartIndividual
from gedcom_chart.logging import get_logger

log = get_logger(__name__)

Comparator = Callable[[str, str], int]


def strcmp(a: str, b: str) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _birth_date(indi: Optional[ChartIndividual]) -> Optional[ChartDate]:
    """Exact birth date, else the start of the birth date range."""
    birth = indi.get("birth") if indi else None
    if not birth:
        return None
    return birth.get("date") or (birth.get("dateRange") or {}).get("from")


def birth_dates_comparator(chart_data: ChartData) -> Comparator:
    """
    Return a cmp-style comparator over individual ids based on birth date.

    The id lookup is built from `chart_data` on every call; nothing is cached
    between conversions.
    """
    id_to_indi: Dict[str, ChartIndividual] = {
        indi["id"]: indi for indi in chart_data.get("individuals") or []
    }

    def compare(indi_id1: str, indi_id2: str) -> int:
        id_comparison = strcmp(indi_id1, indi_id2)
        date1 = _birth_date(id_to_indi.get(indi_id1))
        date2 = _birth_date(id_to_indi.get(indi_id2))

        if not date1 or not date1.get("year") or not date2 or not date2.get("year"):
            return id_comparison
        if date1["year"] != date2["year"]:
            return date1["year"] - date2["year"]
        if not date1.get("month") or not date2.get("month"):
            return id_comparison
        if date1["month"] != date2["month"]:
            return date1["month"] - date2["month"]
        if date1.get("day") and date2.get("day") and date1["day"] != date2["day"]:
            # Same month: the month difference (0) is returned, so different
            # days never reorder siblings.
            return date1["month"] - date2["month"]
        return id_comparison

    return compare


def sort_family_children(fam: ChartFamily, comparator: Comparator) -> ChartFamily:
    """
    Sort children by birth date in the given family.
    Does not modify the input; a family without children is returned as-is.
    """
    if not fam.get("children"):
        return fam
    return {**fam, "children": sorted(fam["children"], key=cmp_to_key(comparator))}


def sort_children(chart_data: ChartData) -> ChartData:
    """
    Sort children by birth date in every family.
    Does not modify the input; individuals are passed through untouched.
    """
    comparator = birth_dates_comparator(chart_data)
    families = [sort_family_children(fam, comparator) for fam in chart_data["families"]]
    log.debug("Sorted children in %d families", len(families))
    return {**chart_data, "families": families}

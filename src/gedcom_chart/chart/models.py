"""
Chart data shapes.

Chart data is JSON-shaped so it can be handed to a renderer as-is; these
TypedDicts only document the keys the pipeline reads and writes.
"""

from __future__ import annotations

from typing import List, TypedDict


class ChartDate(TypedDict, total=False):
    qualifier: str
    day: int
    month: int
    year: int
    text: str


# "from" is a keyword, hence the functional syntax.
DateRange = TypedDict(
    "DateRange",
    {"from": ChartDate, "to": ChartDate},
    total=False,
)


class ChartEvent(TypedDict, total=False):
    date: ChartDate
    dateRange: DateRange
    place: str
    confirmed: bool


class ChartImage(TypedDict, total=False):
    url: str
    title: str


class ChartIndividual(TypedDict, total=False):
    id: str
    firstName: str
    lastName: str
    sex: str
    famc: str
    fams: List[str]
    birth: ChartEvent
    death: ChartEvent
    images: List[ChartImage]
    notes: List[str]


class ChartFamily(TypedDict, total=False):
    id: str
    husb: str
    wife: str
    children: List[str]
    marriage: ChartEvent


class ChartData(TypedDict):
    individuals: List[ChartIndividual]
    families: List[ChartFamily]

"""
GEDCOM entries -> chart data.

Reshapes the parsed entry sequence into the JSON-shaped records a chart
renderer consumes. Only the fields needed for rendering, sorting and image
display are extracted; everything else stays reachable through the
record index.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from gedcom_chart.chart.models import (
    ChartData,
    ChartEvent,
    ChartFamily,
    ChartImage,
    ChartIndividual,
)
from gedcom_chart.dates import parse_date
from gedcom_chart.loader.segmenter import GedcomEntry
from gedcom_chart.logging import get_logger
from gedcom_chart.records.pointers import pointer_to_id

log = get_logger(__name__)


def _is_pointer(value: Optional[str]) -> bool:
    return bool(value) and len(value) > 2 and value.startswith("@") and value.endswith("@")


def _first_data(entry: GedcomEntry, tag: str) -> Optional[str]:
    child = entry.find_first(tag)
    return (child.data if child is not None else None) or None


def _pointer_value(entry: GedcomEntry) -> Optional[str]:
    """Bare id of a cross-reference payload such as '@F1@', else None."""
    return pointer_to_id(entry.data) if _is_pointer(entry.data) else None


# ----------------------------------------------------------------------
# Field builders
# ----------------------------------------------------------------------

def _event(entry: Optional[GedcomEntry]) -> Optional[ChartEvent]:
    """
    Build an event from a BIRT/DEAT/MARR entry. Returns None when the event
    carries no date, no place and is not confirmed.
    """
    if entry is None:
        return None

    event: ChartEvent = {}
    date = _first_data(entry, "DATE")
    if date:
        event.update(parse_date(date))  # type: ignore[typeddict-item]
    place = _first_data(entry, "PLAC")
    if place:
        event["place"] = place
    if entry.data.strip().upper() == "Y":
        event["confirmed"] = True

    return event or None


def _names(indi: GedcomEntry) -> Dict[str, str]:
    """First name and last name from the first NAME entry ('John /Doe/')."""
    name = indi.find_first("NAME")
    if name is None:
        return {}

    given, _, rest = name.data.partition("/")
    surname, _, suffix = rest.partition("/")
    first = " ".join(f"{given} {suffix}".split())
    last = surname.strip()

    # Explicit name pieces win over the slash notation.
    first = _first_data(name, "GIVN") or first
    last = _first_data(name, "SURN") or last

    names = {}
    if first:
        names["firstName"] = first
    if last:
        names["lastName"] = last
    return names


def _images(indi: GedcomEntry, objects: Dict[str, GedcomEntry]) -> List[ChartImage]:
    images: List[ChartImage] = []

    for obje in indi.find_children("OBJE"):
        if _is_pointer(obje.data):
            obje = objects.get(pointer_to_id(obje.data))
            if obje is None:
                continue

        record_title = _first_data(obje, "TITL")
        for file_entry in obje.find_children("FILE"):
            if not file_entry.data:
                continue
            image: ChartImage = {"url": file_entry.data}
            title = _first_data(file_entry, "TITL") or record_title
            if title:
                image["title"] = title
            images.append(image)

    return images


def _notes(record: GedcomEntry, notes: Dict[str, GedcomEntry]) -> List[str]:
    texts: List[str] = []
    for note in record.find_children("NOTE"):
        if _is_pointer(note.data):
            target = notes.get(pointer_to_id(note.data))
            text = target.data if target is not None else ""
        else:
            text = note.data
        if text:
            texts.append(text)
    return texts


# ----------------------------------------------------------------------
# Record builders
# ----------------------------------------------------------------------

def build_chart_individual(
    indi: GedcomEntry,
    objects: Dict[str, GedcomEntry],
    notes: Dict[str, GedcomEntry],
) -> ChartIndividual:
    result: ChartIndividual = {"id": pointer_to_id(indi.pointer)}
    result.update(_names(indi))  # type: ignore[typeddict-item]

    sex = _first_data(indi, "SEX")
    if sex:
        result["sex"] = sex

    famc = [fid for fid in map(_pointer_value, indi.find_children("FAMC")) if fid]
    if famc:
        result["famc"] = famc[0]
    fams = [fid for fid in map(_pointer_value, indi.find_children("FAMS")) if fid]
    if fams:
        result["fams"] = fams

    birth = _event(indi.find_first("BIRT"))
    if birth:
        result["birth"] = birth
    death = _event(indi.find_first("DEAT"))
    if death:
        result["death"] = death

    images = _images(indi, objects)
    if images:
        result["images"] = images
    texts = _notes(indi, notes)
    if texts:
        result["notes"] = texts

    return result


def build_chart_family(fam: GedcomEntry) -> ChartFamily:
    result: ChartFamily = {"id": pointer_to_id(fam.pointer)}

    husb = fam.find_first("HUSB")
    if husb is not None and _pointer_value(husb):
        result["husb"] = _pointer_value(husb)
    wife = fam.find_first("WIFE")
    if wife is not None and _pointer_value(wife):
        result["wife"] = _pointer_value(wife)

    children = [cid for cid in map(_pointer_value, fam.find_children("CHIL")) if cid]
    if children:
        result["children"] = children

    marriage = _event(fam.find_first("MARR"))
    if marriage:
        result["marriage"] = marriage

    return result


def gedcom_entries_to_json(entries: Iterable[GedcomEntry]) -> ChartData:
    """
    Convert top-level GEDCOM entries into chart data:

        {"individuals": [...], "families": [...]}

    Records are emitted in file order. INDI/FAM records without a pointer
    cannot be referenced and are skipped.
    """
    entries = list(entries)
    objects = {
        pointer_to_id(e.pointer): e for e in entries if e.tag == "OBJE" and e.pointer
    }
    notes = {
        pointer_to_id(e.pointer): e for e in entries if e.tag == "NOTE" and e.pointer
    }

    individuals = [
        build_chart_individual(e, objects, notes)
        for e in entries
        if e.tag == "INDI" and e.pointer
    ]
    families = [build_chart_family(e) for e in entries if e.tag == "FAM" and e.pointer]

    log.debug(
        "Converted chart data (individuals=%d, families=%d)",
        len(individuals),
        len(families),
    )
    return {"individuals": individuals, "families": families}

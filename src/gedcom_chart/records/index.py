from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from gedcom_chart.loader.segmenter import GedcomEntry
from gedcom_chart.logging import get_logger
from gedcom_chart.records.pointers import pointer_to_id

log = get_logger(__name__)


@dataclass
class RecordIndex:
    """
    Top-level GEDCOM entries keyed by bare identifier.

    Attributes:
        head: The first HEAD entry.
        individuals: INDI entries mapped by id.
        families: FAM entries mapped by id.
        other: Any other pointer-bearing entry mapped by id, e.g. NOTE, SOUR, OBJE.

    A later entry with an identifier already present replaces the earlier
    one (last wins). Entries without a pointer other than HEAD are not indexed.
    """

    head: Optional[GedcomEntry] = None
    individuals: Dict[str, GedcomEntry] = field(default_factory=dict)
    families: Dict[str, GedcomEntry] = field(default_factory=dict)
    other: Dict[str, GedcomEntry] = field(default_factory=dict)


def prepare_gedcom(entries: Iterable[GedcomEntry]) -> RecordIndex:
    """
    Index the flat entry sequence in a single pass.

    The caller guarantees a HEAD entry; when none exists `head` stays None.
    """
    index = RecordIndex()

    for entry in entries:
        if entry.tag == "HEAD" and index.head is None:
            index.head = entry

        if entry.tag == "INDI":
            index.individuals[pointer_to_id(entry.pointer or "")] = entry
        elif entry.tag == "FAM":
            index.families[pointer_to_id(entry.pointer or "")] = entry
        elif entry.pointer:
            index.other[pointer_to_id(entry.pointer)] = entry

    log.debug(
        "Indexed records (INDI=%d, FAM=%d, other=%d)",
        len(index.individuals),
        len(index.families),
        len(index.other),
    )
    return index

# src/gedcom_chart/loader/value_reconstructor.py

"""
Value Reconstructor: folds GEDCOM CONT / CONC lines into their parent.

    - CONC: append text directly to the parent's data (no newline).
    - CONT: append a newline + the text.

Example:
    1 NOTE Line one
    2 CONC  and more
    2 CONT Second line

    -> NOTE data "Line one and more\\nSecond line"
"""

from __future__ import annotations

from typing import List

from .segmenter import GedcomEntry


def _reconstruct_entry(entry: GedcomEntry) -> None:
    """
    Recursively reconstruct data for this entry and its children.
    Mutates the entry in place; CONC/CONT children are removed.
    """
    kept: List[GedcomEntry] = []
    data = entry.data or ""

    for child in entry.tree:
        tag = (child.tag or "").upper()

        if tag == "CONC":
            data += child.data or ""
        elif tag == "CONT":
            data += "\n" + (child.data or "")
        else:
            _reconstruct_entry(child)
            kept.append(child)

    entry.data = data
    entry.tree = kept


def reconstruct_values(entries: List[GedcomEntry]) -> List[GedcomEntry]:
    """
    Reconstruct data for every top-level entry and its descendants.

    Returns the same list, after in-place reconstruction. Structure is
    unchanged except for the removal of CONC/CONT entries.
    """
    for entry in entries:
        _reconstruct_entry(entry)

    return entries

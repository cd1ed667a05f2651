from __future__ import annotations

from typing import Optional

from gedcom_chart.loader.segmenter import GedcomEntry


def get_software(head: Optional[GedcomEntry]) -> Optional[str]:
    """
    Return the authoring software name from HEAD / SOUR / NAME, or None if
    any step of the lookup is missing.
    """
    sour = head.find_first("SOUR") if head is not None else None
    name = sour.find_first("NAME") if sour is not None else None
    return (name.data if name is not None else None) or None

from __future__ import annotations

from .index import RecordIndex, prepare_gedcom
from .pointers import pointer_to_id
from .software import get_software

__all__ = [
    "RecordIndex",
    "get_software",
    "pointer_to_id",
    "prepare_gedcom",
]

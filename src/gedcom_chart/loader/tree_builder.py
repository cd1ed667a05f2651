# src/gedcom_chart/loader/tree_builder.py

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from gedcom_chart.logging import get_logger

from .segmenter import GedcomEntry, segment_records
from .tokenizer import Token, tokenize_text
from .value_reconstructor import reconstruct_values

log = get_logger(__name__)


def build_entries(tokens: Iterable[Token]) -> List[GedcomEntry]:
    """
    Build the level-0 entry sequence from a token stream:

        tokens -> [GedcomEntry(HEAD), GedcomEntry(@I1@ INDI), ...]

    CONC/CONT continuation lines are folded into their parents.
    """
    return reconstruct_values(segment_records(tokens))


def parse_gedcom(text: str) -> List[GedcomEntry]:
    """
    Parse raw GEDCOM text into an ordered sequence of top-level entries.

    Raises:
        GedcomSyntaxError: on a malformed line.
        GedcomStructureError: on an invalid level sequence.
    """
    entries = build_entries(tokenize_text(text))
    log.debug("Parsed %d top-level GEDCOM entries", len(entries))
    return entries


def read_gedcom(path: Union[str, Path]) -> str:
    """Read a GEDCOM file as text (UTF-8, undecodable bytes replaced)."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    log.info("Loaded file: %s", file_path)
    return file_path.read_text(encoding="utf-8", errors="replace")

# src/gedcom_chart/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_chart.loader import (
        GedcomEntry,
        GedcomSyntaxError,
        GedcomStructureError,
        parse_gedcom,
        read_gedcom,
        tokenize_file,
        tokenize_line,
        tokenize_text,
    )
"""

from __future__ import annotations

from .segmenter import GedcomEntry, GedcomStructureError, segment_lines, segment_records
from .tokenizer import Token, GedcomSyntaxError, tokenize_file, tokenize_line, tokenize_text
from .tree_builder import build_entries, parse_gedcom, read_gedcom
from .value_reconstructor import reconstruct_values


__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GedcomEntry",
    "GedcomStructureError",
    "tokenize_file",
    "tokenize_line",
    "tokenize_text",
    "segment_lines",
    "segment_records",
    "build_entries",
    "parse_gedcom",
    "read_gedcom",
    "reconstruct_values",
]

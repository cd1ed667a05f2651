# src/gedcom_chart/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .tokenizer import Token


@dataclass
class GedcomEntry:
    """
    One node of the parsed GEDCOM tree.

    Attributes:
        tag: The GEDCOM tag (HEAD, INDI, BIRT, DATE, NOTE, etc.).
        pointer: Optional @XREF@ pointer declared by the line, e.g. "@I1@".
        data: The line payload; "" when the line has none. Cross-reference
            payloads such as "@F1@" on FAMC/FAMS/CHIL lines live here.
        tree: Nested entries in file order.
        level: GEDCOM level number (0 for records).
        lineno: Line number in the original text (for diagnostics).
    """

    tag: str
    pointer: Optional[str] = None
    data: str = ""
    tree: List["GedcomEntry"] = field(default_factory=list)
    level: int = 0
    lineno: int = 0

    def find_children(self, tag: str) -> List["GedcomEntry"]:
        """Return all direct children of this entry with a given tag."""
        return [c for c in self.tree if c.tag == tag]

    def find_first(self, tag: str) -> Optional["GedcomEntry"]:
        """Return the first direct child with this tag, or None."""
        for c in self.tree:
            if c.tag == tag:
                return c
        return None

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GedcomEntry {self.level}{ptr} {self.tag}: {self.data!r}>"


class GedcomStructureError(Exception):
    """Raised when hierarchical structure rules are violated."""


def segment_lines(tokens: List[Token]) -> List[GedcomEntry]:
    """
    Convert a flat list of Tokens into level-0 entries with nested sub-trees.

    Rules:
        - Level 0 tokens are roots.
        - Level N entries are children of the nearest previous entry
          with level (N-1).
        - Levels may not jump more than +1 (e.g. level 3 cannot follow level 1).
    """
    roots: List[GedcomEntry] = []
    stack: List[GedcomEntry] = []  # stack[level] = last entry at that level

    for tok in tokens:
        entry = GedcomEntry(
            tag=tok.tag,
            pointer=tok.pointer,
            data=tok.value,
            level=tok.level,
            lineno=tok.lineno,
        )

        if tok.level == 0:
            roots.append(entry)
            stack = [entry]
            continue

        if not stack:
            raise GedcomStructureError(
                f"Line {tok.lineno}: level {tok.level} entry before any level-0 record"
            )

        if tok.level > len(stack):
            raise GedcomStructureError(
                f"Line {tok.lineno}: Level jumped from {len(stack) - 1} to {tok.level} without intermediate parent"
            )

        stack = stack[: tok.level]
        stack[-1].tree.append(entry)
        stack.append(entry)

    return roots


def segment_records(tokens: List[Token]) -> List[GedcomEntry]:
    """
    Convenience wrapper over segment_lines() accepting any token iterable.
    """
    return segment_lines(list(tokens))

# src/gedcom_chart/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "HEAD", "NOTE", "CONC", "CONT".
        value: The raw line value (payload) as a string (may be empty).
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Required order:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "1 FAMC @F1@"      (pointer-valued payload stays in `value`)
    """
    raw = _strip_eol(line)

    # Handle optional UTF-8 BOM on the very first line.
    if lineno <= 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    # Leading indentation is tolerated; some exporters pretty-print levels.
    text = raw.lstrip()
    if not text:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # --- 1. Level --------------------------------------------------------
    parts = text.split(" ", 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    level_str, rest = parts
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    level = int(level_str)
    rest = rest.lstrip(" ")

    if not rest:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag after level -> {raw!r}"
        )

    # --- 2. Optional pointer ---------------------------------------------
    pointer: Optional[str] = None

    if rest.startswith("@"):
        space_index = rest.find(" ")
        if space_index == -1:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            )

        pointer = rest[:space_index]
        rest = rest[space_index + 1 :].lstrip(" ")

        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but missing tag -> {raw!r}"
            )

    # --- 3. Tag and optional value ---------------------------------------
    if " " in rest:
        tag, value = rest.split(" ", 1)
    else:
        tag, value = rest, ""

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def _tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    for lineno, raw_line in enumerate(lines, start=1):
        stripped = _strip_eol(raw_line)

        # Blank lines carry no meaning in GEDCOM; skip them.
        if not stripped.strip() or stripped == "\ufeff":
            continue

        yield tokenize_line(stripped, lineno=lineno)


def tokenize_text(text: str) -> Iterator[Token]:
    """
    Yield Token objects for every non-empty line of an in-memory GEDCOM text.

    Raises:
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    return _tokenize_lines(text.splitlines())


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Token objects for every non-empty GEDCOM line in the given file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        yield from _tokenize_lines(f)

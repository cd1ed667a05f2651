# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_chart.loader import GedcomSyntaxError, tokenize_file, tokenize_line, tokenize_text
from gedcom_chart.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_cross_reference_stays_in_value() -> None:
    token = tokenize_line("1 FAMC @F1@", lineno=3)
    assert token.pointer is None
    assert token.tag == "FAMC"
    assert token.value == "@F1@"


def test_tokenize_line_with_value() -> None:
    line = "1 NOTE This is a test note"
    token = tokenize_line(line, lineno=10)
    assert token.level == 1
    assert token.tag == "NOTE"
    assert token.value == "This is a test note"
    assert token.raw == line


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_line_pointer_without_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 @I1@", lineno=1)


def test_tokenize_text_skips_blank_lines_and_numbers_lines() -> None:
    tokens = list(tokenize_text("0 HEAD\r\n\r\n0 @I1@ INDI\n1 NAME A /B/\n"))
    assert [t.tag for t in tokens] == ["HEAD", "INDI", "NAME"]
    assert [t.lineno for t in tokens] == [1, 3, 4]


def test_tokenize_file_reads_existing_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("gedcom_1.ged")))

    assert tokens
    assert tokens[0].level == 0
    assert tokens[0].tag == "HEAD"


def test_tokenize_file_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "missing.ged"))

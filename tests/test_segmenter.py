# tests/test_segmenter.py

from __future__ import annotations

import pytest

from gedcom_chart.loader import GedcomStructureError, segment_records, tokenize_file, tokenize_text
from gedcom_chart.utils import mock_file_path


def test_mock_file_exists() -> None:
    path = mock_file_path("gedcom_1.ged")
    assert path.is_file(), f"Expected GEDCOM file at: {path}"


def test_segment_records_builds_top_level_records() -> None:
    records = segment_records(tokenize_file(mock_file_path("gedcom_1.ged")))

    assert records[0].tag == "HEAD"
    assert records[-1].tag == "TRLR"
    assert all(r.level == 0 for r in records)


def test_segment_records_nests_by_level() -> None:
    text = "0 @I1@ INDI\n1 BIRT\n2 DATE 1900\n2 PLAC Paris\n1 SEX F\n"
    (indi,) = segment_records(tokenize_text(text))

    assert indi.pointer == "@I1@"
    assert [c.tag for c in indi.tree] == ["BIRT", "SEX"]
    birt = indi.find_first("BIRT")
    assert [(c.tag, c.data) for c in birt.tree] == [("DATE", "1900"), ("PLAC", "Paris")]


def test_segment_records_rejects_level_jump() -> None:
    with pytest.raises(GedcomStructureError):
        segment_records(tokenize_text("0 HEAD\n2 VERS 5.5\n"))


def test_segment_records_rejects_leading_sub_entry() -> None:
    with pytest.raises(GedcomStructureError):
        segment_records(tokenize_text("1 NAME Orphan\n0 HEAD\n"))

from gedcom_chart.chart.converter import gedcom_entries_to_json
from gedcom_chart.loader import parse_gedcom
from gedcom_chart.utils import mock_file_path


def load_mock_chart():
    text = mock_file_path("gedcom_1.ged").read_text(encoding="utf-8")
    return gedcom_entries_to_json(parse_gedcom(text))


def by_id(records):
    return {r["id"]: r for r in records}


def test_converter_emits_records_in_file_order():
    data = load_mock_chart()

    assert [i["id"] for i in data["individuals"]] == ["I1", "I2", "I3", "I4", "I5"]
    assert [f["id"] for f in data["families"]] == ["F1"]


def test_converter_individual_fields():
    john = by_id(load_mock_chart()["individuals"])["I1"]

    assert john["firstName"] == "John"
    assert john["lastName"] == "Smith"
    assert john["sex"] == "M"
    assert john["fams"] == ["F1"]
    assert "famc" not in john
    assert john["birth"] == {
        "date": {"day": 12, "month": 3, "year": 1890},
        "place": "London",
    }
    assert john["death"] == {
        "dateRange": {"from": {"year": 1950}, "to": {"year": 1955}},
    }
    assert john["images"] == [{"url": "photos/john.jpg", "title": "John as a young man"}]
    assert john["notes"] == ["Worked at the docks for forty years."]


def test_converter_resolves_object_and_note_records():
    individuals = by_id(load_mock_chart()["individuals"])

    assert individuals["I2"]["images"] == [{"url": "http://example.com/mary.gif", "title": "Mary"}]
    assert individuals["I5"]["notes"] == ["Served in the navy\nand later kept a shop."]
    assert individuals["I5"]["famc"] == "F1"


def test_converter_family_fields():
    fam = load_mock_chart()["families"][0]

    assert fam["husb"] == "I1"
    assert fam["wife"] == "I2"
    assert fam["children"] == ["I3", "I4", "I5"]
    assert fam["marriage"] == {
        "date": {"day": 1, "month": 6, "year": 1914},
        "place": "London",
    }


def test_converter_name_pieces_override_slash_notation():
    entries = parse_gedcom(
        "0 HEAD\n"
        "0 @I1@ INDI\n"
        "1 NAME Jan /Kowalski/ Jr\n"
        "2 GIVN Johann\n"
    )
    (indi,) = gedcom_entries_to_json(entries)["individuals"]

    assert indi["firstName"] == "Johann"
    assert indi["lastName"] == "Kowalski"


def test_converter_confirmed_event_without_details():
    entries = parse_gedcom("0 HEAD\n0 @I1@ INDI\n1 DEAT Y\n1 BIRT\n")
    (indi,) = gedcom_entries_to_json(entries)["individuals"]

    assert indi["death"] == {"confirmed": True}
    assert "birth" not in indi


def test_converter_skips_records_without_pointer_and_dangling_objects():
    entries = parse_gedcom(
        "0 HEAD\n"
        "0 INDI\n"
        "1 NAME No /Pointer/\n"
        "0 @I1@ INDI\n"
        "1 OBJE @O9@\n"
        "1 FAMC @F1@\n"
        "0 @F1@ FAM\n"
        "1 CHIL @I1@\n"
    )

    data = gedcom_entries_to_json(entries)

    assert data["individuals"] == [{"id": "I1", "famc": "F1"}]
    assert data["families"] == [{"id": "F1", "children": ["I1"]}]


def test_converter_empty_input():
    assert gedcom_entries_to_json([]) == {"individuals": [], "families": []}

import json

from gedcom_chart import convert_gedcom
from gedcom_chart.chart.selection import Selection
from gedcom_chart.exporter import build_result_dict, entry_to_dict, export_result_json
from gedcom_chart.loader import parse_gedcom
from gedcom_chart.utils import mock_file_path


def convert_mock():
    return convert_gedcom(mock_file_path("gedcom_1.ged").read_text(encoding="utf-8"))


def test_entry_to_dict_omits_empty_fields():
    (indi,) = parse_gedcom("0 @I1@ INDI\n1 NAME A /B/\n1 BIRT\n")

    assert entry_to_dict(indi) == {
        "tag": "INDI",
        "pointer": "@I1@",
        "tree": [
            {"tag": "NAME", "data": "A /B/", "tree": []},
            {"tag": "BIRT", "tree": []},
        ],
    }


def test_build_result_dict_shape():
    result = convert_mock()

    data = build_result_dict(result, selection=Selection(id="I1"), software="Gramps")

    assert data["chartData"] is result.chart_data
    assert set(data["gedcom"]) == {"head", "indis", "fams", "other"}
    assert data["gedcom"]["head"]["tag"] == "HEAD"
    assert sorted(data["gedcom"]["other"]) == ["N1", "O1", "S1"]
    assert data["selection"] == {"id": "I1", "generation": 0}
    assert data["software"] == "Gramps"


def test_build_result_dict_without_extras():
    data = build_result_dict(convert_mock())
    assert "selection" not in data
    assert "software" not in data


def test_export_result_json_writes_file(tmp_path):
    out = tmp_path / "nested" / "chart.json"

    written = export_result_json(convert_mock(), out, indent=None, software="Gramps")

    assert written == out
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert len(payload["chartData"]["individuals"]) == 5
    assert payload["gedcom"]["fams"]["F1"]["pointer"] == "@F1@"
    assert payload["software"] == "Gramps"

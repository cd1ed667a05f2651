"""
json_exporter.py
JSON exporter for ConversionResult objects.

The output mirrors what a chart front end loads:

    {
      "chartData": {"individuals": [...], "families": [...]},
      "gedcom": {"head": {...}, "indis": {...}, "fams": {...}, "other": {...}},
      "selection": {"id": "I1", "generation": 0},   # optional
      "software": "...",                             # optional
    }
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from gedcom_chart.chart.selection import Selection
from gedcom_chart.convert import ConversionResult
from gedcom_chart.loader.segmenter import GedcomEntry
from gedcom_chart.logging import get_logger

log = get_logger(__name__)


def entry_to_dict(entry: Optional[GedcomEntry]) -> Optional[Dict[str, Any]]:
    """
    Render an entry as ``{"tag", "pointer"?, "data"?, "tree"}``.

    Levels and line numbers are parser diagnostics and are not exported.
    """
    if entry is None:
        return None

    out: Dict[str, Any] = {"tag": entry.tag}
    if entry.pointer:
        out["pointer"] = entry.pointer
    if entry.data:
        out["data"] = entry.data
    out["tree"] = [entry_to_dict(child) for child in entry.tree]
    return out


def build_result_dict(
    result: ConversionResult,
    *,
    selection: Optional[Selection] = None,
    software: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Convert a ConversionResult into a JSON-safe dict.
    """
    index = result.record_index
    data: Dict[str, Any] = {
        "chartData": result.chart_data,
        "gedcom": {
            "head": entry_to_dict(index.head),
            "indis": {k: entry_to_dict(v) for k, v in index.individuals.items()},
            "fams": {k: entry_to_dict(v) for k, v in index.families.items()},
            "other": {k: entry_to_dict(v) for k, v in index.other.items()},
        },
    }
    if selection is not None:
        data["selection"] = asdict(selection)
    if software is not None:
        data["software"] = software
    return data


def serialize_result_to_json_string(data: Dict[str, Any], indent: Optional[int] = 2) -> str:
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def export_result_json(
    result: ConversionResult,
    output_path: str | Path,
    indent: Optional[int] = 2,
    **extra: Any,
) -> Path:
    """
    Write the exported result to `output_path`, creating parent directories.

    Keyword arguments `selection` and `software` are forwarded to
    build_result_dict().
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting chart JSON to: %s (individuals=%d, families=%d, other=%d)",
        output_path,
        len(result.chart_data["individuals"]),
        len(result.chart_data["families"]),
        len(result.record_index.other),
    )

    payload = serialize_result_to_json_string(build_result_dict(result, **extra), indent=indent)
    output_path.write_text(payload, encoding="utf-8")

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path

"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    build_result_dict,
    entry_to_dict,
    export_result_json,
    serialize_result_to_json_string,
)

__all__ = [
    "build_result_dict",
    "entry_to_dict",
    "export_result_json",
    "serialize_result_to_json_string",
]

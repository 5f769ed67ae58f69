from __future__ import annotations

import json

from ccscan.core.records import ComplexityRecord


def format_text(record: ComplexityRecord) -> str:
    return f"{record.line} {record.name} {record.complexity}\n"


def format_json(record: ComplexityRecord) -> str:
    data = {
        "line": record.line,
        "name": record.name,
        "complexity": record.complexity,
    }
    return json.dumps(data) + "\n"


FORMATTERS = {
    "text": format_text,
    "json": format_json,
}


def get_formatter(format_name: str):
    formatter = FORMATTERS.get(format_name.lower())
    if formatter is None:
        raise ValueError(f"Unknown format: {format_name}")
    return formatter

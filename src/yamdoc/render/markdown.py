#!/usr/bin/env python3
"""
YAMDOC MARKDOWN RENDERER
------------------------
Flattens a Document into dotted-path rows and renders them as a
Markdown table. Map keys are joined with '.', list items add their index.

Author: YamDoc Team
Date: 2026-01-16
"""

from dataclasses import dataclass
from typing import List

from yamdoc.core.models import (
    BooleanValue, Document, FloatValue, IntegerValue, ListValue, MapValue,
    NullValue, Scalar, ScalarType, StringValue, format_float,
)

HEADER = (
    "| Name | Value | Description |\n"
    "|------|-------|-------------|"
)


@dataclass(frozen=True)
class TableRow:
    name: str
    value: str
    description: str


def flatten_document(document: Document) -> List[TableRow]:
    rows: List[TableRow] = []
    _flatten(document.root, "", rows)
    return rows


def _flatten(scalar: Scalar, path: str, rows: List[TableRow]):
    value = scalar.value
    if isinstance(value, MapValue):
        for item in value.items:
            _flatten(item.value, f"{path}.{item.key}" if path else item.key, rows)
    elif isinstance(value, ListValue):
        for index, item in enumerate(value.items):
            _flatten(item, f"{path}.{index}", rows)
    else:
        rows.append(TableRow(
            name=path,
            value=format_value(value),
            description=scalar.comment or "",
        ))


def format_value(value: ScalarType) -> str:
    if isinstance(value, StringValue):
        return value.text
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, IntegerValue):
        return str(value.value)
    if isinstance(value, FloatValue):
        return format_float(value.value)
    if isinstance(value, NullValue):
        return "null"
    return ""


def escape_cell(text: str) -> str:
    """Keeps a cell on one table line."""
    text = text.replace("|", "\\|")
    return "<br>".join(text.splitlines())


def render_rows(rows: List[TableRow]) -> str:
    lines = [HEADER]
    for row in rows:
        lines.append(f"| {escape_cell(row.name)} | {escape_cell(row.value)} | {escape_cell(row.description)} |")
    return "\n".join(lines)


def render_markdown(document: Document) -> str:
    return render_rows(flatten_document(document))

"""Common Rich style helper functions reused by multiple views."""

from __future__ import annotations

from dynamic_datatable.constants import SORT_DESC
from dynamic_datatable.ui.theme import (
    ACTIVE_SORT_HEADER_STYLE,
    HEADER_STYLE,
    SORT_ASC_INDICATOR,
    SORT_DESC_INDICATOR,
)

__all__ = [
    "header_label",
    "header_style",
    "column_justify",
]


def header_label(header: str, column_key: str, sort_column: str | None, direction: str) -> str:
    """Column header text, with an arrow when the column is the active sort."""
    if column_key != sort_column:
        return header
    arrow = SORT_DESC_INDICATOR if direction == SORT_DESC else SORT_ASC_INDICATOR
    return f"{header} {arrow}"


def header_style(column_key: str, sort_column: str | None):
    return ACTIVE_SORT_HEADER_STYLE if column_key == sort_column else HEADER_STYLE


def column_justify(column_type: str | None):
    if column_type in {"number", "money"}:
        return "right"
    if column_type in {"icon", "image"}:
        return "center"
    return None

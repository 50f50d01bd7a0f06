"""
Shared Rich table builder used by the datatable views.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

StyleFn = Callable[..., Optional[str]]


def _call_style(style_fn: StyleFn, value: Any, row: Dict[str, Any]) -> Optional[str]:
    # style functions take either (value) or (value, row)
    try:
        params = inspect.signature(style_fn).parameters
    except (TypeError, ValueError):
        return style_fn(value)
    if len(params) >= 2:
        return style_fn(value, row)
    return style_fn(value)


def to_cell(value: Any, style: Optional[str] = None):
    """Turn a cell value into something ``Table.add_row`` accepts.

    Strings become ``Text`` so record data is never parsed as console markup.
    Objects Rich can render (``__rich__`` / ``__rich_console__``) pass through.
    """
    if isinstance(value, Text):
        if style:
            value = value.copy()
            value.stylize(style)
        return value
    if hasattr(value, "__rich__") or hasattr(value, "__rich_console__"):
        return value
    text = "" if value is None else str(value)
    return Text(text, style=style or "")


def build_table(
    data: Sequence[Dict[str, Any]],
    columns: Sequence[str],
    headers: Optional[Sequence[Any]] = None,
    title: Optional[str] = None,
    style_map: Optional[Dict[str, StyleFn]] = None,
    column_alignments: Optional[Dict[str, str]] = None,
    header_styles: Optional[Dict[str, str]] = None,
    title_style: Optional[str] = None,
    show_lines: bool = False,
    box_style: Optional[str] = None,
    caption: Optional[str] = None,
) -> Table:
    """Build a Rich table from row dictionaries.

    Args:
        data: Rows keyed by column name
        columns: Keys to show, in order
        headers: Header labels, defaults to the column keys
        title: Table title
        style_map: Column key -> fn(value) or fn(value, row) returning a style
        column_alignments: Header label -> justify ("left", "right", "center")
        header_styles: Column key -> header style
        title_style: Style for the title
        show_lines: Draw lines between rows
        box_style: Name of a ``rich.box`` constant, e.g. "ROUNDED"
        caption: Text shown under the table

    Returns:
        The populated ``rich.table.Table``
    """
    headers = list(headers) if headers is not None else list(columns)
    style_map = style_map or {}
    column_alignments = column_alignments or {}
    header_styles = header_styles or {}

    table = Table(
        title=title,
        title_style=title_style,
        show_lines=show_lines,
        box=getattr(box, box_style) if box_style else box.HEAVY_HEAD,
        caption=caption,
        expand=False,
    )

    for key, header in zip(columns, headers):
        label = header if isinstance(header, Text) else str(header)
        table.add_column(
            label,
            justify=column_alignments.get(str(header), "left"),
            header_style=header_styles.get(key, "bold"),
        )

    for row in data:
        cells: List[Any] = []
        for key in columns:
            value = row.get(key)
            style_fn = style_map.get(key)
            style = _call_style(style_fn, value, row) if style_fn else None
            cells.append(to_cell(value, style))
        table.add_row(*cells)

    return table


def display_table(console: Console, data: Sequence[Dict[str, Any]], columns: Sequence[str], **kwargs) -> Table:
    """Build a table with ``build_table`` and print it to ``console``."""
    table = build_table(data, columns, **kwargs)
    console.print(table)
    return table

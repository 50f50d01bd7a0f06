"""
Per-cell rendering dispatched on the column type tag.

A column's ``format_fn`` always wins. Otherwise the type tag is looked up in
a table of render functions; unknown tags fall back to plain text. New cell
kinds are added with ``register_cell_renderer`` rather than by subclassing.

Default renderers return either a plain ``str`` or one of the small marker
objects below. Markers carry what a presentation layer needs and implement
``__str__`` for plain output and ``__rich__`` for terminal output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from rich.style import Style
from rich.text import Text

from dynamic_datatable.config import (
    get_currency_symbol,
    get_image_size,
    get_missing_placeholder,
)
from dynamic_datatable.schema import ActionDef, ColumnDef
from dynamic_datatable.ui.format_utils import format_money, plain_text
from dynamic_datatable.ui.theme import ACTION_STYLE, BADGE_STYLE, LINK_STYLE

__all__ = [
    "CellContext",
    "Badge",
    "Icon",
    "Image",
    "ActionControl",
    "ActionBar",
    "render_cell",
    "register_cell_renderer",
    "get_cell_renderer",
]


@dataclass(frozen=True)
class CellContext:
    """Formatting settings shared by every cell of a view."""

    currency_symbol: str = "$"
    placeholder: str = ""
    image_size: int = 40

    @classmethod
    def from_config(cls) -> "CellContext":
        return cls(
            currency_symbol=get_currency_symbol(),
            placeholder=get_missing_placeholder(),
            image_size=get_image_size(),
        )


@dataclass(frozen=True)
class Badge:
    """Inline tag around a short label."""

    label: str

    def __str__(self) -> str:
        return self.label

    def __rich__(self) -> Text:
        return Text(f" {self.label} ", style=BADGE_STYLE)


@dataclass(frozen=True)
class Icon:
    """Glyph or emoji shown verbatim at icon size."""

    glyph: str

    def __str__(self) -> str:
        return self.glyph

    def __rich__(self) -> Text:
        return Text(self.glyph)


@dataclass(frozen=True)
class Image:
    """Small fixed-size image referenced by URI."""

    src: str
    size: int = 40
    alt: str = "Table cell"

    def __str__(self) -> str:
        return self.src

    def __rich__(self) -> Text:
        # terminals cannot draw the image; show a link to it instead
        if not self.src:
            return Text("")
        return Text(f"[{self.alt}]", style=Style.parse(LINK_STYLE) + Style(link=self.src))


@dataclass(frozen=True)
class ActionControl:
    """One clickable action bound to a record."""

    label: str
    callback: Callable[[Any], None] = field(repr=False)
    record: Any = field(repr=False)

    def activate(self) -> None:
        self.callback(self.record)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class ActionBar:
    """Row of action controls for one record."""

    controls: List[ActionControl] = field(default_factory=list)

    @property
    def labels(self) -> List[str]:
        return [c.label for c in self.controls]

    def activate(self, label: str) -> None:
        """Activate the first control carrying ``label``."""
        for control in self.controls:
            if control.label == label:
                control.activate()
                return
        raise KeyError(f"No action labelled '{label}'")

    def __str__(self) -> str:
        return " ".join(self.labels)

    def __rich__(self) -> Text:
        text = Text()
        for index, control in enumerate(self.controls):
            if index:
                text.append(" ")
            text.append(f"[{control.label}]", style=ACTION_STYLE)
        return text


CellRenderFn = Callable[[Any, Any, Sequence[ActionDef], CellContext], Any]


def _render_plain(value, record, actions, ctx):
    return plain_text(value, ctx.placeholder)


def _render_money(value, record, actions, ctx):
    return format_money(value, ctx.currency_symbol, ctx.placeholder)


def _render_badge(value, record, actions, ctx):
    return Badge(plain_text(value, ctx.placeholder))


def _render_icon(value, record, actions, ctx):
    return Icon(plain_text(value, ctx.placeholder))


def _render_image(value, record, actions, ctx):
    return Image(plain_text(value), size=ctx.image_size)


def _render_actions(value, record, actions, ctx):
    return ActionBar(
        [ActionControl(a.label, a.on_click, record) for a in actions or []]
    )


_CELL_RENDERERS: Dict[str, CellRenderFn] = {
    "text": _render_plain,
    "number": _render_plain,
    "money": _render_money,
    "badge": _render_badge,
    "icon": _render_icon,
    "image": _render_image,
    "actions": _render_actions,
}


def register_cell_renderer(type_tag: str, render_fn: CellRenderFn):
    """Register or overwrite the render function for a column type tag."""
    _CELL_RENDERERS[type_tag] = render_fn


def get_cell_renderer(type_tag: str) -> CellRenderFn | None:
    return _CELL_RENDERERS.get(type_tag)


def render_cell(
    column: ColumnDef,
    value: Any,
    record: Any,
    actions: Optional[Sequence[ActionDef]] = None,
    context: Optional[CellContext] = None,
):
    """Render one cell.

    Args:
        column: Column definition; its ``format_fn`` overrides everything
        value: The record's value at ``column.key``
        record: The whole record, handed to action callbacks
        actions: Actions offered by ``actions`` columns
        context: Formatting settings, read from config when omitted

    Returns:
        ``format_fn(value)`` when set, otherwise a ``str`` or a marker object
    """
    if column.format_fn is not None:
        return column.format_fn(value)

    ctx = context or CellContext.from_config()
    render_fn = _CELL_RENDERERS.get(column.type, _render_plain)
    return render_fn(value, record, actions or [], ctx)
